"""SQLAlchemy declarative base and model imports for Alembic."""
from zoomingo.db.session import Base

# Import all models so Alembic can see them
from zoomingo.models.board_cell import BoardCell  # noqa: F401
from zoomingo.models.game import Game  # noqa: F401
from zoomingo.models.game_state import GameState  # noqa: F401
from zoomingo.models.player import Player  # noqa: F401
from zoomingo.models.scenario import Scenario  # noqa: F401

__all__ = ["Base", "Scenario", "Player", "Game", "GameState", "BoardCell"]
