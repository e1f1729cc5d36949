from zoomingo.models.scenario import Scenario
from zoomingo.models.player import Player
from zoomingo.models.game import Game
from zoomingo.models.game_state import GameState
from zoomingo.models.board_cell import BoardCell

__all__ = ["Scenario", "Player", "Game", "GameState", "BoardCell"]
