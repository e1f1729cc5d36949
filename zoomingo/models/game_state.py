"""GameState model: one player's board within one game."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from zoomingo.db.session import Base


class GameState(Base):
    __tablename__ = "game_states"

    id = Column(Integer, primary_key=True, autoincrement=True)
    game_id = Column(Integer, ForeignKey("games.id"), unique=True, nullable=False, index=True)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    cells = relationship("BoardCell", back_populates="game_state", order_by="BoardCell.position")
