"""Player model: created lazily the first time a name starts a game."""
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from zoomingo.db.session import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
