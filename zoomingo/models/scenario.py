"""Scenario model: one bingo prompt; exactly one row is the free center prompt."""
from sqlalchemy import Boolean, Column, Integer, Text

from zoomingo.db.session import Base


class Scenario(Base):
    __tablename__ = "scenarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    is_free = Column(Boolean, nullable=False, default=False, index=True)
