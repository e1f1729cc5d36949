"""BoardCell model: one offered scenario at one board position; marked once selected_at is set."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from zoomingo.db.session import Base


class BoardCell(Base):
    __tablename__ = "board_cells"
    __table_args__ = (
        UniqueConstraint("game_state_id", "position", name="uq_board_cells_position"),
        UniqueConstraint("game_state_id", "scenario_id", name="uq_board_cells_scenario"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    game_state_id = Column(Integer, ForeignKey("game_states.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)  # 0-based, row-major
    scenario_id = Column(Integer, ForeignKey("scenarios.id"), nullable=False)
    selected_at = Column(DateTime(timezone=True), nullable=True)

    game_state = relationship("GameState", back_populates="cells")
