"""Initial tables: scenarios, players, games, game_states, board_cells.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "scenarios",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("is_free", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_scenarios_is_free"), "scenarios", ["is_free"], unique=False)

    op.create_table(
        "players",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_players_name"), "players", ["name"], unique=True)

    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("winner_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("won_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["winner_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "game_states",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("game_id", sa.Integer(), nullable=False),
        sa.Column("player_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"]),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_game_states_game_id"), "game_states", ["game_id"], unique=True)
    op.create_index(op.f("ix_game_states_player_id"), "game_states", ["player_id"], unique=False)

    op.create_table(
        "board_cells",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("game_state_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("scenario_id", sa.Integer(), nullable=False),
        sa.Column("selected_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["game_state_id"], ["game_states.id"]),
        sa.ForeignKeyConstraint(["scenario_id"], ["scenarios.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("game_state_id", "position", name="uq_board_cells_position"),
        sa.UniqueConstraint("game_state_id", "scenario_id", name="uq_board_cells_scenario"),
    )
    op.create_index(op.f("ix_board_cells_game_state_id"), "board_cells", ["game_state_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_board_cells_game_state_id"), table_name="board_cells")
    op.drop_table("board_cells")
    op.drop_index(op.f("ix_game_states_player_id"), table_name="game_states")
    op.drop_index(op.f("ix_game_states_game_id"), table_name="game_states")
    op.drop_table("game_states")
    op.drop_table("games")
    op.drop_index(op.f("ix_players_name"), table_name="players")
    op.drop_table("players")
    op.drop_index(op.f("ix_scenarios_is_free"), table_name="scenarios")
    op.drop_table("scenarios")
