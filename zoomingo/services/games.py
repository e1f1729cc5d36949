"""Game lifecycle: create a board, mark scenarios, check for bingo, resume."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from zoomingo.models.board_cell import BoardCell
from zoomingo.models.game import Game
from zoomingo.models.game_state import GameState
from zoomingo.models.player import Player
from zoomingo.schemas.game import (
    BingoOutSchema,
    NewGameOutSchema,
    PlayerBoardSchema,
    ResumedPlayerSchema,
    ResumeOutSchema,
    SelectOutSchema,
)
from zoomingo.schemas.scenario import ScenarioOutSchema
from zoomingo.services import catalog
from zoomingo.services.errors import (
    GameAlreadyWon,
    GameNotFound,
    InvalidPlayerName,
    NotSessionOwner,
    ScenarioNotSelectable,
)
from zoomingo.services.rules import has_bingo, lay_out_board, validate_board_size

logger = logging.getLogger(__name__)

GAME_WON_MSG = "Game has already been won."


def _now() -> datetime:
    return datetime.now(timezone.utc)


async def _get_or_create_player(db: AsyncSession, name: str) -> Player:
    player = await db.scalar(select(Player).where(Player.name == name))
    if player is None:
        player = Player(name=name)
        db.add(player)
        await db.flush()  # assigns player.id
        logger.info("Created player %d (%s)", player.id, name)
    return player


async def _load_game(db: AsyncSession, game_id: int) -> tuple[Game, GameState]:
    game = await db.get(Game, game_id)
    state = await db.scalar(select(GameState).where(GameState.game_id == game_id))
    if game is None or state is None:
        raise GameNotFound(f"Game {game_id} does not exist")
    return game, state


async def create_game(
    session: AsyncSession,
    *,
    player_name: str,
    board_size: Optional[int],
    allowed_sizes: Sequence[int],
    default_size: int,
) -> NewGameOutSchema:
    """
    Start a new game for player_name with a fresh random board.

    The free scenario sits at the center; the rest are distinct random draws.
    The player row is reused when the name already exists.
    """
    name = (player_name or "").strip()
    if not name:
        raise InvalidPlayerName("Please enter your name to start a game.")
    size = validate_board_size(default_size if board_size is None else board_size, allowed_sizes)

    free = await catalog.get_free(session)
    drawn = await catalog.pick_random(session, size - 1)
    board = lay_out_board(free, drawn)

    player = await _get_or_create_player(session, name)

    game = Game(winner_id=None)
    session.add(game)
    await session.flush()  # assigns game.id

    state = GameState(game_id=game.id, player_id=player.id)
    session.add(state)
    await session.flush()

    session.add_all(
        BoardCell(game_state_id=state.id, position=pos, scenario_id=scenario.id)
        for pos, scenario in enumerate(board)
    )
    await session.commit()
    logger.info("Game %d created for player %d with a %d-cell board", game.id, player.id, size)

    return NewGameOutSchema(
        game_id=game.id,
        player=PlayerBoardSchema(
            id=player.id,
            name=player.name,
            board=[ScenarioOutSchema.model_validate(s) for s in board],
        ),
    )


async def select_scenario(
    session: AsyncSession,
    *,
    game_id: int,
    scenario_id: int,
) -> SelectOutSchema:
    """Mark one offered, not yet marked scenario on the game's board."""
    game, state = await _load_game(session, game_id)
    if game.winner_id is not None:
        raise GameAlreadyWon(GAME_WON_MSG)

    cell = await session.scalar(
        select(BoardCell).where(
            BoardCell.game_state_id == state.id,
            BoardCell.scenario_id == scenario_id,
        )
    )
    # never offered and already marked get the same answer
    if cell is None or cell.selected_at is not None:
        raise ScenarioNotSelectable(f"Could not select scenario ID: {scenario_id}")

    cell.selected_at = _now()
    await session.commit()
    logger.debug("Game %d: scenario %d selected", game_id, scenario_id)

    return SelectOutSchema(game_id=game_id, scenario_id=scenario_id)


async def check_win(session: AsyncSession, *, game_id: int) -> BingoOutSchema:
    """
    Decide whether the game's player has bingo.

    A game that already has a winner is rejected rather than re-reported.
    Otherwise the player wins once the number of marked cells reaches the
    board's side length; the winner is recorded at most once.
    """
    game, state = await _load_game(session, game_id)
    if game.winner_id is not None:
        raise GameAlreadyWon(GAME_WON_MSG)

    offered = await session.scalar(
        select(func.count(BoardCell.id)).where(BoardCell.game_state_id == state.id)
    )
    marked = await session.scalar(
        select(func.count(BoardCell.id)).where(
            BoardCell.game_state_id == state.id,
            BoardCell.selected_at.is_not(None),
        )
    )
    if not has_bingo(offered or 0, marked or 0):
        return BingoOutSchema(game_id=game_id, winner=None)

    result = await session.execute(
        update(Game)
        .where(Game.id == game_id, Game.winner_id.is_(None))
        .values(winner_id=state.player_id, won_at=_now())
    )
    if result.rowcount != 1:
        await session.rollback()
        raise GameAlreadyWon(GAME_WON_MSG)
    await session.commit()

    player = await session.get(Player, state.player_id)
    logger.info("Game %d won by player %d (%d/%d marked)", game_id, state.player_id, marked, offered)
    return BingoOutSchema(game_id=game_id, winner=player.name)


async def resume_game(
    session: AsyncSession,
    *,
    game_id: int,
    player_id: int,
) -> ResumeOutSchema:
    """Return the board and marks of a game, only to the player who owns it."""
    _, state = await _load_game(session, game_id)
    if state.player_id != player_id:
        raise NotSessionOwner(f"Cannot resume game: Player {player_id} was not part of game {game_id}")

    player = await session.get(Player, player_id)
    cells = (
        await session.execute(
            select(BoardCell)
            .where(BoardCell.game_state_id == state.id)
            .order_by(BoardCell.position)
            .execution_options(populate_existing=True)
        )
    ).scalars().all()

    scenarios = await catalog.get_by_ids(session, (c.scenario_id for c in cells))
    marked = sorted(
        (c for c in cells if c.selected_at is not None),
        key=lambda c: (c.selected_at, c.position),
    )

    return ResumeOutSchema(
        game_id=game_id,
        player=ResumedPlayerSchema(
            id=player.id,
            name=player.name,
            board=[ScenarioOutSchema.model_validate(scenarios[c.scenario_id]) for c in cells],
            selected_scenarios=[c.scenario_id for c in marked],
        ),
    )
