"""API routes: new game, select scenario, bingo check, resume."""
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, Query
from sqlalchemy.ext.asyncio import AsyncSession

from zoomingo.core.config import get_settings
from zoomingo.db.session import get_db
from zoomingo.schemas.game import (
    BingoOutSchema,
    ErrorSchema,
    NewGameOutSchema,
    ResumeOutSchema,
    SelectOutSchema,
)
from zoomingo.services.games import check_win, create_game, resume_game, select_scenario

router = APIRouter(tags=["game"], responses={400: {"model": ErrorSchema}, 500: {"model": ErrorSchema}})
settings = get_settings()


@router.get("/newGame", response_model=NewGameOutSchema)
async def new_game(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: Annotated[str, Query()],
    size: Annotated[Optional[int], Query()] = None,
):
    """Start a game for `name` with a `size`-cell board (default size if omitted)."""
    return await create_game(
        db,
        player_name=name,
        board_size=size,
        allowed_sizes=settings.board_sizes,
        default_size=settings.default_board_size,
    )


@router.post("/selectScenarios", response_model=SelectOutSchema)
async def select_scenarios(
    db: Annotated[AsyncSession, Depends(get_db)],
    game_id: Annotated[int, Form()],
    scenario_id: Annotated[int, Form()],
):
    """Mark a scenario on the game's board."""
    return await select_scenario(db, game_id=game_id, scenario_id=scenario_id)


@router.post("/bingo", response_model=BingoOutSchema)
async def bingo(
    db: Annotated[AsyncSession, Depends(get_db)],
    game_id: Annotated[int, Form()],
):
    """Check whether the game is won; winner is null while it is not."""
    return await check_win(db, game_id=game_id)


@router.get("/resumeGame", response_model=ResumeOutSchema)
async def resume(
    db: Annotated[AsyncSession, Depends(get_db)],
    game_id: Annotated[int, Query()],
    player_id: Annotated[int, Query()],
):
    """Return the saved board and selections for the player who owns the game."""
    return await resume_game(db, game_id=game_id, player_id=player_id)
