"""Pydantic schemas for game requests and responses."""
from pydantic import BaseModel

from zoomingo.schemas.scenario import ScenarioOutSchema


class PlayerBoardSchema(BaseModel):
    id: int
    name: str
    board: list[ScenarioOutSchema]


class ResumedPlayerSchema(PlayerBoardSchema):
    selected_scenarios: list[int]


class NewGameOutSchema(BaseModel):
    game_id: int
    player: PlayerBoardSchema


class SelectOutSchema(BaseModel):
    game_id: int
    scenario_id: int


class BingoOutSchema(BaseModel):
    game_id: int
    winner: str | None = None


class ResumeOutSchema(BaseModel):
    game_id: int
    player: ResumedPlayerSchema


class ErrorSchema(BaseModel):
    error: str
