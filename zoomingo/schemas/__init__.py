from zoomingo.schemas.scenario import ScenarioOutSchema
from zoomingo.schemas.game import (
    BingoOutSchema,
    ErrorSchema,
    NewGameOutSchema,
    PlayerBoardSchema,
    ResumedPlayerSchema,
    ResumeOutSchema,
    SelectOutSchema,
)

__all__ = [
    "ScenarioOutSchema",
    "PlayerBoardSchema",
    "ResumedPlayerSchema",
    "NewGameOutSchema",
    "SelectOutSchema",
    "BingoOutSchema",
    "ResumeOutSchema",
    "ErrorSchema",
]
