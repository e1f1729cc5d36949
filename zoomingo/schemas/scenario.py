"""Pydantic schemas for scenarios as they appear on a board."""
from pydantic import BaseModel


class ScenarioOutSchema(BaseModel):
    id: int
    text: str

    class Config:
        from_attributes = True
