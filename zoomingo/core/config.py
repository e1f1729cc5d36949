"""Application configuration from environment."""
import math

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


def is_odd_square(size: int) -> bool:
    root = math.isqrt(size) if size > 0 else 0
    return size >= 9 and size % 2 == 1 and root * root == size


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Zoomingo"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./zoomingo.db"

    # Board sizes offered to clients; each one is an odd perfect square
    board_sizes: list[int] = [9, 25, 49]
    default_board_size: int = 25

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("board_sizes")
    @classmethod
    def _check_board_sizes(cls, sizes: list[int]) -> list[int]:
        bad = [s for s in sizes if not is_odd_square(s)]
        if bad:
            raise ValueError(f"board sizes must be odd perfect squares >= 9, got {bad}")
        if not sizes:
            raise ValueError("at least one board size is required")
        return sorted(set(sizes))

    @model_validator(mode="after")
    def _check_default_size(self) -> "Settings":
        if self.default_board_size not in self.board_sizes:
            raise ValueError(
                f"default_board_size {self.default_board_size} is not one of {self.board_sizes}"
            )
        return self


def get_settings() -> Settings:
    return Settings()
