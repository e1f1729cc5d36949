"""Board layout and win rule. Pure functions, no database access."""
import math
from typing import Sequence, TypeVar

from zoomingo.core.config import is_odd_square
from zoomingo.services.errors import InvalidBoardSize

T = TypeVar("T")


def is_supported_board_size(size: int) -> bool:
    """Odd perfect square of at least 9 (3x3, 5x5, 7x7, ...)."""
    return is_odd_square(size)


def validate_board_size(size: int, allowed: Sequence[int]) -> int:
    """Return size if it is one of the configured sizes; raise InvalidBoardSize otherwise."""
    if size not in allowed or not is_supported_board_size(size):
        sizes = ", ".join(str(s) for s in allowed)
        raise InvalidBoardSize(f"Unsupported board size: {size}. Choose one of {sizes}.")
    return size


def center_index(size: int) -> int:
    return (size - 1) // 2


def lay_out_board(free: T, drawn: Sequence[T]) -> list[T]:
    """Insert the free scenario at the center of the drawn ones."""
    board = list(drawn)
    board.insert(center_index(len(board) + 1), free)
    return board


def win_threshold(offered_count: int) -> int:
    """Marks needed to win: the board's side length."""
    return math.isqrt(offered_count)


def has_bingo(offered_count: int, marked_count: int) -> bool:
    return marked_count >= win_threshold(offered_count)
