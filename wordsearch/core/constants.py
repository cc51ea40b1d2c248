"""Shared constants and enumerations for the word search game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


BLANK = " "
CONSUMED = "*"
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

ATTEMPTS_PER_WORD = 100
TOP_SCORE_SLOTS = 5
POINTS_PER_WORD = 10
DEFAULT_CHANCES = 5
MAX_LEVEL = 3


class Mode(str, Enum):
    """Game difficulty modes."""

    EASY = "EASY"
    HARD = "HARD"


class Direction(Enum):
    """The eight straight lines a word may follow, in canonical scan order."""

    RIGHT = (0, 1)
    LEFT = (0, -1)
    DOWN = (1, 0)
    UP = (-1, 0)
    DOWN_RIGHT = (1, 1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    UP_LEFT = (-1, -1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Bounds:
    """Square bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def contains_span(self, row: int, col: int, direction: Direction, length: int) -> bool:
        """Return True when every cell of the span lies inside the grid."""

        if length < 1:
            return False
        end_row = row + direction.d_row * (length - 1)
        end_col = col + direction.d_col * (length - 1)
        return self.contains(row, col) and self.contains(end_row, end_col)
