"""Locate guessed words in a letter grid."""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.constants import CONSUMED, DIRECTIONS, Direction
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


class GridSearcher:
    """Scans a grid for a word along all eight directions.

    Origins are visited in row-major order and, for each origin, directions
    in :data:`DIRECTIONS` order. Only the first match in that order is
    consumed, even when the word occurs more than once.
    """

    def find(self, grid: LetterGrid, word: str) -> bool:
        """Consume the first occurrence of ``word`` and report whether there was one."""

        match = self.locate(grid, word)
        if match is None:
            return False
        row, col, direction = match
        for r, c in grid.span(row, col, direction, len(word)):
            grid.set(r, c, CONSUMED)
        LOGGER.debug("Matched '%s' at (%d,%d) going %s", word, row, col, direction.name)
        return True

    def locate(self, grid: LetterGrid, word: str) -> Optional[Tuple[int, int, Direction]]:
        """Return the first ``(row, col, direction)`` holding ``word`` without touching the grid."""

        if not word:
            return None
        target = word.lower()
        length = len(target)
        for row in range(grid.size):
            for col in range(grid.size):
                for direction in DIRECTIONS:
                    if not grid.bounds.contains_span(row, col, direction, length):
                        continue
                    if self._matches(grid, target, row, col, direction):
                        return row, col, direction
        return None

    @staticmethod
    def _matches(grid: LetterGrid, target: str, row: int, col: int, direction: Direction) -> bool:
        for (r, c), char in zip(grid.span(row, col, direction, len(target)), target):
            cell = grid.get(r, c)
            if cell == CONSUMED or cell.lower() != char:
                return False
        return True
