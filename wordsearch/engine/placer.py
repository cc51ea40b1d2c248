"""Randomized word placement for new grids.

Words are dropped one attempt at a time: a random unplaced word of the
target length, a random origin and a random direction. A placement is kept
when the whole span is inside the grid and every cell is blank or already
holds the same letter, so crossing words share letters but never overwrite
each other. Blank cells are filled with random letters only after the last
attempt.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Set

from ..core.constants import ALPHABET, ATTEMPTS_PER_WORD, BLANK, DIRECTIONS, Direction
from ..core.models import PlacementRecord
from ..data.dictionary import WordList
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


class GridPlacer:
    """Builds letter grids with hidden words from an explicit random source."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def place(
        self,
        words: Iterable[str],
        size: int,
        target_count: int,
        target_length: int,
    ) -> LetterGrid:
        """Return a new ``size`` x ``size`` grid with up to ``target_count`` words embedded."""

        grid = LetterGrid(size)
        records = self.embed_words(grid, words, target_count, target_length)
        if len(records) < target_count:
            LOGGER.debug(
                "Placed %d/%d words of length %d in %dx%d grid",
                len(records),
                target_count,
                target_length,
                size,
                size,
            )
        self.fill_blanks(grid)
        return grid

    def embed_words(
        self,
        grid: LetterGrid,
        words: Iterable[str],
        target_count: int,
        target_length: int,
    ) -> List[PlacementRecord]:
        """Write words into ``grid`` and return what was placed where."""

        if target_count < 0:
            raise ValueError("target_count must be >= 0")
        if target_length < 1:
            raise ValueError("target_length must be >= 1")

        records: List[PlacementRecord] = []
        if target_length > grid.size:
            LOGGER.debug("Word length %d cannot fit a %d grid", target_length, grid.size)
            return records

        candidates = list(dict.fromkeys(w.lower() for w in WordList(words).of_length(target_length)))
        placed: Set[str] = set()
        attempts = ATTEMPTS_PER_WORD * target_count

        while len(records) < target_count and attempts > 0:
            available = [word for word in candidates if word not in placed]
            if not available:
                LOGGER.debug("No unplaced words of length %d left", target_length)
                break
            attempts -= 1

            word = self.rng.choice(available)
            row = self.rng.randrange(grid.size)
            col = self.rng.randrange(grid.size)
            direction = self.rng.choice(DIRECTIONS)
            if not self.can_place(grid, word, row, col, direction):
                continue

            for (r, c), char in zip(grid.span(row, col, direction, len(word)), word):
                grid.set(r, c, char)
            placed.add(word)
            records.append(PlacementRecord(word=word, row=row, col=col, direction=direction))
            LOGGER.debug("Placed '%s' at (%d,%d) going %s", word, row, col, direction.name)

        return records

    @staticmethod
    def can_place(grid: LetterGrid, word: str, row: int, col: int, direction: Direction) -> bool:
        if not grid.bounds.contains_span(row, col, direction, len(word)):
            return False
        for (r, c), char in zip(grid.span(row, col, direction, len(word)), word):
            existing = grid.get(r, c)
            if existing != BLANK and existing != char:
                return False
        return True

    def fill_blanks(self, grid: LetterGrid) -> int:
        """Put a random lowercase letter in every blank cell; return how many were filled."""

        blanks = grid.blank_cells()
        for row, col in blanks:
            grid.set(row, col, self.rng.choice(ALPHABET))
        return len(blanks)
