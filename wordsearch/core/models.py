"""Data models supporting the word search game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .constants import Direction, MAX_LEVEL, Mode


GRID_SIZES: Tuple[int, ...] = (10, 15, 20)


@dataclass(frozen=True)
class PlacementRecord:
    """A word embedded in a grid, with its start cell and direction."""

    word: str
    row: int
    col: int
    direction: Direction

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return [
            (self.row + self.direction.d_row * k, self.col + self.direction.d_col * k)
            for k in range(len(self.word))
        ]


@dataclass(frozen=True)
class LevelSettings:
    """Everything needed to build one level's grid."""

    level: int
    grid_size: int
    word_count: int
    word_length: int


@dataclass(frozen=True)
class ModeSettings:
    """Per-level word length and word count tables for a mode."""

    word_lengths: Tuple[int, ...]
    word_counts: Tuple[int, ...]

    def for_level(self, level: int) -> LevelSettings:
        if not 1 <= level <= MAX_LEVEL:
            raise ValueError(f"Unknown level {level}; expected 1..{MAX_LEVEL}")
        index = level - 1
        return LevelSettings(
            level=level,
            grid_size=GRID_SIZES[index],
            word_count=self.word_counts[index],
            word_length=self.word_lengths[index],
        )


MODE_SETTINGS: Dict[Mode, ModeSettings] = {
    Mode.EASY: ModeSettings(word_lengths=(2, 3, 4), word_counts=(3, 5, 7)),
    Mode.HARD: ModeSettings(word_lengths=(5, 6, 7), word_counts=(3, 5, 7)),
}


def level_settings(mode: Mode, level: int) -> LevelSettings:
    """Look up the grid size, word count and word length for ``mode`` at ``level``."""

    return MODE_SETTINGS[Mode(mode)].for_level(level)
