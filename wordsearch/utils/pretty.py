"""Console rendering helpers for grids, menus and score boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Sequence

from ..core.constants import MAX_LEVEL, Mode
from ..core.models import level_settings

if TYPE_CHECKING:
    from ..engine.grid import LetterGrid


CLEAR_SCREEN = "\033[2J\033[1;1H"
RULE = "=" * 72


def banner(title: str) -> str:
    return "\n".join([RULE, f"||{title.center(68)}||", RULE])


def format_grid(grid: LetterGrid) -> str:
    size = grid.size
    header_cells = [f"{c:>2}" for c in range(size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * size - 1))
    for r, row in enumerate(grid.rows()):
        row_render = " ".join(f"{char:>2}" for char in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: LetterGrid, *, label: str | None = None, stream=None) -> None:
    """Print the letter grid with row and column indexes."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def format_menu() -> str:
    options = [
        "(a) Start Game",
        "(b) Rules and Instructions",
        "(c) About",
        "(d) Highest Scores",
        "(e) Exit",
    ]
    lines = [banner("Word Guessing Game"), banner("MAIN MENU")]
    lines.extend(f"|| -> Press {option:<58}||" for option in options)
    lines.append(RULE)
    return "\n".join(lines)


def format_instructions(max_chances: int) -> str:
    lines: List[str] = [banner("INSTRUCTIONS")]
    lines.append("You have two modes, 'Easy' and 'Hard'. Each mode has 3 levels.")
    for level in range(1, MAX_LEVEL + 1):
        settings = level_settings(Mode.EASY, level)
        lines.append(
            f"Level {level}: the grid is {settings.grid_size}x{settings.grid_size} "
            f"and you must find {settings.word_count} words."
        )
    for mode in Mode:
        lines.append(f"In {mode.value.title()} Mode:")
        for level in range(1, MAX_LEVEL + 1):
            settings = level_settings(mode, level)
            lines.append(f"  - Level {level}: words are {settings.word_length} letters long.")
    lines.append("Words may run in any of eight directions, including backwards and diagonally.")
    lines.append(f"You have {max_chances} chances to make mistakes.")
    lines.append(RULE)
    return "\n".join(lines)


def format_about() -> str:
    return "\n".join([
        banner("ABOUT"),
        "A console word search: find the hidden words before your chances run out.",
        RULE,
    ])


def format_scores(scores: Sequence[int]) -> str:
    lines = [banner("HIGHEST SCORES")]
    lines.extend(f"Score {rank}: {score}" for rank, score in enumerate(scores, start=1))
    return "\n".join(lines)
