"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from ..core.constants import BLANK, CONSUMED, Bounds, Direction
from ..core.exceptions import AllocationFailure


class LetterGrid:
    """Square letter matrix stored as one flat buffer addressed ``row * size + col``."""

    def __init__(self, size: int) -> None:
        if not isinstance(size, int) or size < 1:
            raise AllocationFailure(f"Cannot allocate a grid of size {size!r}")
        try:
            self._cells: List[str] = [BLANK] * (size * size)
        except MemoryError as exc:
            raise AllocationFailure(f"Failed to allocate a {size}x{size} grid") from exc
        self.size = size
        self.bounds = Bounds(size)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "LetterGrid":
        """Build a grid from equal-length strings, one per row."""

        grid = cls(len(rows))
        for r, row in enumerate(rows):
            if len(row) != grid.size:
                raise ValueError(f"Row {r} has length {len(row)}, expected {grid.size}")
            for c, char in enumerate(row):
                grid.set(r, c, char)
        return grid

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def _index(self, row: int, col: int) -> int:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.size}x{self.size} grid")
        return row * self.size + col

    def get(self, row: int, col: int) -> str:
        return self._cells[self._index(row, col)]

    def set(self, row: int, col: int, char: str) -> None:
        self._cells[self._index(row, col)] = char

    def span(self, row: int, col: int, direction: Direction, length: int) -> Iterator[Tuple[int, int]]:
        for k in range(length):
            yield row + direction.d_row * k, col + direction.d_col * k

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_consumed(self, row: int, col: int) -> bool:
        return self.get(row, col) == CONSUMED

    def blank_cells(self) -> List[Tuple[int, int]]:
        return [divmod(i, self.size) for i, char in enumerate(self._cells) if char == BLANK]

    def read(self, cells: Iterable[Tuple[int, int]]) -> str:
        return "".join(self.get(r, c) for r, c in cells)

    def rows(self) -> List[str]:
        return [
            "".join(self._cells[r * self.size:(r + 1) * self.size])
            for r in range(self.size)
        ]

    def copy(self) -> "LetterGrid":
        clone = LetterGrid(self.size)
        clone._cells = list(self._cells)
        return clone

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LetterGrid):
            return self.size == other.size and self._cells == other._cells
        return NotImplemented

    def __repr__(self) -> str:
        return f"LetterGrid(size={self.size}, rows={self.rows()!r})"
