"""Flat row-major Sudoku grid of any perfect-square side."""

from __future__ import annotations
import math
import sys
from typing import Any, Callable, Iterable, List, Optional, TextIO, Tuple, TypeVar

import numpy as np

from .errors import InvalidDimensionsError, UnsolvableError

T = TypeVar("T")

EMPTY_GLYPH = "_"


class Grid:
    """
    A Sudoku board stored as a flat, row-major list of cell values.

    0 marks an empty cell; 1 to side are placed values. Index i maps to
    row i // side and column i % side. The default grid is a blank 9x9.
    """

    def __init__(self):
        """Create a blank 9x9 grid."""
        self.side = 9
        self.box_size = 3
        self.cells: List[int] = [0] * 81

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> Grid:
        """
        Create a grid from a flat row-major sequence of values.

        The side is derived from the number of values, so 81 values give a
        9x9 grid and 16 values a 4x4 grid.

        Raises:
            InvalidDimensionsError: If the values cannot form a square grid
                with square boxes, or a value is out of range.
        """
        grid = cls()
        grid.set_board(values)
        return grid

    def set_board(self, values: Iterable[int]) -> None:
        """Replace every cell (and the side) from a flat row-major sequence."""
        cells = [int(v) for v in values]
        count = len(cells)
        side = math.isqrt(count)
        if count == 0 or side * side != count:
            raise InvalidDimensionsError(
                f"Value count must be a non-zero perfect square, got {count}"
            )

        box_size = math.isqrt(side)
        if box_size * box_size != side:
            raise InvalidDimensionsError(
                f"Side must be a perfect square, got {side}"
            )

        for index, value in enumerate(cells):
            if value < 0 or value > side:
                raise InvalidDimensionsError(
                    f"Value at index {index} must be 0-{side}, got {value}"
                )

        self.side = side
        self.box_size = box_size
        self.cells = cells

    def copy(self) -> Grid:
        """Create an independent copy of the grid."""
        new_grid = Grid()
        new_grid.side = self.side
        new_grid.box_size = self.box_size
        new_grid.cells = list(self.cells)
        return new_grid

    # -- indexing -----------------------------------------------------------

    def row_of(self, index: int) -> int:
        return index // self.side

    def col_of(self, index: int) -> int:
        return index % self.side

    def index_of(self, row: int, col: int) -> int:
        return row * self.side + col

    def open_cell_positions(self) -> List[int]:
        """
        Flat indices of all empty cells, left to right, top to bottom.

        This is the order in which the backtracking engines fill cells.
        """
        flat = np.asarray(self.cells[:self.side * self.side], dtype=np.int32)
        return [int(i) for i in np.flatnonzero(flat == 0)]

    # -- cell access --------------------------------------------------------

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return self.cells[self.index_of(row, col)]

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > self.side:
            raise ValueError(f"Value must be 0-{self.side}, got {value}")
        self.cells[self.index_of(row, col)] = value

    def clear(self, row: int, col: int) -> None:
        self.cells[self.index_of(row, col)] = 0

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) == 0

    def as_array(self) -> np.ndarray:
        """The board as a (side, side) int32 array. Changes are not written back."""
        return np.asarray(self.cells, dtype=np.int32).reshape(self.side, self.side)

    def get_row(self, row: int) -> np.ndarray:
        return self.as_array()[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.as_array()[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return self.as_array()[box_row:box_row + self.box_size,
                               box_col:box_col + self.box_size].flatten()

    # -- board state --------------------------------------------------------

    def count_empty(self) -> int:
        return int(np.sum(self.as_array() == 0))

    def count_filled(self) -> int:
        return int(np.sum(self.as_array() != 0))

    def is_complete(self) -> bool:
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check that no row, column or box holds a placed value twice.

        Empty cells are ignored, so a partially filled board can be valid.
        """
        board = self.as_array()
        units = [board[i, :] for i in range(self.side)]
        units += [board[:, j] for j in range(self.side)]
        for box_row in range(0, self.side, self.box_size):
            for box_col in range(0, self.side, self.box_size):
                units.append(self.get_box(box_row, box_col))

        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(np.unique(non_zero)):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    # -- solving ------------------------------------------------------------

    def solve(self) -> bool:
        """
        Fill every empty cell in place by backtracking search.

        Returns:
            True if the grid was completed. On False the clues are untouched
            and every cell that was empty is empty again.
        """
        from ..solvers.backtracking import RecursiveBacktrackingSolver

        return RecursiveBacktrackingSolver().search(self)

    def solve_or_raise(self) -> None:
        """Like solve(), but raise UnsolvableError instead of returning False."""
        if not self.solve():
            raise UnsolvableError(
                f"No solution exists for this {self.side}x{self.side} grid"
            )

    # -- output -------------------------------------------------------------

    def get_board(self) -> List[int]:
        """The board as a flat row-major list."""
        return list(self.cells)

    def get_board_as(self, factory: Callable[[Iterable[int]], T]) -> T:
        """
        The board collected into any container built from an iterable.

        Example:
            grid.get_board_as(tuple)
        """
        return factory(iter(self.cells))

    def rows(self) -> List[List[int]]:
        return [self.cells[r * self.side:(r + 1) * self.side]
                for r in range(self.side)]

    def render(self) -> str:
        """One line per row, values separated by spaces, empties as '_'."""
        lines = []
        for row in self.rows():
            lines.append(" ".join(
                EMPTY_GLYPH if val == 0 else str(val) for val in row
            ))
        return "\n".join(lines)

    def print_board(self, file: Optional[TextIO] = None) -> None:
        print(self.render(), file=file if file is not None else sys.stdout)

    def to_string(self) -> str:
        """
        Convert board to a compact string representation.
        Uses 0 for empty cells, 1-9 for standard, A-G for 16x16.
        """
        chars = []
        for val in self.cells:
            if val <= 9:
                chars.append(str(val))
            else:
                chars.append(chr(ord('A') + val - 10))
        return ''.join(chars)

    @classmethod
    def from_string(cls, s: str) -> Grid:
        """
        Create a grid from a compact string, one character per cell.

        0 or . for empty, 1-9 for values, A-Z for 10 and up.
        """
        return cls.from_sequence(parse_compact(s))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(side={self.side}, filled={self.count_filled()})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Grid):
            return False
        return self.side == other.side and self.cells == other.cells


def cell_position(grid: Grid, index: int) -> Tuple[int, int]:
    """The (col, row) pair for a flat index, in the order the constraint checks take it."""
    return grid.col_of(index), grid.row_of(index)


def parse_compact(s: str) -> List[int]:
    """Read one cell per character: 0 or . for empty, 1-9, then A-Z for 10 and up."""
    values = []
    for c in s.strip():
        if c == '0' or c == '.':
            values.append(0)
        elif c in "123456789":
            values.append(int(c))
        elif c.isascii() and c.isalpha():
            values.append(ord(c.upper()) - ord('A') + 10)
        else:
            raise InvalidDimensionsError(f"Unexpected character {c!r}")
    return values
