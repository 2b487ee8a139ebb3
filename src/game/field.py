"""
Field module for Minesweeper game.

Implements the mine field with lazy mine placement, neighbor counting,
cell revealing, cursor movement and win/lose detection.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellKind

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Direction(Enum):
    """Cursor movement directions as (dx, dy) steps."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


@dataclass(frozen=True)
class FieldConfig:
    """
    Configuration for a mine field.

    Attributes:
        columns: Number of columns.
        rows: Number of rows.
        coverage: Percentage of cells that become mines (0-99).
        open_radius: Chebyshev radius opened around a zero-count reveal.
    """

    columns: int = 15
    rows: int = 15
    coverage: int = 20
    open_radius: int = 2

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.columns < 1 or self.rows < 1:
            raise ValueError("Field dimensions must be positive")
        if self.coverage < 0:
            raise ValueError("Coverage cannot be negative")
        if self.coverage >= 100:
            raise ValueError(
                f"Coverage must be below 100% (got {self.coverage}%)"
            )
        if self.open_radius < 0:
            raise ValueError("Open radius cannot be negative")

    @property
    def mine_count(self) -> int:
        """Number of mines placed on generation."""
        return self.columns * self.rows * self.coverage // 100


DEFAULT_CONFIG = FieldConfig(columns=15, rows=15, coverage=20, open_radius=2)


# ============================================================================
# Field Class
# ============================================================================

@dataclass
class Field:
    """
    Minesweeper mine field.

    Owns the grid of cells and the player's cursor. Coordinates are
    (x, y) = (column, row) throughout; the grid is stored row-major.
    """

    config: FieldConfig = field(default_factory=lambda: DEFAULT_CONFIG)
    seed: Optional[int] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _cursor: Tuple[int, int] = (0, 0)
    _mines_generated: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid and random generator."""
        self._rng = np.random.default_rng(self.seed)
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of empty, hidden cells."""
        self._grid = [
            [Cell(col=col, row=row) for col in range(self.config.columns)]
            for row in range(self.config.rows)
        ]

    def generate_mines(self, exclude: Optional[Tuple[int, int]] = None) -> None:
        """
        Place mines at random positions.

        Draws positions until exactly ``config.mine_count`` distinct cells
        hold a mine, skipping the excluded position.

        Args:
            exclude: (x, y) position to keep mine-free. Defaults to the
                current cursor.

        Raises:
            RuntimeError: If mines were already generated.
        """
        if self._mines_generated:
            raise RuntimeError("Mines have already been generated")
        if exclude is None:
            exclude = self._cursor

        remaining = self.config.mine_count
        while remaining:
            x = int(self._rng.integers(self.config.columns))
            y = int(self._rng.integers(self.config.rows))
            cell = self._grid[y][x]
            if cell.is_mine or (x, y) == exclude:
                continue
            cell.kind = CellKind.MINE
            remaining -= 1

        self._mines_generated = True
        logger.debug(
            "Placed %d mines on %dx%d field, excluding %s",
            self.config.mine_count,
            self.config.columns,
            self.config.rows,
            exclude,
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, x: int, y: int, radius: int = 1
    ) -> List[Tuple[int, int]]:
        """
        Get in-bounds positions within a Chebyshev radius.

        Args:
            x: Column of center cell.
            y: Row of center cell.
            radius: Neighborhood radius.

        Returns:
            List of (x, y) tuples, center excluded.
        """
        neighbors = []
        for delta_y in range(-radius, radius + 1):
            for delta_x in range(-radius, radius + 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within field bounds."""
        return 0 <= x < self.config.columns and 0 <= y < self.config.rows

    def _cell_at(self, x: int, y: int) -> Cell:
        if not self._is_valid_position(x, y):
            raise IndexError(f"Position ({x}, {y}) is outside the field")
        return self._grid[y][x]

    def count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines in the 8 cells around (x, y)."""
        self._cell_at(x, y)
        count = 0
        for neighbor_x, neighbor_y in self._get_neighbors(x, y):
            if self._grid[neighbor_y][neighbor_x].is_mine:
                count += 1
        return count

    # ========================================================================
    # Field Actions (Mid-level)
    # ========================================================================

    def move_cursor(self, direction: Direction) -> Tuple[int, int]:
        """
        Move the cursor one cell, stopping at the field edges.

        Returns:
            The new (x, y) cursor position.
        """
        delta_x, delta_y = direction.value
        x, y = self._cursor
        x = min(max(x + delta_x, 0), self.config.columns - 1)
        y = min(max(y + delta_y, 0), self.config.rows - 1)
        self._cursor = (x, y)
        return self._cursor

    def reveal_cell(self, x: int, y: int) -> bool:
        """
        Reveal the cell at (x, y).

        Mines show the mine glyph; empty cells store their adjacent mine
        count for display.

        Returns:
            True if the cell was newly revealed, False if it already was.
        """
        cell = self._cell_at(x, y)
        if not cell.reveal():
            return False
        if not cell.is_mine:
            cell.value = self.count_adjacent_mines(x, y)
        return True

    def reveal_area(self, x: int, y: int, radius: Optional[int] = None) -> int:
        """
        Reveal every empty cell within a square radius of (x, y).

        Only one level deep: zero-count cells uncovered here do not open
        their own surroundings.

        Args:
            x: Column of the center cell.
            y: Row of the center cell.
            radius: Chebyshev radius; defaults to ``config.open_radius``.

        Returns:
            Number of cells newly revealed.
        """
        if radius is None:
            radius = self.config.open_radius
        positions = [(x, y)] + self._get_neighbors(x, y, radius)
        opened = 0
        for cell_x, cell_y in positions:
            if self._cell_at(cell_x, cell_y).kind != CellKind.EMPTY:
                continue
            if self.reveal_cell(cell_x, cell_y):
                opened += 1
        logger.debug("Opened %d cells around (%d, %d)", opened, x, y)
        return opened

    def reveal_all(self) -> None:
        """Reveal the whole field, resetting empty cells to the hidden marker."""
        for cell in self.cells():
            if cell.kind == CellKind.EMPTY:
                cell.value = None
            cell.reveal()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def has_won(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return all(
            cell.revealed for cell in self.cells()
            if cell.kind == CellKind.EMPTY
        )

    def has_lost(self, x: int, y: int) -> bool:
        """Check if the cell at (x, y) is a mine."""
        return self._cell_at(x, y).is_mine

    @property
    def cursor(self) -> Tuple[int, int]:
        """Current (x, y) cursor position."""
        return self._cursor

    @property
    def mines_generated(self) -> bool:
        """Whether mines have been placed yet."""
        return self._mines_generated

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell, row by row."""
        for row in self._grid:
            yield from row

    def rows(self) -> Iterator[List[Cell]]:
        """Iterate over the rows of the grid."""
        return iter(self._grid)
