"""
Cell module for Minesweeper game.

Represents individual cells on the field with their kind (empty/mine),
reveal state and the glyph drawn for them on screen.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

HIDDEN_GLYPH = "."
MINE_GLYPH = "@"
EMPTY_GLYPH = " "


class CellKind(Enum):
    """What a cell contains."""

    EMPTY = auto()
    MINE = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        col: Column index of the cell.
        row: Row index of the cell.
        kind: Whether the cell is empty or holds a mine.
        revealed: Whether the player has uncovered the cell.
        value: Adjacent mine count shown once revealed, or None while
            the cell still displays the hidden marker.
    """

    col: int = 0
    row: int = 0
    kind: CellKind = CellKind.EMPTY
    revealed: bool = False
    value: Optional[int] = None

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if it already was.
        """
        if self.revealed:
            return False
        self.revealed = True
        return True

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.kind == CellKind.MINE

    @property
    def position(self) -> tuple:
        """(col, row) of this cell."""
        return self.col, self.row

    @property
    def glyph(self) -> str:
        """
        Character drawn for this cell.

        Returns:
            '.' while hidden (or reset to hidden), '@' for a revealed
            mine, ' ' for a revealed cell with no adjacent mines, and
            the digit otherwise.
        """
        if not self.revealed:
            return HIDDEN_GLYPH
        if self.is_mine:
            return MINE_GLYPH
        if self.value is None:
            return HIDDEN_GLYPH
        if self.value == 0:
            return EMPTY_GLYPH
        return str(self.value)
