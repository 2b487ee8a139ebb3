"""
Minesweeper game module.

Provides the field model: cells, mine placement, reveal logic and
win/lose detection.
"""
from .cell import Cell, CellKind, HIDDEN_GLYPH, MINE_GLYPH, EMPTY_GLYPH
from .field import Field, FieldConfig, Direction, DEFAULT_CONFIG

__all__ = [
    "Cell",
    "CellKind",
    "HIDDEN_GLYPH",
    "MINE_GLYPH",
    "EMPTY_GLYPH",
    "Field",
    "FieldConfig",
    "Direction",
    "DEFAULT_CONFIG",
]
