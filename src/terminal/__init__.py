"""
Terminal module for Minesweeper.

Provides the raw-mode terminal driver and field rendering.
"""
from .driver import (
    TerminalDriver,
    TerminalError,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
)
from .render import render_field

__all__ = [
    "TerminalDriver",
    "TerminalError",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_LEFT",
    "KEY_RIGHT",
    "render_field",
]
