"""
Pytest configuration and shared fixtures.
"""
import io
import os
import pytest
import sys
from pathlib import Path
from typing import Callable, List

# Add src (packages) and the repository root (main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from game import Cell, CellKind, Field, FieldConfig


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def default_field() -> Field:
    """Create the default 15x15 field with 20% coverage."""
    return Field(seed=1234)


@pytest.fixture
def small_field() -> Field:
    """Create a small 3x3 field with 1 mine."""
    return Field(FieldConfig(columns=3, rows=3, coverage=12), seed=7)


@pytest.fixture
def empty_field() -> Field:
    """Create a 5x5 field with no mines."""
    return Field(FieldConfig(columns=5, rows=5, coverage=0))


@pytest.fixture
def make_field() -> Callable[..., Field]:
    """
    Factory building a field from a text layout.

    Each string is a row; '*' marks a mine, anything else is empty.
    The layout counts as already generated, so no further mines appear.
    """
    def build(layout: List[str], open_radius: int = 2) -> Field:
        config = FieldConfig(
            columns=len(layout[0]),
            rows=len(layout),
            coverage=0,
            open_radius=open_radius,
        )
        field = Field(config)
        field.generate_mines()
        for y, line in enumerate(layout):
            for x, char in enumerate(line):
                if char == "*":
                    field.get_cell(x, y).kind = CellKind.MINE
        return field

    return build


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(kind=CellKind.MINE)


# ============================================================================
# Terminal Fixtures
# ============================================================================

class FakeDriver:
    """In-memory stand-in for TerminalDriver used by controller tests."""

    def __init__(self, keys: List[str]) -> None:
        self.keys = list(keys)
        self.output = io.StringIO()
        self.entered = False
        self.restored = False

    def __enter__(self) -> "FakeDriver":
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restored = True

    def read_key(self) -> str:
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def write(self, text: str) -> None:
        self.output.write(text)

    def flush(self) -> None:
        pass

    def clear_screen(self) -> None:
        self.output.write("<clear>")

    @property
    def text(self) -> str:
        return self.output.getvalue()


@pytest.fixture
def fake_driver_factory() -> Callable[[List[str]], FakeDriver]:
    """Build fake drivers fed with a scripted list of keys."""
    return FakeDriver


class PipeStdin:
    """Stdin stand-in backed by a real pipe, so select() and os.read() work."""

    def __init__(self) -> None:
        self._read_fd, self._write_fd = os.pipe()

    def fileno(self) -> int:
        return self._read_fd

    def type(self, data: bytes) -> None:
        os.write(self._write_fd, data)

    def hang_up(self) -> None:
        if self._write_fd is not None:
            os.close(self._write_fd)
            self._write_fd = None

    def close(self) -> None:
        self.hang_up()
        os.close(self._read_fd)


@pytest.fixture
def keyboard():
    """Pipe-backed stdin; write keystrokes with ``keyboard.type(b"...")``."""
    stdin = PipeStdin()
    yield stdin
    stdin.close()
