"""
Terminal driver for the Minesweeper TUI.

Wraps the POSIX terminal: switching stdin to unbuffered, unechoed input,
reading single keystrokes and emitting the ANSI control sequences used to
repaint the field. Use it as a context manager so the original terminal
mode is restored on every exit path.
"""
import codecs
import io
import logging
import os
import select
import signal
import sys
import termios
import tty
from types import FrameType
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

ESC = "\x1b"
CSI = ESC + "["

KEY_UP = CSI + "A"
KEY_DOWN = CSI + "B"
KEY_RIGHT = CSI + "C"
KEY_LEFT = CSI + "D"

HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"
CLEAR_SCREEN = CSI + "2J"

# Seconds to wait after ESC for the rest of an escape sequence.
ESCAPE_TIMEOUT = 0.05


class TerminalError(RuntimeError):
    """Raised when the terminal cannot be driven."""


def _raise_exit(signum: int, frame: Optional[FrameType]) -> None:
    """Turn SIGTERM into a normal interpreter exit so cleanup runs."""
    raise SystemExit(0)


# ============================================================================
# Terminal Driver
# ============================================================================

class TerminalDriver:
    """
    Raw-mode keyboard input and ANSI output.

    Entering the context saves the terminal attributes, disables
    canonical mode and echo, hides the cursor and installs a SIGTERM
    handler. Leaving it always puts everything back. SIGINT is left
    enabled and surfaces as ``KeyboardInterrupt``.

    Keys are read byte by byte from the input file descriptor and decoded
    as UTF-8; bytes that do not decode come back as U+FFFD, which no
    binding uses.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._fd: Optional[int] = None
        self._saved_attrs: Optional[List] = None
        self._saved_sigterm = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""

    def __enter__(self) -> "TerminalDriver":
        self.enter_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    # ========================================================================
    # Mode Handling
    # ========================================================================

    def _stdin_fd(self) -> int:
        try:
            return self.stdin.fileno()
        except (AttributeError, io.UnsupportedOperation) as exc:
            raise TerminalError("Standard input has no file descriptor") from exc

    def enter_raw_mode(self) -> None:
        """
        Switch the terminal to unbuffered, unechoed input.

        The SIGTERM handler goes in before the mode changes, so a failure
        at any step leaves the terminal as it was.

        Raises:
            TerminalError: If stdin is not a TTY, its attributes cannot
                be changed, or the signal handler cannot be installed.
        """
        fd = self._stdin_fd()
        if not os.isatty(fd):
            raise TerminalError("Standard input is not a terminal")
        try:
            saved = termios.tcgetattr(fd)
            mode = termios.tcgetattr(fd)
        except termios.error as exc:
            raise TerminalError(f"Cannot enter raw mode: {exc}") from exc
        mode[tty.LFLAG] &= ~(termios.ICANON | termios.ECHO)
        mode[tty.CC][termios.VMIN] = 1
        mode[tty.CC][termios.VTIME] = 0

        try:
            previous_sigterm = signal.signal(signal.SIGTERM, _raise_exit)
        except ValueError as exc:
            raise TerminalError(f"Cannot handle SIGTERM: {exc}") from exc
        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, mode)
        except termios.error as exc:
            signal.signal(signal.SIGTERM, previous_sigterm)
            raise TerminalError(f"Cannot enter raw mode: {exc}") from exc

        self._fd = fd
        self._saved_attrs = saved
        self._saved_sigterm = previous_sigterm
        logger.debug("Terminal switched to raw mode on fd %d", fd)

        self.clear_screen()
        self.hide_cursor()
        self.flush()

    def restore(self) -> None:
        """Restore the saved terminal mode and show the cursor again."""
        if self._saved_attrs is None:
            return
        try:
            self.clear_screen()
            self.show_cursor()
            self.flush()
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
        finally:
            signal.signal(signal.SIGTERM, self._saved_sigterm)
            self._saved_attrs = None
            self._saved_sigterm = None
            logger.debug("Terminal mode restored on fd %d", self._fd)

    # ========================================================================
    # Input
    # ========================================================================

    def read_key(self) -> str:
        """
        Block until one keypress is available and return it.

        Arrow keys arrive as three-character escape sequences and are
        returned whole (see ``KEY_UP`` and friends). A lone ESC, or ESC
        followed by anything but ``[``, comes back as ESC on its own and
        the next character stays queued for the following read.

        Raises:
            TerminalError: If the input stream is closed.
        """
        key = self._read_char()
        if key != ESC or not self._input_pending():
            return key
        follow = self._read_char()
        if follow != "[":
            self._pending = follow + self._pending
            return key
        if not self._input_pending():
            return CSI
        return CSI + self._read_char()

    def _read_fd(self) -> int:
        return self._fd if self._fd is not None else self._stdin_fd()

    def _read_char(self) -> str:
        while not self._pending:
            data = os.read(self._read_fd(), 1)
            if not data:
                raise TerminalError("Input stream closed")
            self._pending = self._decoder.decode(data)
        char, self._pending = self._pending[0], self._pending[1:]
        return char

    def _input_pending(self) -> bool:
        if self._pending:
            return True
        ready, _, _ = select.select([self._read_fd()], [], [], ESCAPE_TIMEOUT)
        return bool(ready)

    # ========================================================================
    # Output
    # ========================================================================

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def flush(self) -> None:
        self.stdout.flush()

    def move_cursor(self, x: int, y: int) -> None:
        """Move the terminal cursor to 1-based column x, row y."""
        self.write(f"{CSI}{y};{x}H")

    def clear_screen(self) -> None:
        """Clear the screen and home the cursor."""
        self.write(CLEAR_SCREEN)
        self.move_cursor(1, 1)

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)
