"""
Game controller for terminal Minesweeper.

Turns keystrokes into field actions, sequences turns, decides win and
loss, and drives the terminal to repaint after each move.
"""
import logging
from typing import Optional

from game import Field, FieldConfig, DEFAULT_CONFIG
from terminal import TerminalDriver, render_field

from .keys import Action, MOVES, CONFIRM_QUIT_KEY, action_for_key
from .state import GamePhase, GameState

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

QUIT_PROMPT = "Are you sure you want to quit? (y/N)"
EXIT_PROMPT = "Press any key to exit"
END_MESSAGES = {
    GamePhase.WON: "You won!",
    GamePhase.LOST: "You lost!",
}


# ============================================================================
# Game Controller
# ============================================================================

class GameController:
    """
    Runs one game of Minesweeper on a terminal.

    ``handle_key`` is the state machine and only touches the game state;
    ``run`` wires it to the terminal driver with a blocking
    read, update, render loop.
    """

    def __init__(
        self,
        driver: TerminalDriver,
        config: FieldConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            driver: Terminal used for input and output.
            config: Field configuration.
            seed: Random seed for mine placement.
        """
        self.driver = driver
        self.state = GameState(Field(config, seed=seed))

    @property
    def field(self) -> Field:
        return self.state.field

    # ========================================================================
    # State Machine
    # ========================================================================

    def handle_key(self, key: str) -> GamePhase:
        """
        Apply one keystroke to the game state.

        Args:
            key: Keystroke as returned by the driver.

        Returns:
            The phase after the keystroke.
        """
        phase = self.state.phase
        if phase == GamePhase.CONFIRMING_QUIT:
            self._confirm_quit(key)
        elif phase == GamePhase.PLAYING:
            self._play(key)

        if self.state.phase != phase:
            logger.info(
                "Phase %s -> %s", phase.name, self.state.phase.name
            )
        return self.state.phase

    def _play(self, key: str) -> None:
        action = action_for_key(key)
        if action is None:
            return
        if action in MOVES:
            self.field.move_cursor(MOVES[action])
        elif action == Action.REVEAL:
            self._reveal()
        elif action == Action.QUIT:
            self.state.phase = GamePhase.CONFIRMING_QUIT

    def _confirm_quit(self, key: str) -> None:
        if key == CONFIRM_QUIT_KEY:
            self.state.phase = GamePhase.QUIT
        else:
            self.state.phase = GamePhase.PLAYING

    def _reveal(self) -> None:
        """Reveal the cell under the cursor and settle the outcome."""
        field = self.field
        x, y = field.cursor

        if not field.mines_generated:
            field.generate_mines(exclude=(x, y))

        stepped_on_mine = field.has_lost(x, y)
        newly_revealed = field.reveal_cell(x, y)
        logger.debug("Revealed (%d, %d)", x, y)

        if stepped_on_mine:
            self.state.phase = GamePhase.LOST
            return

        if newly_revealed and field.get_cell(x, y).value == 0:
            field.reveal_area(x, y)

        if field.has_won():
            self.state.phase = GamePhase.WON

    # ========================================================================
    # Terminal Loop
    # ========================================================================

    def render(self) -> None:
        """Repaint the field and any prompt for the current phase."""
        self.driver.clear_screen()
        self.driver.write(render_field(self.field) + "\n")
        if self.state.phase == GamePhase.CONFIRMING_QUIT:
            self.driver.write(QUIT_PROMPT + "\n")
        elif self.state.is_ended:
            self.driver.write(END_MESSAGES[self.state.phase] + "\n")
            self.driver.write(EXIT_PROMPT + "\n")
        self.driver.flush()

    def run(self) -> GamePhase:
        """
        Play until the game ends or the player quits.

        Returns:
            The final phase: WON, LOST or QUIT.
        """
        config = self.field.config
        logger.info(
            "Starting game: %dx%d, %d%% coverage",
            config.columns,
            config.rows,
            config.coverage,
        )
        self.render()

        while self.state.is_running:
            key = self.driver.read_key()
            self.handle_key(key)
            if self.state.is_running:
                self.render()

        if self.state.is_ended:
            self._finish()

        logger.info("Game over: %s", self.state.phase.name)
        return self.state.phase

    def _finish(self) -> None:
        """Disclose the whole board and wait for a final keystroke."""
        self.field.reveal_all()
        self.render()
        logger.debug("Final board:\n%s", render_field(self.field))
        self.driver.read_key()
