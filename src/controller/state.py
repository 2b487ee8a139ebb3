"""
Game state for the Minesweeper controller.

Holds the field together with the phase of the game, as one explicit
value owned by the controller.
"""
from dataclasses import dataclass
from enum import Enum, auto

from game import Field


class GamePhase(Enum):
    """Possible phases of a game."""

    PLAYING = auto()
    CONFIRMING_QUIT = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


@dataclass
class GameState:
    """
    State of one game.

    Attributes:
        field: The mine field being played.
        phase: Current phase of the game.
    """

    field: Field
    phase: GamePhase = GamePhase.PLAYING

    @property
    def is_running(self) -> bool:
        """Check if the game still accepts input."""
        return self.phase in (GamePhase.PLAYING, GamePhase.CONFIRMING_QUIT)

    @property
    def is_ended(self) -> bool:
        """Check if the game finished with a win or a loss."""
        return self.phase in (GamePhase.WON, GamePhase.LOST)
