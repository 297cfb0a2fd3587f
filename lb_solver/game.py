"""
Play session: the game screen's state without any rendering.

A session starts PLAYING and ends either SOLVED (all lights on the target
color) or GAVE_UP. The optimal solution is computed once when the session
is created.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .board import Color, PuzzleInstance, Solution
from .errors import ButtonExhausted, GameOver, InvalidInstance
from .scoring import Score, score_for
from .solver import solve

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    PLAYING = "playing"
    SOLVED = "solved"
    GAVE_UP = "gave_up"


@dataclass
class GameSession:
    """Mutable play state for one puzzle."""
    instance: PuzzleInstance
    optimal: Solution | None = None
    lights: tuple[Color, ...] = ()
    presses: list[int] = field(default_factory=list)
    phase: GamePhase = GamePhase.PLAYING

    def __post_init__(self):
        if self.optimal is None:
            self.optimal = solve(self.instance)
        self.restart()

    def restart(self) -> None:
        """Back to the initial lights with no presses."""
        self.lights = self.instance.lights
        self.presses = [0] * self.instance.num_buttons
        self.phase = GamePhase.PLAYING
        # a puzzle can start already solved
        if self.instance.is_goal(self.lights):
            self.phase = GamePhase.SOLVED

    @property
    def total_presses(self) -> int:
        return sum(self.presses)

    @property
    def is_solved(self) -> bool:
        return self.phase is GamePhase.SOLVED

    @property
    def is_over(self) -> bool:
        return self.phase is not GamePhase.PLAYING

    def remaining(self, button: int) -> int:
        return self.instance.max_presses[button] - self.presses[button]

    def can_press(self, button: int) -> bool:
        return self.phase is GamePhase.PLAYING and self.remaining(button) > 0

    def press(self, button: int) -> tuple[Color, ...]:
        """Press a button once and return the new lights."""
        if self.is_over:
            raise GameOver(f"Game already finished ({self.phase.value})")
        if not 0 <= button < self.instance.num_buttons:
            raise InvalidInstance(f"No button {button + 1} in this puzzle")
        if self.remaining(button) <= 0:
            raise ButtonExhausted(
                f"Button {button + 1} reached its maximum of {self.instance.max_presses[button]} presses"
            )

        self.presses[button] += 1
        self.lights = self.instance.press(self.lights, button)
        if self.instance.is_goal(self.lights):
            self.phase = GamePhase.SOLVED
            logger.info("Puzzle solved in %d presses (optimal %s)",
                        self.total_presses, self.optimal.total_presses)
        return self.lights

    def give_up(self) -> Score:
        if self.is_over:
            raise GameOver(f"Game already finished ({self.phase.value})")
        self.phase = GamePhase.GAVE_UP
        return self.score()

    def score(self) -> Score:
        return score_for(self.optimal, self.total_presses, self.is_solved)
