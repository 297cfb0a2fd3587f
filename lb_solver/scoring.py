"""
Player accuracy against the optimal solution.

- Solved: min(100, round(100 * optimal / player))
- Gave up without solving: partial credit min(50, round(50 * player / optimal)),
  so giving up never scores more than half marks
- Optimal of 0 presses: 100 only if the player pressed nothing
- Unsolvable puzzle: 0

Halves round up (12.5 -> 13), matching the game screen.
"""

import math
from dataclasses import dataclass

from .board import Solution

AWARD_THRESHOLD = 90


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Score:
    presses: int
    optimal: int
    accuracy: int

    @property
    def is_award(self) -> bool:
        return self.accuracy >= AWARD_THRESHOLD


def accuracy(optimal_total: int | None, player_total: int, solved: bool, possible: bool = True) -> int:
    """Accuracy percentage (0-100)."""
    if not possible or optimal_total is None:
        return 0
    if optimal_total == 0:
        return 100 if player_total == 0 else 0
    if solved:
        if player_total <= 0:
            return 100
        return min(100, round_half_up(100 * optimal_total / player_total))
    return max(0, min(50, round_half_up(50 * player_total / optimal_total)))


def score_for(optimal: Solution, player_total: int, solved: bool) -> Score:
    optimal_total = optimal.total_presses if optimal.possible else 0
    return Score(
        presses=player_total,
        optimal=optimal_total,
        accuracy=accuracy(optimal.total_presses, player_total, solved, optimal.possible),
    )
