"""
Exceptions raised by the light button puzzle package.

An unsolvable puzzle is not an error: the solver reports it as
``Solution(possible=False)``.
"""


class PuzzleError(Exception):
    """Base class for all puzzle errors."""


class InvalidInstance(PuzzleError, ValueError):
    """Malformed puzzle definition (bad color, empty button, index out of range...)."""


class InstanceTooLarge(PuzzleError):
    """State space bound is above the configured admission limit."""

    def __init__(self, message: str, bound: int | None = None):
        super().__init__(message)
        self.bound = bound


class SolveTimeout(PuzzleError):
    """Solve did not finish before its deadline (infeasible-by-timeout)."""


class GameOver(PuzzleError):
    """Move attempted on a play session that is already finished."""


class ButtonExhausted(PuzzleError):
    """Button pressed after reaching its maximum press count."""
