"""
lb_solver - Light Button puzzle solver package

Core components:
- PuzzleInstance: lights, buttons, press limits and target color
- solve: breadth-first search for the minimum-press solution
- validate: replays a press vector to check it reaches the target
- GameSession: play state and scoring against the optimal solution
"""

from .board import Color, PuzzleInstance, Solution
from .encoding import StateEncoder
from .errors import (
    ButtonExhausted, GameOver, InstanceTooLarge, InvalidInstance, PuzzleError, SolveTimeout,
)
from .game import GamePhase, GameSession
from .limits import admit_and_solve, check_admission, solve_with_deadline
from .presets import PRESETS, get_preset, random_puzzle
from .scoring import Score, accuracy
from .solver import press_sequence, solve, solve_puzzle
from .validator import apply_presses, validate
