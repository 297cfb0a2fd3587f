"""
Solver limits and runtime settings.

Defaults can be overridden from the environment:
- LB_SOLVER_MAX_LIGHTS, LB_SOLVER_MAX_BUTTONS, LB_SOLVER_MAX_PRESSES
- LB_SOLVER_MAX_STATES: cap on 3^L * prod(maxPresses[i] + 1)
- LB_SOLVER_TIMEOUT: seconds allowed per solve
- LB_SOLVER_LOG_LEVEL, LB_SOLVER_HOST, LB_SOLVER_PORT
"""

import os
from dataclasses import dataclass

DEFAULT_MAX_LIGHTS = 20
DEFAULT_MAX_BUTTONS = 10
DEFAULT_MAX_PRESSES = 10
DEFAULT_MAX_STATES = 2_000_000
DEFAULT_TIMEOUT = 5.0

LOG_LEVEL = os.environ.get("LB_SOLVER_LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("LB_SOLVER_HOST", "0.0.0.0")
PORT = int(os.environ.get("LB_SOLVER_PORT", "8000"))


@dataclass(frozen=True)
class SolverConfig:
    """Admission policy applied by callers before solving."""
    max_lights: int = DEFAULT_MAX_LIGHTS
    max_buttons: int = DEFAULT_MAX_BUTTONS
    max_presses_per_button: int = DEFAULT_MAX_PRESSES
    max_states: int = DEFAULT_MAX_STATES
    timeout_seconds: float | None = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "SolverConfig":
        timeout = os.environ.get("LB_SOLVER_TIMEOUT")
        if timeout is None:
            timeout_seconds = DEFAULT_TIMEOUT
        else:
            timeout_seconds = float(timeout) if timeout.strip() else 0.0
        return cls(
            max_lights=int(os.environ.get("LB_SOLVER_MAX_LIGHTS", DEFAULT_MAX_LIGHTS)),
            max_buttons=int(os.environ.get("LB_SOLVER_MAX_BUTTONS", DEFAULT_MAX_BUTTONS)),
            max_presses_per_button=int(os.environ.get("LB_SOLVER_MAX_PRESSES", DEFAULT_MAX_PRESSES)),
            max_states=int(os.environ.get("LB_SOLVER_MAX_STATES", DEFAULT_MAX_STATES)),
            timeout_seconds=timeout_seconds or None,  # 0 disables the deadline
        )


DEFAULT_CONFIG = SolverConfig()
