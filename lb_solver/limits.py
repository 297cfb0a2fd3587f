"""
Caller-side admission policy and solve deadline.

The solver itself has no budget: it runs in time proportional to the state
space. Callers that accept puzzles from users go through check_admission and
solve_with_deadline instead of calling solve directly.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout

from .board import PuzzleInstance, Solution
from .config import DEFAULT_CONFIG, SolverConfig
from .errors import InstanceTooLarge, SolveTimeout
from .solver import solve

logger = logging.getLogger(__name__)


def check_admission(instance: PuzzleInstance, config: SolverConfig = DEFAULT_CONFIG) -> None:
    """Raise InstanceTooLarge if the puzzle exceeds any configured limit."""
    if instance.num_lights > config.max_lights:
        raise InstanceTooLarge(
            f"Too many lights: {instance.num_lights} (limit {config.max_lights})"
        )
    if instance.num_buttons > config.max_buttons:
        raise InstanceTooLarge(
            f"Too many buttons: {instance.num_buttons} (limit {config.max_buttons})"
        )
    for i, cap in enumerate(instance.max_presses):
        if cap > config.max_presses_per_button:
            raise InstanceTooLarge(
                f"Button {i + 1} allows {cap} presses (limit {config.max_presses_per_button})"
            )
    bound = instance.state_space_size()
    if bound > config.max_states:
        raise InstanceTooLarge(
            f"State space too large: {bound} states (limit {config.max_states})",
            bound=bound,
        )


def solve_with_deadline(instance: PuzzleInstance, timeout: float | None) -> Solution:
    """
    Solve in a worker thread and give up after `timeout` seconds.

    A timed-out solve raises SolveTimeout, which callers report as
    "infeasible by timeout" rather than "no solution". The worker thread is
    not interrupted; it finishes in the background and its result is dropped.
    """
    if timeout is None:
        return solve(instance)

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="lb-solve")
    future = executor.submit(solve, instance)
    try:
        return future.result(timeout=timeout)
    except FutureTimeout as e:
        logger.warning("Solve of %s timed out after %.2fs", instance.name or "puzzle", timeout)
        raise SolveTimeout(f"No answer within {timeout:g}s") from e
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def admit_and_solve(instance: PuzzleInstance, config: SolverConfig = DEFAULT_CONFIG) -> Solution:
    """Admission check followed by a deadline-bounded solve."""
    check_admission(instance, config)
    return solve_with_deadline(instance, config.timeout_seconds)
