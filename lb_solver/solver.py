"""
Light button puzzle solver using breadth-first search.

State = (light colors, press count per button). Pressing button i is an edge
when its count is below maxPresses[i]. BFS dequeues states in non-decreasing
order of total presses, so the first goal state dequeued is a minimal
solution.
"""

import logging
from collections import deque

from .board import NUM_COLORS, PuzzleInstance, Solution
from .encoding import StateEncoder

logger = logging.getLogger(__name__)


def solve(instance: PuzzleInstance) -> Solution:
    """
    Find the minimum-press solution for a puzzle, or report it impossible.

    The instance is validated on construction, so by the time it reaches
    here it is well formed. Ties between minimal press vectors go to the one
    discovered first when buttons are expanded in index order.

    Returns:
        Solution.found(...) with the press vector, or Solution.impossible()
        when no goal state is reachable within the press limits.
    """
    encoder = StateEncoder(instance)
    target = int(instance.target)
    buttons = [tuple(sorted(button)) for button in instance.buttons]
    caps = instance.max_presses

    start_lights = tuple(int(light) for light in instance.lights)
    start_presses = (0,) * instance.num_buttons
    start_key = encoder.encode(start_lights, start_presses)

    # key -> (parent key, button pressed); doubles as the visited set
    parent: dict[int, tuple[int, int] | None] = {start_key: None}
    queue = deque([(start_lights, start_presses, start_key)])
    explored = 0

    while queue:
        lights, presses, key = queue.popleft()
        explored += 1

        if all(light == target for light in lights):
            button_presses = _tally_presses(parent, key, instance.num_buttons)
            logger.debug(
                "Solved %s in %d presses after %d states",
                instance.name or "puzzle", sum(button_presses), explored,
            )
            return Solution.found(button_presses, states_explored=explored)

        for button, controlled in enumerate(buttons):
            if presses[button] >= caps[button]:
                continue

            next_lights = list(lights)
            for idx in controlled:
                next_lights[idx] = (next_lights[idx] + 1) % NUM_COLORS
            next_presses = list(presses)
            next_presses[button] += 1

            next_key = encoder.encode(next_lights, next_presses)
            if next_key in parent:
                continue
            parent[next_key] = (key, button)
            queue.append((tuple(next_lights), tuple(next_presses), next_key))

    logger.debug(
        "No solution for %s after exhausting %d states",
        instance.name or "puzzle", explored,
    )
    return Solution.impossible(states_explored=explored)


def _tally_presses(
    parent: dict[int, tuple[int, int] | None], goal_key: int, num_buttons: int
) -> list[int]:
    """Walk back-pointers from the goal to the start, counting presses per button."""
    counts = [0] * num_buttons
    link = parent[goal_key]
    while link is not None:
        previous, button = link
        counts[button] += 1
        link = parent[previous]
    return counts


def solve_puzzle(lights, buttons, max_presses, target, name: str = "") -> Solution:
    """
    Main entry point for loose input.

    Args:
        lights: "RGBGR", ["R", "G", ...] or color values 0-2
        buttons: light indices (0-based) controlled by each button
        max_presses: press limit per button
        target: target color

    Raises:
        InvalidInstance: if the puzzle is malformed (before any search)
    """
    instance = PuzzleInstance.create(lights, buttons, max_presses, target, name=name)
    return solve(instance)


def press_sequence(instance: PuzzleInstance, button_presses) -> list[int]:
    """One concrete press order for a press vector (button index order)."""
    if len(button_presses) != instance.num_buttons:
        raise ValueError(
            f"Expected {instance.num_buttons} press counts, got {len(button_presses)}"
        )
    sequence = []
    for button, count in enumerate(button_presses):
        sequence.extend([button] * count)
    return sequence
