"""
Solution validation by simulation.

Independent of the solver: it replays a press vector on the initial lights
and checks every light ends on the target color.
"""

from typing import Sequence

from .board import Color, PuzzleInstance


def apply_presses(instance: PuzzleInstance, button_presses: Sequence[int]) -> tuple[Color, ...]:
    """Lights after pressing each button button_presses[i] times (order is irrelevant)."""
    steps = [0] * instance.num_lights
    for button, count in zip(instance.buttons, button_presses):
        for idx in button:
            steps[idx] += count
    return tuple(light.pressed(step) for light, step in zip(instance.lights, steps))


def validate(instance: PuzzleInstance, button_presses: Sequence[int]) -> bool:
    """True if the press vector respects every cap and turns all lights to the target."""
    try:
        if len(button_presses) != instance.num_buttons:
            return False
    except TypeError:
        # None, a bare int, a generator...
        return False
    for count, cap in zip(button_presses, instance.max_presses):
        if isinstance(count, bool) or not isinstance(count, int):
            return False
        if count < 0 or count > cap:
            return False
    return instance.is_goal(apply_presses(instance, button_presses))
