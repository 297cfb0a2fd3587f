"""
Preset puzzles and random puzzle generation.

The presets are the three test cases offered on the game's home screen.
Custom games draw random initial colors and press limits of 1-3 per button.
"""

import random

from .board import Color, PuzzleInstance
from .errors import InvalidInstance

MIN_LIGHTS, MAX_LIGHTS = 2, 10
MIN_BUTTONS, MAX_BUTTONS = 1, 5
MIN_CAP, MAX_CAP = 1, 3


def make_puzzle(name: str, lights: str, buttons: list[list[int]], max_presses: list[int], target: str = "R") -> PuzzleInstance:
    """Helper to create a preset from compact notation."""
    return PuzzleInstance.create(lights, buttons, max_presses, target, name=name)


SIMPLE = make_puzzle("Simple Test", "RGBGR", [
    [0, 1, 2],
    [1, 3, 4],
    [0, 2, 4],
], [2, 2, 2])

MEDIUM = make_puzzle("Medium Test", "BGBGRB", [
    [0, 2, 5],
    [1, 3],
    [2, 4, 5],
], [3, 2, 2])

COMPLEX = make_puzzle("Complex Test", "GGBRBGR", [
    [0, 1, 2],
    [2, 3, 4],
    [4, 5, 6],
    [0, 3, 6],
], [3, 3, 2, 2])

PRESETS: list[PuzzleInstance] = [SIMPLE, MEDIUM, COMPLEX]


def get_preset(key: int | str) -> PuzzleInstance:
    """Look up a preset by list index or by name (case-insensitive)."""
    if isinstance(key, int):
        if 0 <= key < len(PRESETS):
            return PRESETS[key]
        raise KeyError(f"No preset with index {key}")
    wanted = key.strip().lower()
    for preset in PRESETS:
        if preset.name.lower() == wanted or preset.name.lower().split()[0] == wanted:
            return preset
    raise KeyError(f"No preset named {key!r}")


def random_puzzle(
    num_lights: int = 5,
    num_buttons: int = 3,
    target: Color | str = Color.RED,
    rng: random.Random | None = None,
) -> PuzzleInstance:
    """
    Random custom puzzle, the way the setup screen builds one.

    Each button controls a random non-empty subset of lights. The result may
    well be unsolvable; that is part of the game.
    """
    if not MIN_LIGHTS <= num_lights <= MAX_LIGHTS:
        raise InvalidInstance(f"Number of lights must be {MIN_LIGHTS}-{MAX_LIGHTS}, got {num_lights}")
    if not MIN_BUTTONS <= num_buttons <= MAX_BUTTONS:
        raise InvalidInstance(f"Number of buttons must be {MIN_BUTTONS}-{MAX_BUTTONS}, got {num_buttons}")
    rng = rng or random.Random()

    lights = [rng.choice(list(Color)) for _ in range(num_lights)]
    max_presses = [rng.randint(MIN_CAP, MAX_CAP) for _ in range(num_buttons)]
    buttons = []
    for _ in range(num_buttons):
        size = rng.randint(1, num_lights)
        buttons.append(sorted(rng.sample(range(num_lights), size)))

    return PuzzleInstance.create(lights, buttons, max_presses, target, name="Custom")
