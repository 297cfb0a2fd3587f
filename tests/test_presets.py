"""
Tests for preset lookup and random puzzle generation (lb_solver/presets.py).
"""

import random

import pytest

from lb_solver.board import Color
from lb_solver.errors import InvalidInstance
from lb_solver.presets import COMPLEX, MEDIUM, PRESETS, SIMPLE, get_preset, random_puzzle


def test_PR1_preset_table():
    assert [p.name for p in PRESETS] == ["Simple Test", "Medium Test", "Complex Test"]
    assert COMPLEX.num_lights == 7
    assert COMPLEX.max_presses == (3, 3, 2, 2)


@pytest.mark.parametrize("key, expected", [
    (0, SIMPLE),
    (2, COMPLEX),
    ("medium", MEDIUM),
    ("Medium Test", MEDIUM),
    (" SIMPLE ", SIMPLE),
])
def test_PR2_get_preset(key, expected):
    assert get_preset(key) is expected


@pytest.mark.parametrize("key", [3, -1, "hard"])
def test_PR3_unknown_preset(key):
    with pytest.raises(KeyError):
        get_preset(key)


def test_PR4_random_puzzle_shape():
    puzzle = random_puzzle(6, 4, "B", rng=random.Random(7))
    assert puzzle.num_lights == 6
    assert puzzle.num_buttons == 4
    assert puzzle.target is Color.BLUE
    assert all(1 <= cap <= 3 for cap in puzzle.max_presses)
    assert all(len(button) >= 1 for button in puzzle.buttons)


def test_PR5_random_puzzle_seeded():
    first = random_puzzle(5, 3, rng=random.Random(42))
    second = random_puzzle(5, 3, rng=random.Random(42))
    assert first == second


@pytest.mark.parametrize("lights, buttons", [(1, 2), (11, 2), (5, 0), (5, 6)])
def test_PR6_random_puzzle_bounds(lights, buttons):
    with pytest.raises(InvalidInstance):
        random_puzzle(lights, buttons)
