"""
Tests for solution validation (lb_solver/validator.py).
"""

import pytest

from lb_solver.board import Color
from lb_solver.presets import MEDIUM, SIMPLE
from lb_solver.solver import solve
from lb_solver.validator import apply_presses, validate


def test_V1_accepts_solver_output():
    solution = solve(MEDIUM)
    assert validate(MEDIUM, solution.button_presses)


def test_V2_apply_presses_simulates_cycle():
    # RGBGR, button 1 once: lights 0,1,2 advance
    assert apply_presses(SIMPLE, [1, 0, 0]) == (
        Color.GREEN, Color.BLUE, Color.RED, Color.GREEN, Color.RED
    )
    # three presses of a button are a full cycle
    assert apply_presses(SIMPLE, [0, 0, 0]) == SIMPLE.lights


@pytest.mark.parametrize("presses", [
    [2, 1, 0],        # wrong vector
    [1, 3, 0],        # over the cap of button 2
    [1, 2],           # too short
    [1, 2, 0, 0],     # too long
    [1, -1, 0],       # negative
    [1, 2.0, 0],      # not an integer
    [True, 2, 0],     # bool is not a press count
])
def test_V3_rejects(presses):
    assert not validate(MEDIUM, presses)


def test_V4_over_cap_is_rejected_even_if_colors_match():
    # [1, 5, 0] lands on all red (5 = 2 mod 3) but button 2 allows only 2 presses
    assert MEDIUM.is_goal(apply_presses(MEDIUM, [1, 5, 0]))
    assert not validate(MEDIUM, [1, 5, 0])


def test_V5_none_is_rejected():
    assert not validate(MEDIUM, None)


@pytest.mark.parametrize("presses", [5, iter([1, 2, 0]), (p for p in [1, 2, 0]), "120"])
def test_V6_unsized_or_wrong_type_is_rejected(presses):
    assert not validate(MEDIUM, presses)
