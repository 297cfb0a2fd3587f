"""
Tests for the breadth-first solver (lb_solver/solver.py).

Test Groups:
- F: preset fixtures
- Z: zero / infeasible edge cases
- O: optimality against brute force on small puzzles
- D: determinism and tie-breaking
- Q: press sequences and loose-input entry point
"""

import itertools
import random

import pytest

from lb_solver.board import Color, PuzzleInstance
from lb_solver.errors import InvalidInstance
from lb_solver.presets import COMPLEX, MEDIUM, SIMPLE
from lb_solver.solver import press_sequence, solve, solve_puzzle
from lb_solver.validator import validate


def brute_force_minimum(instance: PuzzleInstance) -> int | None:
    """Smallest total over every press vector within the caps, or None."""
    best = None
    for presses in itertools.product(*(range(cap + 1) for cap in instance.max_presses)):
        if validate(instance, list(presses)):
            total = sum(presses)
            if best is None or total < best:
                best = total
    return best


def small_random_instance(rng: random.Random) -> PuzzleInstance:
    num_lights = rng.randint(1, 4)
    num_buttons = rng.randint(1, 3)
    buttons = [
        rng.sample(range(num_lights), rng.randint(1, num_lights))
        for _ in range(num_buttons)
    ]
    caps = [rng.randint(0, 3) for _ in range(num_buttons)]
    lights = [rng.choice(list(Color)) for _ in range(num_lights)]
    return PuzzleInstance.create(lights, buttons, caps, rng.choice(list(Color)))


# ========== Test Group F: presets ==========

def test_F1_medium_preset_minimum():
    solution = solve(MEDIUM)
    assert solution.possible
    assert solution.button_presses == (1, 2, 0)
    assert solution.total_presses == 3
    assert validate(MEDIUM, solution.button_presses)


def test_F2_simple_preset_is_infeasible():
    # lights 0 and 2 share exactly the same buttons but start on different colors
    solution = solve(SIMPLE)
    assert not solution.possible
    assert solution.total_presses is None
    # the whole bounded space was explored
    assert solution.states_explored == 3 ** 3


def test_F3_complex_preset_is_infeasible():
    assert not solve(COMPLEX).possible


def test_F4_hand_written_answers_do_not_validate():
    """The vectors listed on the game's test-case screen never reach the target."""
    assert not validate(SIMPLE, [1, 1, 0])
    assert not validate(MEDIUM, [2, 1, 1])
    assert not validate(COMPLEX, [1, 2, 1, 0])


def test_F5_two_button_puzzle():
    solution = solve_puzzle("GBR", [[0, 1], [1]], [2, 2], "R")
    assert solution.button_presses == (2, 2)
    assert solution.total_presses == 4


def test_F6_cap_makes_it_infeasible():
    assert not solve_puzzle("GBR", [[0, 1], [1]], [2, 1], "R").possible


# ========== Test Group Z: edge cases ==========

def test_Z1_already_solved():
    solution = solve_puzzle("RRR", [[0, 1], [2]], [2, 2], "R")
    assert solution.possible
    assert solution.button_presses == (0, 0)
    assert solution.total_presses == 0
    assert solution.states_explored == 1


def test_Z2_all_caps_zero():
    solution = solve_puzzle("RGR", [[1], [0, 2]], [0, 0], "R")
    assert not solution.possible
    assert solution.states_explored == 1


def test_Z3_all_caps_zero_but_already_goal():
    assert solve_puzzle("BB", [[0]], [0], "B").total_presses == 0


def test_Z4_single_light_needs_two_presses():
    solution = solve_puzzle("G", [[0]], [5], "R")
    assert solution.button_presses == (2,)


def test_Z5_invalid_input_rejected_before_search():
    with pytest.raises(InvalidInstance):
        solve_puzzle("RG", [[0, 2]], [1], "R")
    with pytest.raises(InvalidInstance):
        solve_puzzle("RG", [[0]], [-1], "R")


# ========== Test Group O: optimality ==========

def test_O1_matches_brute_force():
    rng = random.Random(1234)
    for _ in range(150):
        instance = small_random_instance(rng)
        solution = solve(instance)
        expected = brute_force_minimum(instance)
        if expected is None:
            assert not solution.possible, instance
        else:
            assert solution.possible, instance
            assert solution.total_presses == expected, instance
            assert validate(instance, solution.button_presses), instance


def test_O2_presses_within_caps():
    rng = random.Random(99)
    for _ in range(50):
        instance = small_random_instance(rng)
        solution = solve(instance)
        if solution.possible:
            assert all(p <= cap for p, cap in zip(solution.button_presses, instance.max_presses))
            assert solution.total_presses == sum(solution.button_presses)


# ========== Test Group D: determinism ==========

def test_D1_repeatable():
    first = solve(MEDIUM)
    for _ in range(3):
        assert solve(MEDIUM) == first


def test_D2_ties_go_to_lowest_button_first():
    # [2, 0], [1, 1] and [0, 2] all take two presses
    solution = solve_puzzle("G", [[0], [0]], [2, 2], "R")
    assert solution.button_presses == (2, 0)


def test_D3_commutative_press_order():
    instance = MEDIUM
    sequence = press_sequence(instance, [1, 2, 0])
    results = set()
    for order in set(itertools.permutations(sequence)):
        lights = instance.lights
        for button in order:
            lights = instance.press(lights, button)
        results.add(lights)
    assert results == {(Color.RED,) * 6}


# ========== Test Group Q: helpers ==========

def test_Q1_press_sequence():
    assert press_sequence(MEDIUM, [1, 2, 0]) == [0, 1, 1]
    with pytest.raises(ValueError):
        press_sequence(MEDIUM, [1, 2])
