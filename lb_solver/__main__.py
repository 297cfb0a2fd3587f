"""
Command line solver.

    python -m lb_solver --lights RGBGR --buttons "0,1,2;1,3,4;0,2,4" \
        --max-presses 2,2,2 --target R
    python -m lb_solver --preset medium

Exit codes: 0 solution found, 1 no solution, 2 invalid input, 3 timed out.
"""

import argparse
import logging

from .board import PuzzleInstance
from .config import LOG_LEVEL, SolverConfig
from .errors import PuzzleError, SolveTimeout
from .limits import admit_and_solve
from .presets import PRESETS, get_preset
from .validator import validate
from .viz import display_puzzle, format_solution


def parse_buttons(raw: str, one_based: bool = False) -> list[list[int]]:
    """'0,1,2;1,3' -> [[0, 1, 2], [1, 3]]."""
    offset = 1 if one_based else 0
    buttons = []
    for group in raw.split(";"):
        tokens = [token.strip() for token in group.split(",") if token.strip()]
        buttons.append([int(token) - offset for token in tokens])
    return buttons


def parse_ints(raw: str) -> list[int]:
    return [int(token) for token in raw.replace(";", ",").split(",") if token.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lb_solver",
        description="Find the fewest button presses that turn every light to the target color.",
    )
    parser.add_argument("--preset", help=f"Preset puzzle: {', '.join(p.name for p in PRESETS)}")
    parser.add_argument("--lights", help="Initial colors, e.g. 'RGBGR'")
    parser.add_argument("--buttons", help="Lights per button, ';'-separated groups, e.g. '0,1,2;1,3,4'")
    parser.add_argument("--max-presses", help="Press limit per button, e.g. '2,2,2'")
    parser.add_argument("--target", default="R", help="Target color R/G/B (default R)")
    parser.add_argument("--one-based", action="store_true", help="Light indices in --buttons start at 1")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_instance(args: argparse.Namespace) -> PuzzleInstance:
    if args.preset:
        key = int(args.preset) if args.preset.isdigit() else args.preset
        return get_preset(key)
    if not (args.lights and args.buttons and args.max_presses):
        raise ValueError("Give --preset, or all of --lights, --buttons and --max-presses")
    return PuzzleInstance.create(
        args.lights,
        parse_buttons(args.buttons, args.one_based),
        parse_ints(args.max_presses),
        args.target,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        instance = load_instance(args)
        solution = admit_and_solve(instance, SolverConfig.from_env())
    except SolveTimeout as error:
        print(f"Timed out: {error}. The puzzle may still have a solution.")
        return 3
    except (PuzzleError, ValueError, KeyError) as error:
        print(f"Input error: {error}")
        return 2

    display_puzzle(instance)
    print()
    if not solution.possible:
        print(f"Impossible to turn all lights to {instance.target.name.title()}")
        return 1

    print("Solution found!")
    print(format_solution(solution))
    valid = validate(instance, solution.button_presses)
    print(f"Solution validation: {'Valid' if valid else 'Invalid'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
