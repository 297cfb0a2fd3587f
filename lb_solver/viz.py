"""
Text display helpers for puzzles and solutions.
"""

from typing import Iterable

from .board import Color, PuzzleInstance, Solution


def format_lights(lights: Iterable[Color]) -> str:
    """'R G B G R' style row."""
    return " ".join(Color(light).letter for light in lights)


def format_solution(solution: Solution) -> str:
    """Human-readable press list, 1-based buttons, zero entries skipped."""
    if not solution.possible:
        return "No solution possible"
    lines = []
    for i, presses in enumerate(solution.button_presses):
        if presses > 0:
            plural = "s" if presses > 1 else ""
            lines.append(f"Press Button {i + 1}: {presses} time{plural}")
    if not lines:
        lines.append("Already solved, no presses needed")
    lines.append(f"Total button presses: {solution.total_presses}")
    return "\n".join(lines)


def display_puzzle(instance: PuzzleInstance) -> None:
    """Print the puzzle: lights, target and what each button controls."""
    title = instance.name or "Light Button Puzzle"
    print(f"\n{title}:")
    print("=" * (len(title) + 1))
    print(f"Lights:  {format_lights(instance.lights)}")
    print(f"Target:  {instance.target.name.title()}")
    for i, (button, cap) in enumerate(zip(instance.buttons, instance.max_presses)):
        controlled = ", ".join(str(idx + 1) for idx in sorted(button))
        print(f"Button {i + 1}: lights {controlled} (max {cap} presses)")
