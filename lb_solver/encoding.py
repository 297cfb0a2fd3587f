"""
Canonical integer keys for search states.

A state is packed as a mixed-radix number:
- one base-3 digit per light (lowest digits)
- one base-(maxPresses[i] + 1) digit per button press count

Keys of the reachable states are exactly range(state_space_size), so the
encoding is a bijection and two distinct states never share a key.
"""

from typing import Sequence

from .board import NUM_COLORS, PuzzleInstance


class StateEncoder:
    """Packs (lights, presses) into an int and back, for one puzzle instance."""

    def __init__(self, instance: PuzzleInstance):
        self.num_lights = instance.num_lights
        self.radices: tuple[int, ...] = (NUM_COLORS,) * instance.num_lights + tuple(
            cap + 1 for cap in instance.max_presses
        )

        weights = []
        weight = 1
        for radix in self.radices:
            weights.append(weight)
            weight *= radix
        self.weights: tuple[int, ...] = tuple(weights)
        self.size = weight

    def encode(self, lights: Sequence[int], presses: Sequence[int]) -> int:
        key = 0
        for digit, weight in zip(lights, self.weights):
            key += int(digit) * weight
        for digit, weight in zip(presses, self.weights[self.num_lights:]):
            key += digit * weight
        return key

    def decode(self, key: int) -> tuple[tuple[int, ...], tuple[int, ...]]:
        if not 0 <= key < self.size:
            raise ValueError(f"Key {key} outside state space of size {self.size}")
        digits = []
        for radix in self.radices:
            key, digit = divmod(key, radix)
            digits.append(digit)
        return tuple(digits[:self.num_lights]), tuple(digits[self.num_lights:])


def encode(instance: PuzzleInstance, lights: Sequence[int], presses: Sequence[int]) -> int:
    """One-off encoding; the solver keeps a StateEncoder instead."""
    return StateEncoder(instance).encode(lights, presses)
