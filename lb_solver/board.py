"""
Light button puzzle model.

Colors cycle on every press:
- RED (0) -> GREEN (1) -> BLUE (2) -> RED (0)
- A button advances every light it controls by one step
- Presses commute, so only the number of presses per button matters

Light indices are 0-based everywhere in code; user-facing messages use
1-based numbers like the game screen does.
"""

from dataclasses import dataclass
from enum import IntEnum
from math import prod
from typing import Iterable

from .errors import InvalidInstance

NUM_COLORS = 3


class Color(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2

    def pressed(self, times: int = 1) -> "Color":
        """Color after `times` presses."""
        return Color((self.value + times) % NUM_COLORS)

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def parse(cls, token) -> "Color":
        """Parse 'R'/'G'/'B', a color name, 0-2 or a Color."""
        if isinstance(token, Color):
            return token
        if isinstance(token, int) and not isinstance(token, bool):
            if 0 <= token < NUM_COLORS:
                return cls(token)
            raise InvalidInstance(f"Invalid color value {token}. Use 0, 1 or 2.")
        if isinstance(token, str):
            key = token.strip().upper()
            if key in COLOR_NAMES:
                return COLOR_NAMES[key]
            if key.isdigit():
                return cls.parse(int(key))
        raise InvalidInstance(
            f"Invalid color '{token}'. Use R, G or B (or RED/GREEN/BLUE)."
        )


COLOR_NAMES: dict[str, Color] = {}
for _color in Color:
    COLOR_NAMES[_color.name] = _color
    COLOR_NAMES[_color.letter] = _color


def parse_lights(raw: str | Iterable) -> tuple[Color, ...]:
    """Parse a light row: either a compact string ("RGBGR") or a sequence of tokens."""
    if isinstance(raw, str):
        text = raw.replace(",", " ").split()
        if len(text) == 1 and text[0].upper() not in COLOR_NAMES:
            # compact form: one letter per light
            text = list(text[0])
        return tuple(Color.parse(token) for token in text)
    return tuple(Color.parse(token) for token in raw)


def _as_index(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInstance(f"{what} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class PuzzleInstance:
    """An immutable puzzle: initial lights, buttons, press caps and a target color."""
    lights: tuple[Color, ...]
    buttons: tuple[frozenset[int], ...]  # light indices per button
    max_presses: tuple[int, ...]
    target: Color
    name: str = ""

    def __post_init__(self):
        # direct construction may pass lists; store the declared types
        try:
            object.__setattr__(self, "lights", tuple(self.lights))
            object.__setattr__(self, "buttons", tuple(frozenset(button) for button in self.buttons))
            object.__setattr__(self, "max_presses", tuple(self.max_presses))
        except TypeError as e:
            raise InvalidInstance(f"Malformed puzzle definition: {e}") from e
        self._validate()

    @classmethod
    def create(
        cls,
        lights,
        buttons: Iterable[Iterable[int]],
        max_presses: Iterable[int],
        target,
        name: str = "",
    ) -> "PuzzleInstance":
        """Build an instance from loose input (strings, lists, color letters)."""
        try:
            button_sets = tuple(
                frozenset(_as_index(idx, f"Light index of button {i + 1}") for idx in button)
                for i, button in enumerate(buttons)
            )
            caps = tuple(max_presses)
        except TypeError as e:
            raise InvalidInstance(f"Malformed puzzle definition: {e}") from e
        return cls(
            lights=parse_lights(lights),
            buttons=button_sets,
            max_presses=caps,
            target=Color.parse(target),
            name=name,
        )

    def _validate(self) -> None:
        if len(self.lights) == 0:
            raise InvalidInstance("A puzzle needs at least one light.")
        for i, light in enumerate(self.lights):
            if not isinstance(light, Color):
                raise InvalidInstance(f"Light {i + 1} has invalid color {light!r}.")
        if not isinstance(self.target, Color):
            raise InvalidInstance(f"Invalid target color {self.target!r}.")
        if len(self.buttons) == 0:
            raise InvalidInstance("A puzzle needs at least one button.")
        if len(self.max_presses) != len(self.buttons):
            raise InvalidInstance(
                f"Got {len(self.max_presses)} press limits for {len(self.buttons)} buttons."
            )

        num_lights = len(self.lights)
        for i, button in enumerate(self.buttons):
            if len(button) == 0:
                raise InvalidInstance(f"Button {i + 1} must control at least one light.")
            for idx in button:
                _as_index(idx, f"Light index of button {i + 1}")
                if not 0 <= idx < num_lights:
                    raise InvalidInstance(
                        f"Button {i + 1} controls an invalid light {idx + 1}."
                    )

        for i, cap in enumerate(self.max_presses):
            _as_index(cap, f"Maximum presses for button {i + 1}")
            if cap < 0:
                raise InvalidInstance(f"Maximum presses for button {i + 1} cannot be negative.")

    @property
    def num_lights(self) -> int:
        return len(self.lights)

    @property
    def num_buttons(self) -> int:
        return len(self.buttons)

    def state_space_size(self) -> int:
        """Upper bound on search states: 3^L * prod(maxPresses[i] + 1)."""
        return NUM_COLORS ** self.num_lights * prod(cap + 1 for cap in self.max_presses)

    def is_goal(self, lights: Iterable[int]) -> bool:
        """True if every light equals the target color."""
        return all(light == self.target for light in lights)

    def press(self, lights: tuple[Color, ...], button: int) -> tuple[Color, ...]:
        """Lights after pressing `button` once (ignores the press cap)."""
        controlled = self.buttons[button]
        return tuple(
            light.pressed() if i in controlled else light
            for i, light in enumerate(lights)
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "lights": [light.letter for light in self.lights],
            "buttons": [sorted(button) for button in self.buttons],
            "maxPresses": list(self.max_presses),
            "targetColor": self.target.letter,
        }


@dataclass(frozen=True)
class Solution:
    """Result of a solve: a minimal press vector, or possible=False."""
    possible: bool
    button_presses: tuple[int, ...] | None = None
    total_presses: int | None = None
    states_explored: int = 0  # diagnostic only

    @classmethod
    def found(cls, button_presses: Iterable[int], states_explored: int = 0) -> "Solution":
        presses = tuple(button_presses)
        return cls(True, presses, sum(presses), states_explored)

    @classmethod
    def impossible(cls, states_explored: int = 0) -> "Solution":
        return cls(False, None, None, states_explored)

    def to_dict(self) -> dict:
        if not self.possible:
            return {"possible": False}
        return {
            "possible": True,
            "buttonPresses": list(self.button_presses),
            "totalPresses": self.total_presses,
        }
