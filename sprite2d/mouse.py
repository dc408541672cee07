"""Pointer position and button state sampled once per frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

LEFT_BUTTON = 0
RIGHT_BUTTON = 2


@dataclass
class Mouse:
    """Where the pointer is and whether its left and right buttons are held."""

    x: int = 0
    y: int = 0
    is_left_button_down: bool = False
    is_right_button_down: bool = False

    def update(self, position: Tuple[int, int], buttons: Sequence[bool]) -> None:
        """Record a new sample.

        ``buttons`` is ordered left, middle, right, as pygame reports them;
        buttons missing from the sequence count as released.
        """
        self.x, self.y = (int(v) for v in position)
        self.is_left_button_down = _pressed(buttons, LEFT_BUTTON)
        self.is_right_button_down = _pressed(buttons, RIGHT_BUTTON)


def _pressed(buttons: Sequence[bool], index: int) -> bool:
    return index < len(buttons) and bool(buttons[index])