from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from .neuron import Neuron


class BodySide(str, Enum):
    """Which half of the worm is shown. Left is z >= 0, right is z < 0."""

    LEFT = "Left"
    RIGHT = "Right"
    BOTH = "Both"

    def next(self) -> BodySide:
        order = [BodySide.LEFT, BodySide.RIGHT, BodySide.BOTH]
        return order[(order.index(self) + 1) % len(order)]

    def color(self) -> Tuple[int, int, int, int]:
        return _SIDE_COLORS[self]

    def css_color(self) -> str:
        r, g, b, a = self.color()
        return f"rgba({r},{g},{b},{a / 255:.2f})"

    def includes(self, neuron: Neuron) -> bool:
        if self is BodySide.LEFT:
            return neuron.z >= 0.0
        if self is BodySide.RIGHT:
            return neuron.z < 0.0
        return True

    @classmethod
    def parse(cls, value: Optional[str]) -> BodySide:
        if isinstance(value, BodySide):
            return value
        if value:
            for side in cls:
                if side.value.lower() == str(value).strip().lower():
                    return side
        return cls.BOTH

    def __str__(self) -> str:
        return self.value


_SIDE_COLORS = {
    BodySide.LEFT: (131, 240, 22, 120),
    BodySide.RIGHT: (240, 22, 131, 120),
    BodySide.BOTH: (22, 131, 240, 120),
}
