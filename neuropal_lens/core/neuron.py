from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Opacity of right-side (z < 0) markers
RIGHT_SIDE_DIM = 0.8

LUMINANCE_TEXT_THRESHOLD = 0.5


def _to_byte(channel: float) -> int:
    return int(min(max(channel * 255.0, 0.0), 255.0))


def _hex(rgb: Tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


@dataclass(frozen=True)
class Neuron:
    """
    A single identified neuron from a NeuroPAL atlas.

    Fields:

    - name: canonical neuron name (e.g. "AVAL")
    - x: anterior -> posterior position
    - y: ventral -> dorsal position
    - z: right (negative) -> left (non-negative) position
    - r, g, b: NeuroPAL channel intensities, nominally in [0, 1]
    """

    name: str
    x: float
    y: float
    z: float
    r: float
    g: float
    b: float

    def rgb(self) -> Tuple[int, int, int]:
        return _to_byte(self.r), _to_byte(self.g), _to_byte(self.b)

    def luminance(self) -> float:
        return 0.2126 * self.r + 0.7152 * self.g + 0.0722 * self.b

    def is_black(self) -> bool:
        return self.rgb() == (0, 0, 0)

    def is_left(self) -> bool:
        return self.z >= 0.0

    def list_colors(self) -> Tuple[str, str]:
        """
        Colors for the neuron list row as (background, text) hex strings.

        Unlabelled (black) neurons get a white background so the row stays
        readable; text flips to white on dark backgrounds.
        """
        fill = (255, 255, 255) if self.is_black() else self.rgb()

        lum = self.luminance()
        text = "#000000" if lum == 0.0 or lum > LUMINANCE_TEXT_THRESHOLD else "#ffffff"
        return _hex(fill), text

    def plot_color(self, dark: bool = False) -> str:
        """Marker color as an rgba() string for Plotly."""
        if self.is_black() and dark:
            r, g, b = 255, 255, 255
        else:
            r, g, b = self.rgb()

        # Right-side neurons keep their hue and fade to 0.8 opacity
        alpha = 1.0 if self.is_left() else RIGHT_SIDE_DIM

        return f"rgba({r},{g},{b},{alpha:g})"

    def row_text(self) -> str:
        return f"{self.name:<5} ({self.x:>5.1f}, {self.y:>5.1f}, {self.z:>5.1f})"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "r": self.r,
            "g": self.g,
            "b": self.b,
        }
