from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional, Tuple

from .body_side import BodySide

DEFAULT_QUERY = "*"


@dataclass
class FilterState:
    """
    Represents the current user selection, persisted in browser local storage.

    Fields:

    - atlas_name: the active atlas
    - query: search text; name prefixes separated by space/;/,/tab, "*" for all
    - side: body side filter (Left / Right / Both)
    - show_filter_panel: whether the sidebar with the neuron list is shown
    - dark: dark plot theme
    """

    atlas_name: Optional[str] = None
    query: str = DEFAULT_QUERY
    side: BodySide = BodySide.BOTH
    show_filter_panel: bool = True
    dark: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["side"] = self.side.value
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        # Missing keys fall back to defaults so older stored state still loads
        data = data or {}
        query = data.get("query")
        return cls(
            atlas_name=data.get("atlas_name"),
            query=DEFAULT_QUERY if query is None else str(query),
            side=BodySide.parse(data.get("side")),
            show_filter_panel=bool(data.get("show_filter_panel", True)),
            dark=bool(data.get("dark", False)),
        )


@dataclass
class CursorState:
    """
    Transient pointer/zoom state of the lateral view.

    - hover: (x, y) of the hovered point in data coordinates, if any
    - x_range: current horizontal axis range, None while autoranged
    """

    hover: Optional[Tuple[float, float]] = None
    x_range: Optional[Tuple[float, float]] = field(default=None)

    @property
    def x_span(self) -> Optional[float]:
        if self.x_range is None:
            return None
        return abs(self.x_range[1] - self.x_range[0])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hover": list(self.hover) if self.hover is not None else None,
            "x_range": list(self.x_range) if self.x_range is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> CursorState:
        data = data or {}
        hover = data.get("hover")
        x_range = data.get("x_range")
        return cls(
            hover=(float(hover[0]), float(hover[1])) if hover else None,
            x_range=(float(x_range[0]), float(x_range[1])) if x_range else None,
        )

    @classmethod
    def from_graph_events(
        cls,
        hover_data: Optional[Dict[str, Any]],
        relayout_data: Optional[Dict[str, Any]],
        previous: Optional[CursorState] = None,
    ) -> CursorState:
        """
        Build cursor state from Dash graph `hoverData` and `relayoutData`.

        relayoutData only reports what changed, so an event without any
        x-axis keys keeps the previous range.
        """
        return cls(
            hover=_hover_from_event(hover_data),
            x_range=_x_range_from_event(
                relayout_data,
                previous.x_range if previous is not None else None,
            ),
        )


def _hover_from_event(hover_data: Optional[Dict[str, Any]]) -> Optional[Tuple[float, float]]:
    if not hover_data:
        return None
    points = hover_data.get("points") or []
    if not points:
        return None
    point = points[0]
    try:
        return float(point["x"]), float(point["y"])
    except (KeyError, TypeError, ValueError):
        return None


def _x_range_from_event(
    relayout_data: Optional[Dict[str, Any]],
    previous: Optional[Tuple[float, float]],
) -> Optional[Tuple[float, float]]:
    if not relayout_data:
        return previous
    if relayout_data.get("xaxis.autorange"):
        return None

    try:
        if "xaxis.range[0]" in relayout_data and "xaxis.range[1]" in relayout_data:
            lo = float(relayout_data["xaxis.range[0]"])
            hi = float(relayout_data["xaxis.range[1]"])
        elif "xaxis.range" in relayout_data:
            lo, hi = (float(v) for v in relayout_data["xaxis.range"])
        else:
            return previous
    except (TypeError, ValueError):
        return previous

    return (lo, hi) if lo <= hi else (hi, lo)
