from __future__ import annotations

from typing import Optional, Tuple

import pandas as pd
import plotly.graph_objs as go

from neuropal_lens.core.base_view import BaseView
from neuropal_lens.core.filter_state import CursorState, FilterState
from neuropal_lens.views.plotting import (
    add_guide,
    add_highlights,
    l2_dist,
    marker_radius,
    neuron_frame,
    padded_range,
    scatter_trace,
    style_figure,
)


class DorsalView(BaseView):
    """
    Top-down view of the worm (x, -z).

    Follows the lateral view's horizontal zoom: only neurons inside its
    current x range are drawn. With a hover position, only the slab of
    neurons within slab_thickness of the hovered y is drawn.
    """

    id = "dorsal"
    label = "Dorsal View (x-z)"

    Y_INCLUDE = (-15.0, 15.0)

    def compute_data(self, state: FilterState, cursor: CursorState) -> pd.DataFrame:
        neurons = self.selected_neurons(state)

        if cursor.x_range is not None:
            x_min, x_max = cursor.x_range
            neurons = [n for n in neurons if x_min <= n.x <= x_max]

        hover = cursor.hover
        if hover is not None:
            hx, hy = hover
            neurons = [n for n in neurons if abs(n.y - hy) <= self.slab_thickness]

            def highlighted(n):
                return l2_dist(n.x, hx, n.y, hy) < self.highlight_distance
        else:
            highlighted = None

        data = neuron_frame(
            neurons,
            horizontal=lambda n: n.x,
            vertical=lambda n: -n.z,
            dark=state.dark,
            highlighted=highlighted,
        )
        data.attrs["x_label"] = "Anterior - Posterior"
        data.attrs["y_label"] = "Left - Right"
        return data

    def _x_range(self, state: FilterState, cursor: CursorState) -> Tuple[float, float]:
        if cursor.x_range is not None:
            return cursor.x_range
        # Lateral view is autoranged: match its default range
        xs = [n.x for n in self.selected_neurons(state)]
        return padded_range(xs, include=(0.0,))

    def render_figure(self, data: pd.DataFrame, state: FilterState, cursor: CursorState) -> go.Figure:
        x_range = self._x_range(state, cursor)
        y_range = padded_range(data["v"], include=self.Y_INCLUDE, pad=0.0)
        radius = marker_radius(x_range[1] - x_range[0])

        fig = go.Figure()
        if cursor.hover is not None:
            add_guide(fig, x=cursor.hover[0])

        if not data.empty:
            fig.add_trace(scatter_trace(data, radius))
            add_highlights(fig, data, radius, guide="h")

        return style_figure(
            fig,
            title=self.label,
            x_label=data.attrs.get("x_label", "x"),
            y_label=data.attrs.get("y_label", "-z"),
            x_range=x_range,
            y_range=y_range,
            template=self.template(state),
            uirevision=f"{self.id}:{self.atlas.name}:{_range_key(cursor.x_range)}",
        )


def _range_key(x_range: Optional[Tuple[float, float]]) -> str:
    if x_range is None:
        return "auto"
    return f"{x_range[0]:.2f},{x_range[1]:.2f}"
