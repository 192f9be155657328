from __future__ import annotations

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


class AnteriorView(BaseView):
    """
    Cross-section seen from the head (z-y plane).

    Without a hover position every selected neuron is drawn. With one, only
    the slab of neurons whose x lies within slab_thickness of the hovered x
    is drawn, and neurons at the hovered x-y position are highlighted.
    """

    id = "anterior"
    label = "Anterior View (z-y)"

    X_INCLUDE = (-15.0, 15.0)
    Y_INCLUDE = (-25.0, 20.0)

    def compute_data(self, state: FilterState, cursor: CursorState) -> pd.DataFrame:
        neurons = self.selected_neurons(state)
        hover = cursor.hover

        if hover is not None:
            hx, hy = hover
            neurons = [n for n in neurons if abs(n.x - hx) <= self.slab_thickness]

            def highlighted(n):
                return l2_dist(n.x, hx, n.y, hy) < self.highlight_distance
        else:
            highlighted = None

        data = neuron_frame(
            neurons,
            horizontal=lambda n: n.z,
            vertical=lambda n: n.y,
            dark=state.dark,
            highlighted=highlighted,
        )
        data.attrs["x_label"] = "Right - Left"
        data.attrs["y_label"] = "Ventral - Dorsal"
        return data

    def render_figure(self, data: pd.DataFrame, state: FilterState, cursor: CursorState) -> go.Figure:
        x_range = padded_range(data["h"], include=self.X_INCLUDE, pad=0.0)
        y_range = padded_range(data["v"], include=self.Y_INCLUDE, pad=0.0)
        radius = marker_radius(x_range[1] - x_range[0])

        fig = go.Figure()
        if cursor.hover is not None:
            add_guide(fig, y=cursor.hover[1])

        if not data.empty:
            fig.add_trace(scatter_trace(data, radius))
            add_highlights(fig, data, radius, guide="v")

        return style_figure(
            fig,
            title=self.label,
            x_label=data.attrs.get("x_label", "z"),
            y_label=data.attrs.get("y_label", "y"),
            x_range=x_range,
            y_range=y_range,
            template=self.template(state),
            uirevision=f"{self.id}:{self.atlas.name}",
        )
