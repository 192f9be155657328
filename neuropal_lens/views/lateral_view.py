from __future__ import annotations

import pandas as pd
import plotly.graph_objs as go

from neuropal_lens.core.base_view import BaseView
from neuropal_lens.core.filter_state import CursorState, FilterState
from neuropal_lens.views.plotting import (
    marker_radius,
    neuron_frame,
    padded_range,
    scatter_trace,
    style_figure,
)


class LateralView(BaseView):
    """
    Side-on view of the worm (x-y plane).

    - X: anterior -> posterior
    - Y: ventral -> dorsal
    - Hovering a neuron here drives the slices in the anterior/dorsal views
    """

    id = "lateral"
    label = "Lateral View (x-y)"

    def compute_data(self, state: FilterState, cursor: CursorState) -> pd.DataFrame:
        neurons = self.selected_neurons(state)
        data = neuron_frame(
            neurons,
            horizontal=lambda n: n.x,
            vertical=lambda n: n.y,
            dark=state.dark,
        )
        data.attrs["x_label"] = "Anterior - Posterior"
        data.attrs["y_label"] = "Ventral - Dorsal"
        return data

    def default_ranges(self, data: pd.DataFrame):
        # Origin is always in view
        return padded_range(data["h"], include=(0.0,)), padded_range(data["v"], include=(0.0,))

    def render_figure(self, data: pd.DataFrame, state: FilterState, cursor: CursorState) -> go.Figure:
        if data.empty:
            fig = self.empty_figure("No neurons match the current filters")
            fig.update_layout(template=self.template(state))
            return fig

        x_range, y_range = self.default_ranges(data)
        span = cursor.x_span if cursor.x_span is not None else x_range[1] - x_range[0]
        radius = marker_radius(span)

        fig = go.Figure()
        fig.add_trace(scatter_trace(data, radius))

        return style_figure(
            fig,
            title=self.label,
            x_label=data.attrs.get("x_label", "x"),
            y_label=data.attrs.get("y_label", "y"),
            x_range=x_range,
            y_range=y_range,
            template=self.template(state),
            # keep user zoom/pan across re-renders of the same atlas
            uirevision=f"{self.id}:{self.atlas.name}",
        )
