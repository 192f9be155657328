from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from neuropal_lens.core.filter_state import CursorState, FilterState
from neuropal_lens.ui.helpers import get_atlas
from neuropal_lens.ui.ids import IDs, graph_id
from neuropal_lens.ui.layout.build_plot_panel import MAIN_VIEW_ID

if TYPE_CHECKING:
    from neuropal_lens.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def render_view(
    ctx: AppConfig,
    view_id: str,
    fs_data: dict[str, Any] | None,
    hover: Any = None,
    x_range: Any = None,
) -> go.Figure:
    """
    FilterState + cursor -> figure for one view.

    Never raises: failures are logged and turned into a message figure.
    """
    if fs_data is None:
        return _message_figure("No atlas selected.", "Choose an atlas to see any plots.")

    try:
        state = FilterState.from_dict(fs_data)
        cursor = CursorState.from_dict({"hover": hover, "x_range": x_range})
    except (TypeError, ValueError, IndexError):
        logger.exception("Invalid state in render callback: %r", fs_data)
        return _error_figure("Internal error: invalid filter state.")

    atlas = get_atlas(ctx, state.atlas_name)
    if atlas is None:
        return _error_figure(
            f"The atlas '{state.atlas_name}' is not available. "
            "Check the atlas config and the server logs."
        )

    try:
        registry = ctx.registry
        if registry is None:
            return _error_figure("View registry is not available.")
        view = registry.create(view_id, atlas)

        data = view.timed_compute(state, cursor)
        return view.render_figure(data, state, cursor)

    except Exception:
        logger.exception(
            "Error in render_view",
            extra={"view_id": view_id, "filter_state": fs_data},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    for view_cls in ctx.registry.all_classes():
        _register_view_callback(app, ctx, view_cls.id)


def _register_view_callback(app: dash.Dash, ctx: AppConfig, view_id: str) -> None:
    if view_id == MAIN_VIEW_ID:
        # Hovering the main view must not re-render it
        @app.callback(
            Output(graph_id(view_id), "figure"),
            Input(IDs.Store.USER_STATE, "data"),
            Input(IDs.Store.ZOOM_STATE, "data"),
        )
        def update_main_view(fs_data, x_range):
            return render_view(ctx, view_id, fs_data, x_range=x_range)

        return

    @app.callback(
        Output(graph_id(view_id), "figure"),
        Input(IDs.Store.USER_STATE, "data"),
        Input(IDs.Store.HOVER_STATE, "data"),
        Input(IDs.Store.ZOOM_STATE, "data"),
    )
    def update_secondary_view(fs_data, hover, x_range):
        return render_view(ctx, view_id, fs_data, hover=hover, x_range=x_range)
