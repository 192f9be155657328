from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import dash
from dash import Input, Output, State, exceptions

from neuropal_lens.core.filter_state import CursorState
from neuropal_lens.ui.ids import IDs, graph_id
from neuropal_lens.ui.layout.build_plot_panel import MAIN_VIEW_ID

if TYPE_CHECKING:
    from neuropal_lens.ui.config import AppConfig

logger = logging.getLogger(__name__)


def next_zoom_state(
    triggered_id: Optional[str],
    relayout_data: Optional[Dict[str, Any]],
    previous: Optional[List[float]],
) -> Optional[List[float]]:
    """
    Compute the new lateral-view x range for the zoom store.

    Switching atlas drops the stored range, since the lateral graph
    autoranges onto the new atlas. Raises PreventUpdate when nothing changed.
    """
    if triggered_id == IDs.Control.ATLAS_SELECT:
        if previous is None:
            raise exceptions.PreventUpdate
        logger.debug("Atlas changed, clearing lateral zoom range")
        return None

    prev = CursorState(x_range=tuple(previous)) if previous else None
    cursor = CursorState.from_graph_events(None, relayout_data, prev)
    if cursor.x_range == (prev.x_range if prev else None):
        raise exceptions.PreventUpdate
    return cursor.to_dict()["x_range"]


def register_cursor_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    main_graph = graph_id(MAIN_VIEW_ID)

    @app.callback(
        Output(IDs.Store.HOVER_STATE, "data"),
        Input(main_graph, "hoverData"),
    )
    def update_hover(hover_data):
        cursor = CursorState.from_graph_events(hover_data, None)
        return cursor.to_dict()["hover"]

    @app.callback(
        Output(IDs.Store.ZOOM_STATE, "data"),
        Input(main_graph, "relayoutData"),
        Input(IDs.Control.ATLAS_SELECT, "value"),
        State(IDs.Store.ZOOM_STATE, "data"),
    )
    def update_zoom(relayout_data, _atlas_name, previous):
        return next_zoom_state(dash.ctx.triggered_id, relayout_data, previous)
