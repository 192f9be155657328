from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, State

from neuropal_lens.core.filter_state import FilterState
from neuropal_lens.ui.helpers import side_button_style
from neuropal_lens.ui.ids import IDs

if TYPE_CHECKING:
    from neuropal_lens.ui.config import AppConfig

logger = logging.getLogger(__name__)


def build_user_state(
    ctx: AppConfig,
    stored: Optional[dict[str, Any]],
    triggered_id: Optional[str],
    atlas_name: Optional[str],
    query: Optional[str],
    dark: Any,
) -> FilterState:
    """
    Pure helper: fold one control event into the persisted FilterState.

    Button clicks are only applied when the button itself fired, so the
    initial callback on page load restores the stored side and panel
    visibility untouched.
    """
    try:
        state = FilterState.from_dict(stored)
    except (TypeError, ValueError):
        logger.warning("Discarding invalid stored user state: %r", stored)
        state = FilterState()

    if triggered_id == IDs.Control.SIDE_BTN:
        state.side = state.side.next()
    elif triggered_id == IDs.Control.PANEL_TOGGLE_BTN:
        state.show_filter_panel = not state.show_filter_panel

    names = ctx.atlas_names
    if atlas_name in names:
        state.atlas_name = atlas_name
    elif state.atlas_name not in names:
        state.atlas_name = ctx.default_atlas_name

    if query is not None:
        state.query = str(query)
    state.dark = bool(dark)
    return state


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Controls -> user-state store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.USER_STATE, "data"),
        Input(IDs.Control.ATLAS_SELECT, "value"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.SIDE_BTN, "n_clicks"),
        Input(IDs.Control.PANEL_TOGGLE_BTN, "n_clicks"),
        Input(IDs.Control.THEME_SWITCH, "value"),
        State(IDs.Store.USER_STATE, "data"),
    )
    def sync_user_state(atlas_name, query, _side_clicks, _panel_clicks, dark, stored):
        state = build_user_state(
            ctx,
            stored,
            dash.ctx.triggered_id,
            atlas_name,
            query,
            dark,
        )
        logger.debug("user_state", extra={"user_state": state.to_dict()})
        return state.to_dict()

    # ---------------------------------------------------------
    # user-state -> side button, panel toggle, column widths
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SIDE_BTN, "children"),
        Output(IDs.Control.SIDE_BTN, "style"),
        Output(IDs.Control.PANEL_TOGGLE_BTN, "outline"),
        Output(IDs.Control.FILTER_PANEL_COL, "style"),
        Output(IDs.Control.PLOT_PANEL_COL, "md"),
        Input(IDs.Store.USER_STATE, "data"),
    )
    def apply_user_state(data):
        state = FilterState.from_dict(data)
        panel_style = {} if state.show_filter_panel else {"display": "none"}
        plot_width = 9 if state.show_filter_panel else 12
        return (
            state.side.value,
            side_button_style(state.side),
            not state.show_filter_panel,
            panel_style,
            plot_width,
        )
