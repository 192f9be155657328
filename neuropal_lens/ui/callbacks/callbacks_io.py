from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions

from neuropal_lens.core.filter_state import FilterState
from neuropal_lens.ui.helpers import get_atlas
from neuropal_lens.ui.ids import IDs

if TYPE_CHECKING:
    from neuropal_lens.ui.config import AppConfig

logger = logging.getLogger(__name__)


def export_filename(state: FilterState) -> str:
    stem = re.sub(r"[^A-Za-z0-9_-]+", "_", state.atlas_name or "atlas").strip("_") or "atlas"
    return f"{stem}_{state.side.value.lower()}.csv"


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Download the currently listed neurons as CSV
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.USER_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_selection(n_clicks, fs_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        state = FilterState.from_dict(fs_data)
        atlas = get_atlas(ctx, state.atlas_name)
        if atlas is None:
            raise exceptions.PreventUpdate

        neurons = atlas.select(state.query, state.side)
        df = atlas.to_frame(neurons)
        logger.info(
            "Exporting neuron selection",
            extra={"atlas": atlas.name, "n_neurons": len(df), "query": state.query},
        )
        return dcc.send_data_frame(df.to_csv, export_filename(state), index=False)
