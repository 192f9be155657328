from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from neuropal_lens.core.filter_state import FilterState
from neuropal_lens.ui.helpers import atlas_meta_text, get_atlas, neuron_list_children
from neuropal_lens.ui.ids import IDs

if TYPE_CHECKING:
    from neuropal_lens.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_list_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Neuron list + sidebar metadata
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.NEURON_LIST, "children"),
        Output(IDs.Control.NEURON_COUNT, "children"),
        Output(IDs.Control.SIDEBAR_ATLAS_META, "children"),
        Input(IDs.Store.USER_STATE, "data"),
    )
    def update_neuron_list(fs_data):
        state = FilterState.from_dict(fs_data)
        atlas = get_atlas(ctx, state.atlas_name)
        if atlas is None:
            return neuron_list_children([]), "0 neurons", atlas_meta_text(None)

        neurons = atlas.select(state.query, state.side)
        return (
            neuron_list_children(neurons),
            f"{len(neurons)} of {len(atlas)} neurons",
            atlas_meta_text(atlas),
        )
