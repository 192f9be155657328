from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from neuropal_lens.core.filter_state import FilterState
from neuropal_lens.ui.ids import IDs
from neuropal_lens.ui.layout.build_filter_panel import build_filter_panel
from neuropal_lens.ui.layout.build_navbar import build_navbar
from neuropal_lens.ui.layout.build_plot_panel import build_plot_panel

if TYPE_CHECKING:
    from neuropal_lens.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    navbar = build_navbar(ctx.atlas_names, ctx.global_config, ctx.default_atlas_name)
    initial_state = FilterState(atlas_name=ctx.default_atlas_name)

    return dbc.Container(
        fluid=True,
        className="npl-root",
        children=[
            navbar,

            # App-level stores
            dcc.Store(id=IDs.Store.USER_STATE, storage_type="local", data=initial_state.to_dict()),
            dcc.Store(id=IDs.Store.HOVER_STATE, storage_type="memory"),
            dcc.Store(id=IDs.Store.ZOOM_STATE, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(
                        build_filter_panel(),
                        id=IDs.Control.FILTER_PANEL_COL,
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        build_plot_panel(ctx.registry),
                        id=IDs.Control.PLOT_PANEL_COL,
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
