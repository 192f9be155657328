from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from neuropal_lens.config.model import GlobalConfig
from neuropal_lens.ui.helpers import atlas_options
from neuropal_lens.ui.ids import IDs


def build_navbar(
    atlas_names: List[str],
    global_config: GlobalConfig,
    default_atlas: Optional[str],
) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title + source link
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            [
                                global_config.subtitle,
                                " (",
                                html.A("Source code", href=global_config.source_url, target="_blank"),
                                ")",
                            ],
                            className="text-muted",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                html.Div(
                    [
                        dbc.Switch(
                            id=IDs.Control.THEME_SWITCH,
                            label="Dark plots",
                            value=False,
                            persistence=True,
                            persistence_type="local",
                            className="me-3 mb-0",
                        ),
                        dbc.Button(
                            "Filter Panel",
                            id=IDs.Control.PANEL_TOGGLE_BTN,
                            color="primary",
                            size="sm",
                            className="me-3 font-monospace",
                        ),
                        html.Div(
                            [
                                html.Div("Active Atlas", className="navbar-dataset-title"),
                                dcc.Dropdown(
                                    id=IDs.Control.ATLAS_SELECT,
                                    options=atlas_options(atlas_names),
                                    value=default_atlas,
                                    clearable=False,
                                    persistence=True,
                                    persistence_type="local",
                                    placeholder="Select atlas",
                                    className="mt-1",
                                ),
                            ],
                            style={"minWidth": "240px"},
                        ),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm npl-navbar",
    )
