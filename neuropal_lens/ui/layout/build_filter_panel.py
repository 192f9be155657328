from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from neuropal_lens.core.body_side import BodySide
from neuropal_lens.core.filter_state import DEFAULT_QUERY
from neuropal_lens.ui.helpers import LIST_HEADER, side_button_style
from neuropal_lens.ui.ids import IDs


def build_filter_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("NeuroPAL Lens", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.P(id=IDs.Control.SIDEBAR_ATLAS_META, className="text-muted mb-2"),

                    html.Div(
                        [
                            html.Label("Body Side:", className="form-label fw-semibold me-2 mb-0"),
                            dbc.Button(
                                BodySide.BOTH.value,
                                id=IDs.Control.SIDE_BTN,
                                color="light",
                                className="fw-bold",
                                style=side_button_style(BodySide.BOTH),
                            ),
                        ],
                        className="d-flex align-items-center mb-3",
                    ),
                    html.Hr(),

                    html.Label("Search", className="form-label"),
                    dcc.Input(
                        id=IDs.Control.SEARCH_INPUT,
                        type="text",
                        value=DEFAULT_QUERY,
                        debounce=False,
                        persistence=True,
                        persistence_type="local",
                        placeholder="e.g. AVA RIM; * for all",
                        className="form-control mb-3",
                    ),

                    html.Pre(LIST_HEADER, className="npl-list-header mb-1"),
                    html.Div(id=IDs.Control.NEURON_LIST, className="npl-neuron-list"),
                    html.Div(
                        [
                            html.Small(id=IDs.Control.NEURON_COUNT, className="text-muted"),
                            dbc.Button(
                                "Download CSV",
                                id=IDs.Control.DOWNLOAD_DATA_BTN,
                                color="secondary",
                                size="sm",
                                className="ms-auto",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                        ],
                        className="d-flex align-items-center mt-2",
                    ),
                ]
            ),
        ],
        className="npl-sidebar",
    )
