from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from neuropal_lens.core.view_registry import ViewRegistry
from neuropal_lens.ui.ids import graph_id

MAIN_VIEW_ID = "lateral"


def _graph(view_id: str, height: str) -> dcc.Loading:
    return dcc.Loading(
        type="default",
        children=dcc.Graph(
            id=graph_id(view_id),
            style={"height": height},
            config={"responsive": True, "displaylogo": False, "scrollZoom": True},
            # hover drives the slices; leaving the plot clears them
            clear_on_unhover=(view_id == MAIN_VIEW_ID),
        ),
    )


def build_plot_panel(registry: ViewRegistry) -> list:
    """
    Main lateral view on top, secondary views in a collapsible accordion.
    """
    view_classes = registry.all_classes()
    main = [v for v in view_classes if v.id == MAIN_VIEW_ID]
    secondary = [v for v in view_classes if v.id != MAIN_VIEW_ID]

    children = []
    for view_cls in main:
        children.append(
            dbc.Card(
                [
                    dbc.CardHeader(view_cls.label, className="p-2 fw-semibold"),
                    dbc.CardBody(_graph(view_cls.id, "500px")),
                ],
                className="npl-maincard mb-3",
            )
        )

    if secondary:
        children.append(
            dbc.Accordion(
                [
                    dbc.AccordionItem(
                        _graph(view_cls.id, "420px"),
                        title=view_cls.label,
                        item_id=view_cls.id,
                    )
                    for view_cls in secondary
                ],
                always_open=True,
                active_item=[v.id for v in secondary],
            )
        )

    return children
