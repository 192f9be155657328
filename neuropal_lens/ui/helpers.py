from __future__ import annotations

import logging
from typing import List, Optional, Sequence, TYPE_CHECKING

from dash import html

from neuropal_lens.core.atlas import NeuronAtlas
from neuropal_lens.core.body_side import BodySide
from neuropal_lens.core.neuron import Neuron

if TYPE_CHECKING:
    from neuropal_lens.ui.config import AppConfig

logger = logging.getLogger(__name__)

LIST_HEADER = " Name  (    x,     y,     z)"


def get_atlas(ctx: AppConfig, name: Optional[str]) -> Optional[NeuronAtlas]:
    """Resolve an atlas by name; load failures are logged and give None."""
    if not name:
        return None
    try:
        return ctx.atlas_by_name.get(name)
    except Exception:
        # any load failure (bad config value, unreadable file) is shown as "not available"
        logger.exception("Atlas could not be loaded", extra={"atlas": name})
        return None


def atlas_options(names: Sequence[str]) -> List[dict]:
    return [{"label": n, "value": n} for n in names]


def neuron_row(neuron: Neuron) -> html.Div:
    fill, text = neuron.list_colors()
    return html.Div(
        neuron.row_text(),
        className="npl-neuron-row",
        style={"backgroundColor": fill, "color": text},
        title=neuron.name,
    )


def neuron_list_children(neurons: Sequence[Neuron]) -> List[html.Div]:
    if not neurons:
        return [html.Div("No neurons match the current filters.", className="text-muted small p-2")]
    return [neuron_row(n) for n in neurons]


def side_button_style(side: BodySide) -> dict:
    return {"backgroundColor": side.css_color(), "borderColor": side.css_color(), "minWidth": "180px"}


def atlas_meta_text(atlas: Optional[NeuronAtlas]) -> str:
    if atlas is None:
        return "No atlas loaded"
    text = f"{len(atlas)} neurons"
    if atlas.description:
        text = f"{text} · {atlas.description}"
    return text
