"""
Shared plotting helpers for the atlas views.

All views draw neurons as one scatter trace per figure, with per-point
colors taken from the NeuroPAL label, and mark hovered neurons with a
light red ring, guide line and name label.
"""
from __future__ import annotations

import math
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objs as go

from neuropal_lens.core.neuron import Neuron

HIGHLIGHT_COLOR = "#ff8080"

MAX_RADIUS = 6.0
MIN_RADIUS = 1.0

FRAME_COLUMNS = ["name", "h", "v", "x", "y", "z", "color", "highlight"]


def marker_radius(span: Optional[float]) -> float:
    """
    Marker radius in pixels for a horizontal axis span in data units.

    Markers shrink as the view zooms out: 6 - 0.01 * span, clamped to [1, 6].
    """
    if span is None or not math.isfinite(span):
        return MAX_RADIUS
    return float(np.clip(MAX_RADIUS - 0.01 * span, MIN_RADIUS, MAX_RADIUS))


def padded_range(values: Iterable[float], include: Sequence[float] = (), pad: float = 0.05) -> Tuple[float, float]:
    """Axis range covering all values and the forced points, with a small margin."""
    vals = list(values) + list(include)
    if not vals:
        return -1.0, 1.0
    lo, hi = min(vals), max(vals)
    margin = (hi - lo) * pad if hi > lo else 1.0
    return lo - margin, hi + margin


def l2_dist(x1: float, x2: float, y1: float, y2: float) -> float:
    return math.hypot(x1 - x2, y1 - y2)


def neuron_frame(
    neurons: Sequence[Neuron],
    horizontal: Callable[[Neuron], float],
    vertical: Callable[[Neuron], float],
    dark: bool,
    highlighted: Optional[Callable[[Neuron], bool]] = None,
) -> pd.DataFrame:
    rows: List[dict] = []
    for n in neurons:
        rows.append(
            {
                "name": n.name,
                "h": horizontal(n),
                "v": vertical(n),
                "x": n.x,
                "y": n.y,
                "z": n.z,
                "color": n.plot_color(dark),
                "highlight": bool(highlighted(n)) if highlighted is not None else False,
            }
        )
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def scatter_trace(data: pd.DataFrame, radius: float) -> go.Scatter:
    return go.Scatter(
        x=data["h"],
        y=data["v"],
        mode="markers",
        marker=dict(color=list(data["color"]), size=2 * radius, line=dict(width=0)),
        customdata=data[["name", "x", "y", "z"]].to_numpy(),
        hovertemplate=(
            "<b>%{customdata[0]}</b><br>"
            "x=%{customdata[1]:.1f}, y=%{customdata[2]:.1f}, z=%{customdata[3]:.1f}"
            "<extra></extra>"
        ),
        showlegend=False,
        name="neurons",
    )


def add_guide(fig: go.Figure, x: Optional[float] = None, y: Optional[float] = None) -> None:
    """Full-height vertical line at x, or full-width horizontal line at y."""
    line = dict(color=HIGHLIGHT_COLOR, width=1)
    if x is not None:
        fig.add_shape(type="line", xref="x", yref="paper", x0=x, x1=x, y0=0, y1=1, line=line)
    if y is not None:
        fig.add_shape(type="line", xref="paper", yref="y", x0=0, x1=1, y0=y, y1=y, line=line)


def add_highlights(fig: go.Figure, data: pd.DataFrame, radius: float, guide: str) -> None:
    """
    Ring, label and guide line for highlighted neurons.

    guide="v" draws a vertical line through each highlighted neuron's
    horizontal position; guide="h" a horizontal line through its vertical one.
    """
    hits = data[data["highlight"]]
    if hits.empty:
        return

    for row in hits.itertuples(index=False):
        if guide == "v":
            add_guide(fig, x=row.h)
        else:
            add_guide(fig, y=row.v)
        fig.add_annotation(
            x=row.h + radius / 1.5,
            y=row.v + radius / 1.5,
            text=f"<b>{row.name}</b>",
            showarrow=False,
            xanchor="left",
            yanchor="bottom",
        )

    fig.add_trace(
        go.Scatter(
            x=hits["h"],
            y=hits["v"],
            mode="markers",
            marker=dict(
                symbol="circle-open",
                size=2 * (radius + 2.0),
                color=HIGHLIGHT_COLOR,
                line=dict(width=2, color=HIGHLIGHT_COLOR),
            ),
            hoverinfo="skip",
            showlegend=False,
            name="highlight",
        )
    )


def style_figure(
    fig: go.Figure,
    title: str,
    x_label: str,
    y_label: str,
    x_range: Tuple[float, float],
    y_range: Tuple[float, float],
    template: str,
    uirevision: str,
) -> go.Figure:
    fig.update_layout(
        title=title,
        template=template,
        hovermode="closest",
        margin=dict(l=50, r=20, t=40, b=40),
        uirevision=uirevision,
    )
    fig.update_xaxes(title_text=f"<b>{x_label}</b>", range=list(x_range), zeroline=False)
    # Equal data aspect
    fig.update_yaxes(
        title_text=f"<b>{y_label}</b>",
        range=list(y_range),
        scaleanchor="x",
        scaleratio=1,
        zeroline=False,
    )
    return fig
