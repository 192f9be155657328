import pandas as pd
import plotly.graph_objs as go
import pytest

from neuropal_lens.core.body_side import BodySide
from neuropal_lens.core.filter_state import CursorState, FilterState
from neuropal_lens.views.lateral_view import LateralView


def test_lateral_compute_data(slice_atlas):
    view = LateralView(slice_atlas)
    data = view.compute_data(FilterState(query="*"), CursorState())

    assert isinstance(data, pd.DataFrame)
    assert list(data["name"]) == ["AL", "BR", "CL"]
    assert list(data["h"]) == [10.0, 11.0, 20.0]
    assert list(data["v"]) == [0.0, 1.0, 0.0]
    assert not data["highlight"].any()
    assert data.attrs["x_label"] == "Anterior - Posterior"
    assert data.attrs["y_label"] == "Ventral - Dorsal"


def test_lateral_respects_side_and_query(slice_atlas):
    view = LateralView(slice_atlas)
    data = view.compute_data(FilterState(query="*", side=BodySide.LEFT), CursorState())
    assert list(data["name"]) == ["AL", "CL"]

    data = view.compute_data(FilterState(query="B"), CursorState())
    assert list(data["name"]) == ["BR"]


def test_lateral_render_includes_origin_and_sizes_by_zoom(slice_atlas):
    view = LateralView(slice_atlas)
    state = FilterState()

    data = view.compute_data(state, CursorState())
    fig = view.render_figure(data, state, CursorState(x_range=(0.0, 100.0)))

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    assert fig.data[0].marker.size == pytest.approx(10.0)

    lo, hi = fig.layout.xaxis.range
    assert lo < 0.0 < hi
    assert fig.layout.yaxis.scaleanchor == "x"
    assert fig.layout.xaxis.title.text == "<b>Anterior - Posterior</b>"
    assert fig.layout.template.layout.paper_bgcolor == "white"


def test_lateral_render_empty_selection(slice_atlas):
    view = LateralView(slice_atlas)
    state = FilterState(query="")

    data = view.compute_data(state, CursorState())
    fig = view.render_figure(data, state, CursorState())

    assert data.empty
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 0
    assert fig.layout.title.text == "No neurons match the current filters"
    assert fig.layout.xaxis.visible is False
