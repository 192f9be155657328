import pytest

from neuropal_lens.core.filter_state import CursorState, FilterState
from neuropal_lens.views.dorsal_view import DorsalView


def test_dorsal_projects_x_and_negative_z(slice_atlas):
    view = DorsalView(slice_atlas)
    data = view.compute_data(FilterState(), CursorState())

    assert list(data["h"]) == [10.0, 11.0, 20.0]
    assert list(data["v"]) == [-2.0, 3.0, -1.0]
    assert data.attrs["y_label"] == "Left - Right"


def test_dorsal_follows_lateral_x_range(slice_atlas):
    view = DorsalView(slice_atlas)
    cursor = CursorState(x_range=(5.0, 15.0))

    data = view.compute_data(FilterState(), cursor)
    assert list(data["name"]) == ["AL", "BR"]

    fig = view.render_figure(data, FilterState(), cursor)
    assert tuple(fig.layout.xaxis.range) == (5.0, 15.0)
    # span 10 -> radius 5.9
    assert fig.data[0].marker.size == pytest.approx(11.8)


def test_dorsal_hover_slab_on_y_and_highlight(slice_atlas):
    view = DorsalView(slice_atlas, slab_thickness=0.5)
    cursor = CursorState(hover=(10.0, 0.0))

    data = view.compute_data(FilterState(), cursor)

    # BR sits 1 unit away along y: outside a 0.5 slab
    assert list(data["name"]) == ["AL", "CL"]
    assert list(data["highlight"]) == [True, False]

    fig = view.render_figure(data, FilterState(), cursor)
    assert len(fig.layout.shapes) == 2
    assert [a.text for a in fig.layout.annotations] == ["<b>AL</b>"]
    assert list(fig.data[1].y) == [-2.0]


def test_dorsal_uirevision_changes_with_zoom(slice_atlas):
    view = DorsalView(slice_atlas)
    state = FilterState()
    a = view.render_figure(view.compute_data(state, CursorState()), state, CursorState())
    b_cursor = CursorState(x_range=(0.0, 12.0))
    b = view.render_figure(view.compute_data(state, b_cursor), state, b_cursor)
    assert a.layout.uirevision != b.layout.uirevision
