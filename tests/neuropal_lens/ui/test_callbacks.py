import dataclasses

import plotly.graph_objs as go
import pytest
from dash import Dash, exceptions

from neuropal_lens.config.model import AtlasConfig
from neuropal_lens.core.body_side import BodySide
from neuropal_lens.core.filter_state import FilterState
from neuropal_lens.services.atlas_service import AtlasManager
from neuropal_lens.ui.callbacks.callbacks_cursor import next_zoom_state
from neuropal_lens.ui.callbacks.callbacks_io import export_filename
from neuropal_lens.ui.callbacks.callbacks_render import render_view
from neuropal_lens.ui.callbacks.callbacks_sync import build_user_state
from neuropal_lens.ui.dash_app import create_dash_app
from neuropal_lens.ui.helpers import atlas_meta_text, get_atlas, neuron_list_children
from neuropal_lens.ui.ids import IDs, graph_id


@pytest.fixture
def app_and_ctx(config_root, monkeypatch):
    captured = {}

    import neuropal_lens.ui.dash_app as dash_app

    real_build_layout = dash_app.build_layout

    def capture(ctx):
        captured["ctx"] = ctx
        return real_build_layout(ctx)

    monkeypatch.setattr(dash_app, "build_layout", capture)
    app = create_dash_app(config_root)
    return app, captured["ctx"]


def test_create_dash_app(app_and_ctx):
    app, ctx = app_and_ctx
    assert isinstance(app, Dash)
    assert app.title == "Test Lens"
    assert ctx.default_atlas_name == "Tiny"
    assert [c.id for c in ctx.registry.all_classes()] == ["lateral", "anterior", "dorsal"]


def test_create_dash_app_without_atlases(tmp_path):
    (tmp_path / "global.json").write_text("{}")
    with pytest.raises(RuntimeError, match="No atlas configs"):
        create_dash_app(tmp_path)


def test_build_user_state_initial_call_keeps_stored_toggles(app_and_ctx):
    _, ctx = app_and_ctx
    stored = FilterState(atlas_name="Tiny", side=BodySide.RIGHT, show_filter_panel=False).to_dict()

    state = build_user_state(ctx, stored, None, "Tiny", "AVA", False)

    assert state.side is BodySide.RIGHT
    assert state.show_filter_panel is False
    assert state.query == "AVA"


def test_build_user_state_button_events(app_and_ctx):
    _, ctx = app_and_ctx
    stored = FilterState(atlas_name="Tiny").to_dict()

    state = build_user_state(ctx, stored, IDs.Control.SIDE_BTN, "Tiny", "*", True)
    assert state.side is BodySide.LEFT
    assert state.dark is True

    state = build_user_state(ctx, state.to_dict(), IDs.Control.PANEL_TOGGLE_BTN, "Tiny", "*", True)
    assert state.side is BodySide.LEFT
    assert state.show_filter_panel is False


def test_build_user_state_unknown_atlas_falls_back(app_and_ctx):
    _, ctx = app_and_ctx
    state = build_user_state(ctx, {"atlas_name": "gone"}, None, "also-gone", None, None)
    assert state.atlas_name == "Tiny"
    assert state.query == "*"


def test_render_view_returns_figures(app_and_ctx):
    _, ctx = app_and_ctx
    fs = FilterState(atlas_name="Tiny").to_dict()

    lateral = render_view(ctx, "lateral", fs)
    anterior = render_view(ctx, "anterior", fs, hover=[25.9, -0.6])
    dorsal = render_view(ctx, "dorsal", fs, hover=[25.9, -0.6], x_range=[20.0, 30.0])

    for fig in (lateral, anterior, dorsal):
        assert isinstance(fig, go.Figure)
    assert len(lateral.data) == 1
    # AVAL and its close right-side partner AVAR both sit under the cursor
    assert [a.text for a in anterior.layout.annotations] == ["<b>AVAL</b>", "<b>AVAR</b>"]


def test_render_view_error_paths(app_and_ctx):
    _, ctx = app_and_ctx

    fig = render_view(ctx, "lateral", None)
    assert "No atlas selected." in fig.layout.annotations[0].text

    fig = render_view(ctx, "lateral", {"atlas_name": "missing"})
    assert "not available" in fig.layout.annotations[0].text

    fig = render_view(ctx, "no-such-view", FilterState(atlas_name="Tiny").to_dict())
    assert "unexpected error" in fig.layout.annotations[0].text


def test_render_view_survives_malformed_atlas_config(app_and_ctx, config_root):
    _, ctx = app_and_ctx
    # bypasses the loader checks, as a hand-built AtlasConfig would
    broken = AtlasConfig.from_raw(
        {"name": "Broken", "path": 5},
        source_path=config_root / "atlases" / "atlas_5.json",
        index=5,
    )
    ctx = dataclasses.replace(ctx, atlas_by_name=AtlasManager({"Broken": broken}))
    fs = FilterState(atlas_name="Broken").to_dict()

    assert get_atlas(ctx, "Broken") is None
    for view_id in ("lateral", "anterior", "dorsal"):
        fig = render_view(ctx, view_id, fs)
        assert "not available" in fig.layout.annotations[0].text


def test_zoom_state_follows_relayout_events():
    assert next_zoom_state(graph_id("lateral"), {"xaxis.range[0]": 30, "xaxis.range[1]": 10}, None) == [10.0, 30.0]
    assert next_zoom_state(graph_id("lateral"), {"xaxis.autorange": True}, [10.0, 30.0]) is None

    with pytest.raises(exceptions.PreventUpdate):
        next_zoom_state(graph_id("lateral"), {"dragmode": "pan"}, [10.0, 30.0])


def test_zoom_state_cleared_on_atlas_change():
    assert next_zoom_state(IDs.Control.ATLAS_SELECT, None, [10.0, 30.0]) is None

    with pytest.raises(exceptions.PreventUpdate):
        next_zoom_state(IDs.Control.ATLAS_SELECT, None, None)

def test_neuron_list_rows(app_and_ctx):
    _, ctx = app_and_ctx
    atlas = get_atlas(ctx, "Tiny")
    rows = neuron_list_children(atlas.select("AIY AVA", BodySide.LEFT))

    assert [r.title for r in rows] == ["AIYL", "AVAL"]
    # black neuron row is painted white
    assert rows[0].style["backgroundColor"] == "#ffffff"
    assert rows[0].children.startswith("AIYL  (")
    assert atlas_meta_text(atlas) == "4 neurons · four neurons"
    assert atlas_meta_text(None) == "No atlas loaded"


def test_neuron_list_empty_message():
    rows = neuron_list_children([])
    assert len(rows) == 1
    assert "No neurons" in rows[0].children


def test_export_filename():
    assert export_filename(FilterState(atlas_name="NeuroPAL sample", side=BodySide.LEFT)) == "NeuroPAL_sample_left.csv"
    assert export_filename(FilterState()) == "atlas_both.csv"
