from pathlib import Path

import pandas as pd
import pytest

from neuropal_lens.core.atlas import NeuronAtlas, parse_query
from neuropal_lens.core.body_side import BodySide
from neuropal_lens.core.exceptions import AtlasLoadError, AtlasSchemaError


def _make_atlas() -> NeuronAtlas:
    df = pd.DataFrame(
        {
            "name": ["AVAR", "AVAL", "RIML", "RIMR", "M1"],
            "x": [26.0, 25.9, 22.3, 22.4, 9.1],
            "y": [-0.5, -0.6, -2.1, -2.0, 4.7],
            "z": [-1.9, 1.8, 2.9, -2.8, 0.0],
            "r": [0.9, 0.9, 0.9, 0.9, 0.7],
            "g": [0.9, 0.9, 0.55, 0.55, 0.3],
            "b": [0.9, 0.9, 0.55, 0.55, 0.95],
        }
    )
    return NeuronAtlas.from_frame(df, name="test")


def _write_csv(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "atlas.csv"
    path.write_text(text)
    return path


def test_parse_query_splits_on_all_separators():
    assert parse_query("AVA RIM;M1,\tI1") == ["AVA", "RIM", "M1", "I1"]
    assert parse_query("  ,, ;") == []
    assert parse_query(None) == []


def test_select_wildcard_returns_all_sorted():
    atlas = _make_atlas()
    names = [n.name for n in atlas.select("*")]
    assert names == ["AVAL", "AVAR", "M1", "RIML", "RIMR"]


def test_select_prefix_is_case_sensitive():
    atlas = _make_atlas()
    assert [n.name for n in atlas.select("AVA RIMR")] == ["AVAL", "AVAR", "RIMR"]
    assert atlas.select("ava") == []


def test_empty_query_selects_nothing():
    atlas = _make_atlas()
    assert atlas.select("") == []
    assert atlas.select(" ; ") == []


def test_select_by_side():
    atlas = _make_atlas()
    left = [n.name for n in atlas.select("*", BodySide.LEFT)]
    right = [n.name for n in atlas.select("*", BodySide.RIGHT)]
    assert left == ["AVAL", "M1", "RIML"]
    assert right == ["AVAR", "RIMR"]
    assert sorted(left + right) == atlas.names


def test_from_csv_skips_bad_rows_and_keeps_last_duplicate(tmp_path):
    path = _write_csv(
        tmp_path,
        "name,x,y,z,r,g,b\n"
        "AVAL,1,2,3,0.1,0.2,0.3\n"
        ",1,2,3,0.1,0.2,0.3\n"
        "BAD,abc,2,3,0.1,0.2,0.3\n"
        "SHORT,1,2\n"
        "AVAL,4,5,6,0.4,0.5,0.6\n",
    )

    atlas = NeuronAtlas.from_csv(path)

    assert atlas.name == "atlas"
    assert atlas.file_path == path
    assert atlas.names == ["AVAL"]
    assert atlas["AVAL"].x == 4.0
    assert atlas["AVAL"].b == 0.6


def test_from_csv_drops_rows_with_too_many_fields(tmp_path, caplog):
    path = _write_csv(
        tmp_path,
        "name,x,y,z,r,g,b\n"
        "AVAL,25.9,-0.6,1.8,0.9,0.9,0.9\n"
        "RIML,1,2,3,0.1,0.2,0.3,EXTRA\n"
        "M1,9.1,4.7,0.0,0.7,0.3,0.95\n",
    )

    with caplog.at_level("WARNING"):
        atlas = NeuronAtlas.from_csv(path)

    assert atlas.names == ["AVAL", "M1"]
    assert "RIML" not in atlas
    assert any(getattr(r, "n_skipped", None) == 1 for r in caplog.records)


def test_from_csv_ignores_extra_columns_and_header_case(tmp_path):
    path = _write_csv(
        tmp_path,
        "Name, X, Y, Z, R, G, B, note\n"
        "I1L,6.8,1.9,2.2,0.4,0.9,0.85,pharynx\n",
    )
    atlas = NeuronAtlas.from_csv(path, name="custom")
    assert atlas.name == "custom"
    assert "I1L" in atlas
    assert len(atlas) == 1


def test_missing_column_raises_schema_error(tmp_path):
    path = _write_csv(tmp_path, "name,x,y,z,r,g\nAVAL,1,2,3,0.1,0.2\n")
    with pytest.raises(AtlasSchemaError, match="'b'"):
        NeuronAtlas.from_csv(path)


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(AtlasLoadError, match="not found"):
        NeuronAtlas.from_csv(tmp_path / "nope.csv")


def test_to_frame_uses_csv_column_order():
    atlas = _make_atlas()
    df = atlas.to_frame(atlas.select("RIM"))
    assert list(df.columns) == ["name", "x", "y", "z", "r", "g", "b"]
    assert list(df["name"]) == ["RIML", "RIMR"]

