import json
from pathlib import Path

import pytest

ATLAS_CSV = (
    "name,x,y,z,r,g,b\n"
    "AVAL,25.9,-0.6,1.8,0.9,0.9,0.9\n"
    "AVAR,26.0,-0.5,-1.9,0.9,0.9,0.9\n"
    "RIML,22.3,-2.1,2.9,0.9,0.55,0.55\n"
    "AIYL,20.7,-3.9,2.1,0.0,0.0,0.0\n"
)


@pytest.fixture
def config_root(tmp_path) -> Path:
    """
    Build a config dir:
    root/
      global.json
      atlases/
        atlas_0.json
      data/
        tiny.csv
    """
    root = tmp_path / "config"
    (root / "atlases").mkdir(parents=True)
    (root / "data").mkdir()
    (root / "data" / "tiny.csv").write_text(ATLAS_CSV)

    (root / "global.json").write_text(
        json.dumps(
            {
                "ui_title": "Test Lens",
                "default_atlas": "Tiny",
                "data_root": "data",
                "slab_thickness": 2.0,
            }
        )
    )
    (root / "atlases" / "atlas_0.json").write_text(
        json.dumps({"name": "Tiny", "path": "tiny.csv", "description": "four neurons"})
    )
    return root
