import pandas as pd
import pytest

from neuropal_lens.core.atlas import NeuronAtlas


@pytest.fixture
def slice_atlas() -> NeuronAtlas:
    """
    Three neurons:
    - AL at (10, 0, 2)   left
    - BR at (11, 1, -3)  right, inside the x/y slab around AL but not highlighted
    - CL at (20, 0, 1)   left, outside the x slab around AL
    """
    df = pd.DataFrame(
        {
            "name": ["AL", "BR", "CL"],
            "x": [10.0, 11.0, 20.0],
            "y": [0.0, 1.0, 0.0],
            "z": [2.0, -3.0, 1.0],
            "r": [1.0, 0.0, 0.0],
            "g": [0.0, 1.0, 0.0],
            "b": [0.0, 0.0, 0.0],
        }
    )
    return NeuronAtlas.from_frame(df, name="slice")
