from pathlib import Path

import numpy as np
import pandas as pd

n_pairs = 60

rng = np.random.default_rng()

names = [f"N{i:02d}" for i in range(n_pairs)]
x = rng.uniform(0.0, 60.0, size=n_pairs)
y = rng.normal(0.0, 4.0, size=n_pairs)
z = np.abs(rng.normal(0.0, 4.0, size=n_pairs))
rgb = rng.uniform(0.0, 1.0, size=(n_pairs, 3))

# Bilateral pairs: <name>L on the left (z >= 0), <name>R mirrored
left = pd.DataFrame({"name": [f"{n}L" for n in names], "x": x, "y": y, "z": z})
right = pd.DataFrame({"name": [f"{n}R" for n in names], "x": x, "y": y, "z": -z})
for df in (left, right):
    df[["r", "g", "b"]] = rgb

atlas = pd.concat([left, right], ignore_index=True).round(2)

Path("config/data").mkdir(parents=True, exist_ok=True)
atlas.to_csv("config/data/mock_atlas.csv", index=False)
print("wrote config/data/mock_atlas.csv", atlas.shape)
