import json
from pathlib import Path

import pandas as pd

BASE_DIR = Path(__file__).parent.parent
CONFIG_ROOT = BASE_DIR / "config"
CONFIG_DIR = CONFIG_ROOT / "atlases"

REQUIRED_COLUMNS = ["name", "x", "y", "z", "r", "g", "b"]


def _data_root() -> Path:
    global_path = CONFIG_ROOT / "global.json"
    if global_path.is_file():
        data_root = json.loads(global_path.read_text()).get("data_root")
        if data_root:
            return (CONFIG_ROOT / data_root).resolve()
    return CONFIG_ROOT


def check_atlas_configs():
    print(f"{'ATLAS':<30} | {'CHECK':<15} | {'STATUS'}")
    print("-" * 70)

    if not CONFIG_DIR.exists():
        print(f"Error: Configuration directory not found at {CONFIG_DIR}")
        return

    config_files = sorted(CONFIG_DIR.glob("*.json"))
    if not config_files:
        print(f"No .json files found in {CONFIG_DIR}")
        return

    data_root = _data_root()

    for config_file in config_files:
        with open(config_file, "r") as f:
            try:
                config = json.load(f)
            except json.JSONDecodeError:
                print(f"{config_file.name:<30} | Error: Invalid JSON")
                continue

        atlas_name = config.get("name", config_file.stem)
        csv_path = (data_root / config.get("path", "")).resolve()

        if not csv_path.is_file():
            print(f"{atlas_name:<30} | {'file':<15} | MISSING at {csv_path}")
            continue

        try:
            df = pd.read_csv(csv_path)
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            print(f"{atlas_name:<30} | {'file':<15} | UNREADABLE: {e}")
            continue

        cols = [c.strip().lower() for c in df.columns]
        for col in REQUIRED_COLUMNS:
            status = "OK" if col in cols else "MISSING column"
            print(f"{atlas_name:<30} | {col:<15} | {status}")

        n_dupes = int(df.iloc[:, cols.index("name")].duplicated().sum()) if "name" in cols else 0
        if n_dupes:
            print(f"{atlas_name:<30} | {'names':<15} | {n_dupes} duplicate names (last row wins)")


if __name__ == "__main__":
    check_atlas_configs()
