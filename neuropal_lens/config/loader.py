from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

from neuropal_lens.config.model import AtlasConfig, GlobalConfig
from neuropal_lens.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _resolve_data_root(root: Path, raw_global: dict) -> Path | None:
    data_root_raw = raw_global.get("data_root")
    if data_root_raw is None:
        return None
    data_root_path = Path(data_root_raw)
    if data_root_path.is_absolute():
        return data_root_path
    return (root / data_root_path).resolve()


def _positive_float(raw_global: dict, key: str, default: float) -> float:
    value = raw_global.get(key, default)
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"global.json: '{key}' must be a number, got {value!r}")
    if value <= 0:
        raise ConfigError(f"global.json: '{key}' must be positive, got {value}")
    return value


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout:

        root/
          global.json
          atlases/
            *.json
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    data_root = _resolve_data_root(root, raw_global)

    atlases_dir = root / "atlases"
    atlases: List[AtlasConfig] = []

    if atlases_dir.is_dir():
        logger.info(f"Scanning for atlas configurations in: {atlases_dir}")

        files = sorted(atlases_dir.glob("*.json"))
        if not files:
            logger.warning(f"No .json files found in {atlases_dir}")

        for idx, config_file in enumerate(files):
            logger.info(f"Loading atlas config: {config_file.name}")
            try:
                with config_file.open() as f:
                    raw = json.load(f)
                if not isinstance(raw, dict):
                    raise ConfigError(f"expected a JSON object, got {type(raw).__name__}")
                if not isinstance(raw.get("path"), str) or not raw["path"]:
                    raise ConfigError("'path' must be a non-empty string")
                if not isinstance(raw.get("name", ""), str):
                    raise ConfigError("'name' must be a string")
                atlases.append(
                    AtlasConfig.from_raw(
                        raw,
                        source_path=config_file,
                        index=idx,
                        data_root=data_root if data_root is not None else root,
                    )
                )
            except (OSError, json.JSONDecodeError, ConfigError) as e:
                logger.error(f"Failed to load {config_file.name}: {e}")
    else:
        logger.warning(f"Atlases directory not found at: {atlases_dir}")

    defaults = GlobalConfig()
    return GlobalConfig(
        ui_title=raw_global.get("ui_title", defaults.ui_title),
        subtitle=raw_global.get("subtitle", defaults.subtitle),
        source_url=raw_global.get("source_url", defaults.source_url),
        default_atlas=raw_global.get("default_atlas"),
        data_root=data_root,
        slab_thickness=_positive_float(raw_global, "slab_thickness", defaults.slab_thickness),
        highlight_distance=_positive_float(raw_global, "highlight_distance", defaults.highlight_distance),
        atlases=atlases,
    )


def load_atlas_registry(path: Path) -> tuple[GlobalConfig, Dict[str, AtlasConfig]]:
    """
    Load global config + atlas config objects only (no CSV loading).
    Returns mapping of atlas name -> AtlasConfig.
    """
    global_config = load_global_config(path)

    cfg_by_name: Dict[str, AtlasConfig] = {}
    duplicates: List[str] = []

    for atlas_cfg in global_config.atlases:
        if atlas_cfg.name in cfg_by_name:
            duplicates.append(atlas_cfg.name)
            continue
        cfg_by_name[atlas_cfg.name] = atlas_cfg

    if duplicates:
        raise ConfigError(f"Duplicate atlas names in config: {sorted(set(duplicates))}")

    if not cfg_by_name:
        logger.warning(f"No atlases configured under: {path}")

    logger.info(
        "Atlas registry loaded (lazy mode; atlases not read yet)",
        extra={
            "config_root": str(path),
            "n_atlas_configs": len(cfg_by_name),
            "atlas_names": sorted(cfg_by_name.keys()),
        },
    )

    return global_config, cfg_by_name
