from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping

from neuropal_lens.config.model import AtlasConfig
from neuropal_lens.core.atlas import NeuronAtlas
from neuropal_lens.core.exceptions import NeuropalLensError

logger = logging.getLogger(__name__)


def atlas_from_config(cfg: AtlasConfig) -> NeuronAtlas:
    return NeuronAtlas.from_csv(cfg.path, name=cfg.name, description=cfg.description)


class AtlasManager(Mapping[str, NeuronAtlas]):
    """
    Central service for managing atlases.
    Implements the Mapping interface (dict-like) so atlases are read from
    disk on first access only.
    """

    def __init__(self, cfg_by_name: Dict[str, AtlasConfig]):
        self._cfg_by_name = cfg_by_name
        self._loaded: Dict[str, NeuronAtlas] = {}

    def __getitem__(self, name: str) -> NeuronAtlas:
        if name in self._loaded:
            return self._loaded[name]

        cfg = self._cfg_by_name.get(name)
        if cfg is None:
            raise KeyError(f"Unknown atlas '{name}'")

        try:
            logger.info("Lazy-loading atlas", extra={"atlas": cfg.name, "path": str(cfg.path)})
            atlas = atlas_from_config(cfg)
        except NeuropalLensError as e:
            logger.error(
                "Atlas error on load",
                extra={"atlas": cfg.name, "error": str(e)},
            )
            raise
        except Exception:
            logger.exception(
                "Unexpected error while loading atlas",
                extra={"atlas": cfg.name},
            )
            raise

        self._loaded[name] = atlas
        return atlas

    def __iter__(self) -> Iterator[str]:
        return iter(self._cfg_by_name)

    def __len__(self) -> int:
        return len(self._cfg_by_name)

    def get(self, name: str, default=None) -> NeuronAtlas | None:
        try:
            return self[name]
        except KeyError:
            return default

    def is_loaded(self, name: str) -> bool:
        return name in self._loaded

    def config(self, name: str) -> AtlasConfig | None:
        return self._cfg_by_name.get(name)
