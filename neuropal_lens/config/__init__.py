"""
Config package for neuropal_lens.

Responsible for:
- config models (GlobalConfig, AtlasConfig)
- config I/O helpers (load_global_config / load_atlas_registry)
"""

from .model import AtlasConfig, GlobalConfig
from .loader import load_atlas_registry, load_global_config

__all__ = ["AtlasConfig", "GlobalConfig", "load_atlas_registry", "load_global_config"]
