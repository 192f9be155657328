from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from neuropal_lens.config.model import GlobalConfig
from neuropal_lens.core.view_registry import ViewRegistry
from neuropal_lens.services.atlas_service import AtlasManager


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config root, lazy atlas manager and the
    view registry. Passed into layout + callback registration functions
    instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    atlas_by_name: AtlasManager
    default_atlas_name: Optional[str] = None
    registry: Optional[ViewRegistry] = None

    @property
    def atlas_names(self) -> List[str]:
        return sorted(self.atlas_by_name)

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if not self.atlas_names:
            raise RuntimeError("AppConfig has no atlases configured.")
