from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

DEFAULT_UI_TITLE = "NeuroPAL Lens"
DEFAULT_SOURCE_URL = "https://github.com/lycantrope/neuropal_lens"


@dataclass
class AtlasConfig:
    """
    Parsed config entry for a single atlas file.
    """
    raw: Dict[str, Any]
    source_path: Path
    index: int
    data_root: Optional[Path] = None

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Atlas {self.index}")

    @property
    def key(self) -> str:
        return self.raw.get("key") or self.name

    @property
    def description(self) -> str:
        return self.raw.get("description", "")

    @property
    def path(self) -> Path:
        p = Path(self.raw["path"])
        if p.is_absolute():
            return p
        base = self.data_root if self.data_root is not None else self.source_path.parent
        return (base / p).resolve()

    @classmethod
    def from_raw(
        cls,
        raw: Dict[str, Any],
        source_path: Path,
        index: int,
        data_root: Optional[Path] = None,
    ) -> AtlasConfig:
        return cls(raw=raw, source_path=source_path, index=index, data_root=data_root)


@dataclass
class GlobalConfig:
    ui_title: str = DEFAULT_UI_TITLE
    subtitle: str = "NeuroPAL neuron colors and positions"
    source_url: str = DEFAULT_SOURCE_URL
    default_atlas: Optional[str] = None
    data_root: Optional[Path] = None
    slab_thickness: float = 1.5
    highlight_distance: float = 0.35
    atlases: List[AtlasConfig] = field(default_factory=list)
