from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from neuropal_lens.config.loader import load_atlas_registry
from neuropal_lens.config.model import GlobalConfig
from neuropal_lens.core.view_registry import ViewRegistry
from neuropal_lens.services.atlas_service import AtlasManager
from neuropal_lens.ui.callbacks.callbacks_cursor import register_cursor_callbacks
from neuropal_lens.ui.callbacks.callbacks_io import register_io_callbacks
from neuropal_lens.ui.callbacks.callbacks_list import register_list_callbacks
from neuropal_lens.ui.callbacks.callbacks_render import register_render_callbacks
from neuropal_lens.ui.callbacks.callbacks_sync import register_sync_callbacks
from neuropal_lens.ui.config import AppConfig
from neuropal_lens.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_ROOT = Path(os.getenv("NEUROPAL_LENS_CONFIG", "config"))


def _build_view_registry(global_config: GlobalConfig) -> ViewRegistry:
    from neuropal_lens.views import AnteriorView, DorsalView, LateralView

    registry = ViewRegistry(
        slab_thickness=global_config.slab_thickness,
        highlight_distance=global_config.highlight_distance,
    )
    registry.register(LateralView)
    registry.register(AnteriorView)
    registry.register(DorsalView)
    return registry


def _choose_default_atlas(global_config: GlobalConfig, names: list[str]) -> Optional[str]:
    if not names:
        return None
    if global_config.default_atlas in names:
        return global_config.default_atlas
    if global_config.default_atlas:
        logger.warning(
            "Configured default atlas not found; falling back to first atlas",
            extra={"default_atlas": global_config.default_atlas},
        )
    return names[0]


def create_dash_app(config_root: Path | str = DEFAULT_CONFIG_ROOT) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config, cfg_by_name = load_atlas_registry(config_root)
    if not cfg_by_name:
        raise RuntimeError(f"No atlas configs were loaded from {config_root}")

    # 2) Initialize Service Layer
    atlas_manager = AtlasManager(cfg_by_name)
    registry = _build_view_registry(global_config)

    # 3) Choose Default Atlas
    default_atlas_name = _choose_default_atlas(global_config, sorted(cfg_by_name))

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        atlas_by_name=atlas_manager,
        default_atlas_name=default_atlas_name,
        registry=registry,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_cursor_callbacks(app, ctx)
    register_list_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "default_atlas": default_atlas_name},
    )
    return app
