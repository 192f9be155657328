from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Store:
        USER_STATE = "user-state"
        HOVER_STATE = "hover-state"
        ZOOM_STATE = "zoom-state"

    class Control:
        # Navbar
        ATLAS_SELECT = "atlas-select"
        THEME_SWITCH = "theme-switch"
        PANEL_TOGGLE_BTN = "panel-toggle-btn"

        # Page columns
        FILTER_PANEL_COL = "filter-panel-col"
        PLOT_PANEL_COL = "plot-panel-col"

        # Filter panel
        SIDEBAR_ATLAS_META = "sidebar-atlas-meta"
        SIDE_BTN = "side-btn"
        SEARCH_INPUT = "search-input"
        NEURON_LIST = "neuron-list"
        NEURON_COUNT = "neuron-count"

        # Downloads
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"


def graph_id(view_id: str) -> str:
    return f"{view_id}-graph"
