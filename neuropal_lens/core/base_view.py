from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import plotly.graph_objs as go

from .atlas import NeuronAtlas
from .filter_state import CursorState, FilterState

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all plot views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally and as the Dash graph id suffix
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - select the neurons to draw for the current FilterState/CursorState
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    def __init__(self, atlas: NeuronAtlas, slab_thickness: float = 1.5, highlight_distance: float = 0.35):
        self.atlas = atlas
        self.slab_thickness = slab_thickness
        self.highlight_distance = highlight_distance

    @abstractmethod
    def compute_data(self, state: FilterState, cursor: CursorState) -> Any:
        """
        Compute the data given the current state
        :param state: the current {@link FilterState} - search query and body side
        :param cursor: the current {@link CursorState} - hover position and zoom of the lateral view
        :return: data: whatever render_figure needs
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: FilterState, cursor: CursorState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param state: the current {@link FilterState}
        :param cursor: the current {@link CursorState}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def selected_neurons(self, state: FilterState):
        """
        Neurons matching the search query and body side.

        All views should call this instead of touching atlas.select(...) directly.
        """
        return self.atlas.select(state.query, state.side)

    def timed_compute(self, state: FilterState, cursor: CursorState) -> Any:
        start = time.perf_counter()
        data = self.compute_data(state, cursor)
        logger.debug(
            "compute_data",
            extra={
                "view_id": self.id,
                "atlas": self.atlas.name,
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    @staticmethod
    def template(state: FilterState) -> str:
        return "plotly_dark" if state.dark else "plotly_white"

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
