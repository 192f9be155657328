"""
Core domain layer: neurons and atlases, filter state, view base class,
and the view registry
"""

from .atlas import NeuronAtlas
from .body_side import BodySide
from .neuron import Neuron
from .filter_state import CursorState, FilterState
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = ["NeuronAtlas", "BodySide", "Neuron", "CursorState", "FilterState", "BaseView", "ViewRegistry"]
