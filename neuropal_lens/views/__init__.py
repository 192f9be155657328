from .lateral_view import LateralView
from .anterior_view import AnteriorView
from .dorsal_view import DorsalView

__all__ = ["LateralView", "AnteriorView", "DorsalView"]
