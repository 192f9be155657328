"""
Top-level package for NeuroPAL Lens.

A browser-hosted viewer for the colors and positions of NeuroPAL-labeled
neurons. Most code should import from submodules such as:
    neuropal_lens.core
    neuropal_lens.views
    neuropal_lens.ui
"""

__all__: list[str] = []
