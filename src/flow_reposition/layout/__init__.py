"""Grid layout module for process schemas.

Edges are split into main flow and branches, a depth-first walk assigns
grid cells, and the cells are mapped to pixel coordinates.
"""

from .classify import FlowSplit, FlowType, classify_targets
from .coordinates import LayoutConfig, apply_positions, compute_positions, layout_extent
from .traverse import GridAssignment, assign_grid

__all__ = [
    "FlowType",
    "FlowSplit",
    "classify_targets",
    "GridAssignment",
    "assign_grid",
    "LayoutConfig",
    "compute_positions",
    "apply_positions",
    "layout_extent",
]
