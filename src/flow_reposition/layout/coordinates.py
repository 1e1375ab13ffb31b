"""Map grid cells to pixel coordinates."""

import logging
from dataclasses import dataclass

from ..schema import CENTER_PIVOT_KINDS, node_kind
from .traverse import GridAssignment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    """Spacing and footprint constants of the pixel layout."""

    base_x: float = 500  # Horizontal origin of column 0
    base_y: float = 100  # Vertical origin of level 0
    vertical_spacing: float = 200  # Row pitch
    horizontal_spacing: float = 300  # Column pitch
    center_pivot_footprint: float = 56  # Diameter of start/end circles
    standard_footprint: float = 200  # Width of rectangular nodes
    center_offset: float | None = None  # Defaults to half the standard footprint

    @property
    def pivot_offset(self) -> float:
        """Shift applied to center-pivot nodes so they line up with their column."""
        if self.center_offset is not None:
            return self.center_offset
        return self.standard_footprint / 2


def compute_positions(
    grid: GridAssignment,
    nodes_by_id: dict[str, dict],
    config: LayoutConfig,
) -> dict[str, tuple[float, float]]:
    """Compute the pixel position of every node with a grid cell.

    Args:
        grid: Grid assignment from the traverser.
        nodes_by_id: Mapping from node id to node.
        config: Layout constants.

    Returns:
        Mapping from node id to (x, y), in visit order.
    """
    positions: dict[str, tuple[float, float]] = {}
    for node_id in grid.order:
        level, column = grid.levels[node_id], grid.columns[node_id]
        y = config.base_y + level * config.vertical_spacing
        x = config.base_x + column * config.horizontal_spacing
        if node_kind(nodes_by_id[node_id]) in CENTER_PIVOT_KINDS:
            x += config.pivot_offset
        positions[node_id] = (x, y)
    return positions


def apply_positions(
    nodes_by_id: dict[str, dict],
    positions: dict[str, tuple[float, float]],
) -> None:
    """Write positions onto the node records, leaving other nodes untouched."""
    for node_id, (x, y) in positions.items():
        node = nodes_by_id[node_id]
        node["x"] = x
        node["y"] = y
    logger.debug("Positioned %d of %d nodes", len(positions), len(nodes_by_id))


def layout_extent(
    positions: dict[str, tuple[float, float]],
    nodes_by_id: dict[str, dict],
    config: LayoutConfig,
) -> tuple[float, float, float, float] | None:
    """Bounding box (min_x, min_y, max_x, max_y) of the positioned footprints.

    Center-pivot nodes extend half their footprint around the pivot, other
    nodes extend the standard footprint right and down from their corner.
    Returns None when nothing was positioned.
    """
    if not positions:
        return None

    boxes = []
    for node_id, (x, y) in positions.items():
        if node_kind(nodes_by_id[node_id]) in CENTER_PIVOT_KINDS:
            half = config.center_pivot_footprint / 2
            boxes.append((x - half, y - half, x + half, y + half))
        else:
            size = config.standard_footprint
            boxes.append((x, y, x + size, y + size))

    return (
        min(box[0] for box in boxes),
        min(box[1] for box in boxes),
        max(box[2] for box in boxes),
        max(box[3] for box in boxes),
    )
