"""Depth-first grid assignment from the start node."""

import logging
from dataclasses import dataclass, field

from ..graph import FlowGraph
from .classify import FlowType, classify_targets

logger = logging.getLogger(__name__)


@dataclass
class GridAssignment:
    """Grid cell of every node reached from the start node."""

    levels: dict[str, int] = field(default_factory=dict)
    columns: dict[str, int] = field(default_factory=dict)
    order: list[str] = field(default_factory=list)  # Visit order
    reached_via: dict[str, tuple[str, FlowType]] = field(default_factory=dict)  # (parent, flow)
    dangling_edges: list[tuple[str, str]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def cell(self, node_id: str) -> tuple[int, int] | None:
        """Return (level, column) of a node, or None if it was not reached."""
        if node_id not in self.levels:
            return None
        return self.levels[node_id], self.columns[node_id]


def assign_grid(start_id: str, flow_graph: FlowGraph) -> GridAssignment:
    """Assign a (level, column) cell to every node reachable from start.

    Main-flow targets go one level down in the same column. Branch target i
    stays on the source's level in column + i + 1. Main flow is explored
    before branches and the first visit of a node fixes its cell, so
    reconverging paths keep the cell of the earliest path.

    Args:
        start_id: Id of the start node, placed at (0, 0).
        flow_graph: Indexed schema.

    Returns:
        GridAssignment with levels, columns and skipped dangling edges.
    """
    grid = GridAssignment()
    visited: set[str] = set()
    # Pending visits, popped in the order a recursive walk would make them
    stack: list[tuple[str, int, int, tuple[str, FlowType] | None]] = [(start_id, 0, 0, None)]

    while stack:
        node_id, level, column, via = stack.pop()
        if node_id in visited:
            continue
        visited.add(node_id)

        grid.levels[node_id] = level
        grid.columns[node_id] = column
        grid.order.append(node_id)
        if via is not None:
            grid.reached_via[node_id] = via

        targets = flow_graph.connections.get(node_id)
        if not targets:
            continue

        split = classify_targets(flow_graph.nodes_by_id[node_id], targets, flow_graph.nodes_by_id)
        for target_id in split.dangling:
            grid.dangling_edges.append((node_id, target_id))
            grid.warnings.append(f"Edge {node_id} -> {target_id} points to an unknown node")

        main_via = (node_id, FlowType.MAIN)
        branch_via = (node_id, FlowType.BRANCH)
        pending = [(target_id, level + 1, column, main_via) for target_id in split.main]
        pending += [
            (target_id, level, column + index + 1, branch_via)
            for index, target_id in enumerate(split.branch)
        ]
        stack.extend(reversed(pending))

    logger.debug("Assigned grid cells to %d nodes", len(grid.order))
    return grid
