"""Lay out a process schema and write the repositioned document."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import validate_suffix
from .graph import build_flow_graph, find_start_node, find_unreachable
from .layout import (
    GridAssignment,
    LayoutConfig,
    apply_positions,
    assign_grid,
    compute_positions,
    layout_extent,
)
from .schema import extract_nodes, load_document, output_path_for, write_document

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".repositioned"


@dataclass
class LayoutResult:
    """Outcome of one repositioning run."""

    start_id: str
    grid: GridAssignment
    positions: dict[str, tuple[float, float]] = field(default_factory=dict)
    unreachable: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    extent: tuple[float, float, float, float] | None = None  # (min_x, min_y, max_x, max_y)
    output_path: Path | None = None


def reposition_nodes(nodes: list[dict], config: LayoutConfig | None = None) -> LayoutResult:
    """Assign x/y to every node reachable from the start node.

    Nodes are mutated in place. Validation errors are raised before any
    node is touched.

    Raises:
        MalformedSchema: If nodes is not a list of node objects.
        NoStartNode: If there is not exactly one start node.
    """
    config = config or LayoutConfig()

    flow_graph = build_flow_graph(nodes)
    start_id = find_start_node(nodes)["id"]

    grid = assign_grid(start_id, flow_graph)
    positions = compute_positions(grid, flow_graph.nodes_by_id, config)
    apply_positions(flow_graph.nodes_by_id, positions)

    unreachable = find_unreachable(flow_graph, start_id)
    if unreachable:
        logger.info("%d nodes are not reachable from the start node", len(unreachable))

    return LayoutResult(
        start_id=start_id,
        grid=grid,
        positions=positions,
        unreachable=unreachable,
        warnings=list(grid.warnings),
        extent=layout_extent(positions, flow_graph.nodes_by_id, config),
    )


def reposition_document(document: dict, config: LayoutConfig | None = None) -> LayoutResult:
    """Reposition the ``scheme.nodes`` of a parsed document in place."""
    return reposition_nodes(extract_nodes(document), config)


def reposition_file(
    path: Path,
    config: LayoutConfig | None = None,
    suffix: str = DEFAULT_SUFFIX,
) -> LayoutResult:
    """Reposition a schema file and save it next to the input.

    Args:
        path: Path to the input JSON document.
        config: Layout constants, defaults if None.
        suffix: Inserted before the extension to name the output file.

    Returns:
        LayoutResult with ``output_path`` set.

    Raises:
        InputNotFound: If the input file does not exist.
        MalformedSchema: If the document is not a process schema.
        NoStartNode: If there is not exactly one start node.
        ConfigError: If the suffix is empty or contains a path separator.
    """
    validate_suffix(suffix)

    document = load_document(path)
    result = reposition_document(document, config)

    output_path = output_path_for(path, suffix)
    write_document(document, output_path)
    result.output_path = output_path
    logger.debug("Wrote %s", output_path)
    return result
