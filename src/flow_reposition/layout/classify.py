"""Split a node's outgoing edges into main flow and branches."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from ..schema import NodeKind, is_error_tagged, node_kind

logger = logging.getLogger(__name__)


class FlowType(Enum):
    """Role of an edge in the layout."""

    MAIN = "main"  # Drawn below the source, same column
    BRANCH = "branch"  # Drawn beside the source, same level


@dataclass
class FlowSplit:
    """Targets of one source node, grouped by flow type in edge order."""

    main: list[str] = field(default_factory=list)
    branch: list[str] = field(default_factory=list)
    dangling: list[str] = field(default_factory=list)  # Targets missing from the index


def classify_targets(
    source: dict,
    targets: list[str],
    nodes_by_id: dict[str, dict],
) -> FlowSplit:
    """Classify each outgoing edge of a source node.

    Rules, first match wins:
    1. A condition source sends its first known target to a branch.
    2. An error-tagged end target goes to a branch.
    3. Anything else continues the main flow.

    Args:
        source: The source node.
        targets: Target ids in edge order.
        nodes_by_id: Mapping from node id to node.

    Returns:
        FlowSplit with main, branch and dangling targets.
    """
    split = FlowSplit()
    source_is_condition = node_kind(source) == NodeKind.CONDITION

    for target_id in targets:
        target = nodes_by_id.get(target_id)
        if target is None:
            logger.warning(
                "Edge %s -> %s points to an unknown node, skipping", source.get("id"), target_id
            )
            split.dangling.append(target_id)
            continue

        if source_is_condition and not split.branch:
            split.branch.append(target_id)
        elif node_kind(target) == NodeKind.END and is_error_tagged(target):
            split.branch.append(target_id)
        else:
            split.main.append(target_id)

    return split
