"""Build the flow graph index of a process schema."""

from dataclasses import dataclass, field

import networkx as nx

from .errors import MalformedSchema, NoStartNode
from .schema import NodeKind, node_kind

# Node ids and edge targets must be usable as index keys
ID_TYPES = (str, int)


@dataclass
class FlowGraph:
    """Indexed view of a schema's nodes and edges."""

    nodes_by_id: dict[str, dict] = field(default_factory=dict)
    connections: dict[str, list[str]] = field(default_factory=dict)  # Ordered, may hold duplicates
    digraph: nx.MultiDiGraph = field(default_factory=nx.MultiDiGraph)  # Known targets only


def _routing_targets(node: dict) -> list[str] | None:
    """Return the edge targets of a node, or None if it has no routing rules."""
    condition = node.get("condition")
    if not isinstance(condition, dict):
        return None
    logics = condition.get("logics")
    if not isinstance(logics, list):
        return None

    targets = []
    for logic in logics:
        if isinstance(logic, dict) and logic.get("to_node_id"):
            target = logic["to_node_id"]
            if not isinstance(target, ID_TYPES):
                raise MalformedSchema(f"Node {node['id']!r} routes to an invalid id {target!r}")
            targets.append(target)
    return targets


def build_flow_graph(nodes: object) -> FlowGraph:
    """Index nodes by id and collect their outgoing edges.

    Args:
        nodes: The ``scheme.nodes`` list of a document.

    Returns:
        FlowGraph with the id lookup, the ordered adjacency map and a
        networkx multigraph used for reachability queries.

    Raises:
        MalformedSchema: If nodes is not a list of objects with an ``id``.
    """
    if not isinstance(nodes, list):
        raise MalformedSchema("Invalid process schema format: Missing nodes array")

    flow_graph = FlowGraph()

    for index, node in enumerate(nodes):
        if not isinstance(node, dict) or "id" not in node:
            raise MalformedSchema(f"Node at index {index} is not an object with an id")
        if not isinstance(node["id"], ID_TYPES):
            raise MalformedSchema(f"Node at index {index} has an invalid id {node['id']!r}")
        flow_graph.nodes_by_id[node["id"]] = node
        flow_graph.digraph.add_node(node["id"], kind=node_kind(node))

    for node in nodes:
        targets = _routing_targets(node)
        if targets is None:
            continue
        flow_graph.connections[node["id"]] = targets
        for target in targets:
            if target in flow_graph.nodes_by_id:
                flow_graph.digraph.add_edge(node["id"], target)

    return flow_graph


def find_start_node(nodes: list[dict]) -> dict:
    """Return the single start node.

    Raises:
        NoStartNode: If there is no start node or more than one.
    """
    starts = [node for node in nodes if node_kind(node) == NodeKind.START]
    if not starts:
        raise NoStartNode("No start node found in the process")
    if len(starts) > 1:
        ids = ", ".join(str(node.get("id")) for node in starts)
        raise NoStartNode(f"Expected exactly one start node, found {len(starts)}: {ids}")
    return starts[0]


def find_unreachable(flow_graph: FlowGraph, start_id: str) -> list[str]:
    """List node ids not reachable from the start node, in document order."""
    reachable = nx.descendants(flow_graph.digraph, start_id) | {start_id}
    return [node_id for node_id in flow_graph.nodes_by_id if node_id not in reachable]
