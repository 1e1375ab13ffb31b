"""Pytest fixtures for process schema tests."""

import json

import pytest

CONDITION, START, END, NORMAL = 0, 1, 2, 3


def make_node(node_id: str, obj_type: int, *targets: str, extra: str | None = None) -> dict:
    """Build a schema node routing to the given targets."""
    node: dict = {"id": node_id, "obj_type": obj_type}
    if targets:
        node["condition"] = {"logics": [{"to_node_id": t} for t in targets]}
    if extra is not None:
        node["extra"] = extra
    return node


@pytest.fixture
def scenario_nodes() -> list[dict]:
    """start -> A (condition) -> {B (error end, branch), C (normal)} -> D (end)."""
    return [
        make_node("start", START, "A"),
        make_node("A", CONDITION, "B", "C"),
        make_node("B", END, extra='{"type": "error"}'),
        make_node("C", NORMAL, "D"),
        make_node("D", END),
    ]


@pytest.fixture
def chain_nodes() -> list[dict]:
    """Straight chain: start -> A -> B -> end."""
    return [
        make_node("start", START, "A"),
        make_node("A", NORMAL, "B"),
        make_node("B", NORMAL, "end"),
        make_node("end", END),
    ]


@pytest.fixture
def cyclic_nodes() -> list[dict]:
    """Loop: start -> A -> B -> A, B -> end."""
    return [
        make_node("start", START, "A"),
        make_node("A", NORMAL, "B"),
        make_node("B", NORMAL, "A", "end"),
        make_node("end", END),
    ]


@pytest.fixture
def diamond_nodes() -> list[dict]:
    """Diamond: start -> cond -> {left (branch), right (main)} -> join -> end."""
    return [
        make_node("start", START, "cond"),
        make_node("cond", CONDITION, "left", "right"),
        make_node("left", NORMAL, "join"),
        make_node("right", NORMAL, "join"),
        make_node("join", NORMAL, "end"),
        make_node("end", END),
    ]


@pytest.fixture
def error_fanout_nodes() -> list[dict]:
    """Normal node with two error ends beside its main flow."""
    return [
        make_node("start", START, "work"),
        make_node("work", NORMAL, "err1", "next", "err2"),
        make_node("err1", END, extra="error"),
        make_node("next", NORMAL, "done"),
        make_node("err2", END, extra="api error"),
        make_node("done", END),
    ]


@pytest.fixture
def write_document(tmp_path):
    """Write a document to ``process.json`` and return its path."""

    def _write(document: object, name: str = "process.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return path

    return _write
