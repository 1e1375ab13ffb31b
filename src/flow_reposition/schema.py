"""Read and write process schema documents."""

import json
from enum import IntEnum
from pathlib import Path

from .errors import InputNotFound, MalformedSchema


class NodeKind(IntEnum):
    """Node kinds, keyed by their ``obj_type`` code."""

    CONDITION = 0
    START = 1
    END = 2
    NORMAL = 3


# Kinds drawn as circles, positioned by their center rather than top-left corner
CENTER_PIVOT_KINDS = frozenset({NodeKind.START, NodeKind.END})


def node_kind(node: dict) -> NodeKind | None:
    """Return the kind of a node, or None for an unknown ``obj_type``."""
    try:
        return NodeKind(node.get("obj_type"))
    except ValueError:
        return None


def is_error_tagged(node: dict) -> bool:
    """Check whether a node's ``extra`` text marks it as an error terminal."""
    extra = node.get("extra")
    return isinstance(extra, str) and "error" in extra


def load_document(path: Path) -> dict:
    """Load a process schema document from a JSON file.

    Args:
        path: Path to the JSON document.

    Returns:
        The parsed document.

    Raises:
        InputNotFound: If the path is not an existing file.
        MalformedSchema: If the file is not valid UTF-8 JSON.
    """
    if not path.is_file():
        raise InputNotFound(f"File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise MalformedSchema(f"Invalid JSON in {path}: {err}") from err
    except OSError as err:
        raise InputNotFound(f"Cannot read {path}: {err}") from err


def extract_nodes(document: object) -> list[dict]:
    """Return the ``scheme.nodes`` list of a document.

    Raises:
        MalformedSchema: If the document has no nodes list.
    """
    scheme = document.get("scheme") if isinstance(document, dict) else None
    nodes = scheme.get("nodes") if isinstance(scheme, dict) else None
    if not isinstance(nodes, list):
        raise MalformedSchema("Invalid process schema format: Missing nodes array")
    return nodes


def output_path_for(path: Path, suffix: str = ".repositioned") -> Path:
    """Insert ``suffix`` before the file extension.

    ``process.json`` becomes ``process.repositioned.json``.
    """
    return path.with_name(f"{path.stem}{suffix}{path.suffix}")


def write_document(document: dict, path: Path) -> None:
    """Write a document as indented JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
        f.write("\n")
