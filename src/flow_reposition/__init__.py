"""Reposition nodes of process schemas into a readable top-to-bottom layout."""

from .errors import (
    ConfigError,
    InputNotFound,
    MalformedSchema,
    NoStartNode,
    RepositionError,
)
from .layout import LayoutConfig
from .reposition import LayoutResult, reposition_document, reposition_file, reposition_nodes

__all__ = [
    "RepositionError",
    "InputNotFound",
    "MalformedSchema",
    "NoStartNode",
    "ConfigError",
    "LayoutConfig",
    "LayoutResult",
    "reposition_nodes",
    "reposition_document",
    "reposition_file",
]
