"""Exceptions raised while repositioning a process schema."""


class RepositionError(Exception):
    """Base class for all fatal repositioning errors."""


class InputNotFound(RepositionError):
    """The input path does not resolve to a readable file."""


class MalformedSchema(RepositionError):
    """The document is not a process schema with a ``scheme.nodes`` list."""


class NoStartNode(RepositionError):
    """The schema does not contain exactly one start node."""


class ConfigError(RepositionError):
    """The layout configuration file is invalid."""
