"""CLI for flow-reposition."""

import argparse
import logging
import sys
from pathlib import Path

from .config import config_from_mapping, load_config, validate_suffix
from .errors import RepositionError
from .reposition import DEFAULT_SUFFIX, reposition_file


def resolve_config(args: argparse.Namespace):
    """Load the config file if provided and merge it with command line arguments.

    Returns:
        The LayoutConfig to use. ``args.suffix`` is filled in from the config
        file when not given on the command line.
    """
    config = load_config(args.config) if args.config else {}
    if args.suffix is None:
        args.suffix = validate_suffix(config.get("suffix", DEFAULT_SUFFIX))
    return config_from_mapping(config)


def print_summary(result) -> None:
    """Print what was positioned and what was left alone."""
    print(f"Positioned {len(result.positions)} nodes")

    if result.unreachable:
        print(f"{len(result.unreachable)} nodes not reachable from start (left unchanged):")
        for node_id in result.unreachable[:10]:
            print(f"  {node_id}")
        if len(result.unreachable) > 10:
            print(f"  ... and {len(result.unreachable) - 10} more")

    for warning in result.warnings:
        print(f"Warning: {warning}")

    if result.extent:
        min_x, min_y, max_x, max_y = result.extent
        print(f"Layout extent: ({min_x:g}, {min_y:g}) to ({max_x:g}, {max_y:g})")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for flow-reposition CLI."""
    parser = argparse.ArgumentParser(
        description="Reposition process schema nodes for a clean top-to-bottom layout"
    )
    parser.add_argument("path", type=Path, help="Path to the process JSON file")
    parser.add_argument("--config", type=Path, help="Path to YAML config file")
    parser.add_argument(
        "--suffix",
        type=str,
        help=f"Suffix inserted before the output file extension (default: {DEFAULT_SUFFIX})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Processing file: {args.path}")
    try:
        config = resolve_config(args)
        result = reposition_file(args.path, config, args.suffix)
    except RepositionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Process repositioned successfully. Output saved to: {result.output_path}")
    print_summary(result)


if __name__ == "__main__":
    main()
