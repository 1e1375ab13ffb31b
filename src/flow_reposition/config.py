"""Load layout configuration from a YAML file."""

import os
from pathlib import Path

from .errors import ConfigError
from .layout import LayoutConfig

# YAML key -> LayoutConfig field
CONFIG_KEYS = {
    "baseX": "base_x",
    "baseY": "base_y",
    "verticalSpacing": "vertical_spacing",
    "horizontalSpacing": "horizontal_spacing",
    "centerPivotFootprint": "center_pivot_footprint",
    "standardFootprint": "standard_footprint",
    "centerOffset": "center_offset",
}

# Keys read by the CLI rather than the layout
CLI_KEYS = {"suffix"}


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping.
    """
    try:
        import yaml
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err

    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except OSError as err:
        raise ConfigError(f"Cannot read config file {config_path}: {err}") from err
    except yaml.YAMLError as err:
        raise ConfigError(f"Invalid YAML in {config_path}: {err}") from err

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return config


def config_from_mapping(config: dict) -> LayoutConfig:
    """Build a LayoutConfig from configuration values.

    Unknown keys and non-numeric values are rejected. Missing keys keep
    their defaults.
    """
    unknown = set(config) - set(CONFIG_KEYS) - CLI_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(map(str, unknown)))}")

    values = {}
    for key, field_name in CONFIG_KEYS.items():
        if key not in config:
            continue
        value = config[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"Config value {key!r} must be a number, got {value!r}")
        values[field_name] = value

    return LayoutConfig(**values)


def validate_suffix(suffix: object) -> str:
    """Check that an output suffix names a sibling file of the input.

    Raises:
        ConfigError: If the suffix is not a non-empty string or contains a
            path separator.
    """
    if not isinstance(suffix, str) or not suffix:
        raise ConfigError(f"Output suffix must be a non-empty string, got {suffix!r}")
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    if any(sep in suffix for sep in separators):
        raise ConfigError(f"Output suffix must not contain a path separator: {suffix!r}")
    return suffix
