"""Configuration management for usage-tracker.

Provides functions for loading, saving, and validating the configuration
file kept next to the usage data.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

# File name inside the data directory
CONFIG_FILENAME = "config.json"

# Default configuration values
DEFAULT_CONFIG = {
    "backup": True,
    "utc": False,
    "color": True,
    "log_level": "WARNING",
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Config schema for validation
# Format: key -> (expected_types, required, validator_func or None)
# validator_func takes value and returns (is_valid, error_message)
ValidatorFunc = Callable[[Union[str, int, float, bool, None]], Tuple[bool, str]]

CONFIG_SCHEMA: dict[str, tuple[tuple, bool, Optional[ValidatorFunc]]] = {
    "backup": ((bool,), False, None),
    "utc": ((bool,), False, None),
    "color": ((bool,), False, None),
    "log_level": (
        (str,),
        False,
        lambda v: (True, "")
        if isinstance(v, str) and v.upper() in LOG_LEVELS
        else (False, f"must be one of: {', '.join(sorted(LOG_LEVELS))}"),
    ),
}


def get_config_path(data_dir: Path) -> Path:
    return data_dir / CONFIG_FILENAME


def validate_config(config: dict) -> List[str]:
    """Validate configuration against schema.

    Args:
        config: Configuration dictionary to validate.

    Returns:
        List of validation error messages. Empty list if valid.
    """
    errors = []

    # Check for unknown keys
    for key in config:
        if key not in CONFIG_SCHEMA:
            errors.append(f"Unknown config key: '{key}'")

    # Validate each known key
    for key, (expected_types, required, validator) in CONFIG_SCHEMA.items():
        if required and key not in config:
            errors.append(f"Missing required key: '{key}'")
            continue

        if key not in config:
            continue

        value = config[key]

        if not isinstance(value, expected_types):
            type_names = " or ".join(t.__name__ for t in expected_types)
            errors.append(
                f"'{key}' has invalid type: expected {type_names}, got {type(value).__name__}"
            )
            continue

        if validator and value is not None:
            is_valid, error_msg = validator(value)
            if not is_valid:
                errors.append(f"'{key}' {error_msg}")

    return errors


def load_config(
    config_file: Path,
    validate: bool = True,
    silent: bool = False,
) -> dict:
    """Load configuration from file.

    Invalid values are reported and replaced by their defaults.

    Args:
        config_file: Path to the config file.
        validate: Whether to validate config and warn on errors. Default True.
        silent: If True, suppress warning output. Default False.

    Returns:
        Configuration dictionary merged with defaults.
    """
    if not config_file.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_file, encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        if not silent:
            print(f"Warning: Unable to read config {config_file}: {e}", file=sys.stderr)
        return DEFAULT_CONFIG.copy()

    if not isinstance(config, dict):
        if not silent:
            print(f"Warning: Ignoring config {config_file}: not a JSON object", file=sys.stderr)
        return DEFAULT_CONFIG.copy()

    if validate:
        errors = validate_config(config)
        if errors:
            if not silent:
                print("Warning: Config validation errors:", file=sys.stderr)
                for error in errors:
                    print(f"  - {error}", file=sys.stderr)
            config = {
                k: v
                for k, v in config.items()
                if k in CONFIG_SCHEMA and not validate_config({k: v})
            }

    return {**DEFAULT_CONFIG, **config}


def save_config(config: dict, config_file: Path) -> None:
    """Save configuration to file.

    Args:
        config: Configuration dictionary to save.
        config_file: Path to the config file.
    """
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)


def reset_config(config_file: Path) -> None:
    """Reset configuration to default values."""
    save_config(DEFAULT_CONFIG.copy(), config_file=config_file)


def convert_config_value(key: str, value: str) -> Union[str, bool]:
    """Convert a command-line string to the type of the key's default.

    Raises:
        KeyError: If ``key`` is not a known config key.
        ValueError: If the value can't be converted or fails validation.
    """
    if key not in DEFAULT_CONFIG:
        raise KeyError(key)

    expected_type = type(DEFAULT_CONFIG[key])
    if expected_type == bool:
        lowered = value.lower()
        if lowered in ("true", "1", "yes", "on"):
            converted = True
        elif lowered in ("false", "0", "no", "off"):
            converted = False
        else:
            raise ValueError(f"'{key}' must be true or false")
    else:
        converted = value.upper() if key == "log_level" else value

    errors = validate_config({key: converted})
    if errors:
        raise ValueError(errors[0])
    return converted


def log_level_for(config: dict, debug: bool = False) -> int:
    """Logging level from config, or DEBUG when ``debug`` is set."""
    if debug:
        return logging.DEBUG
    return getattr(logging, str(config.get("log_level", "WARNING")).upper(), logging.WARNING)


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "CONFIG_SCHEMA",
    "get_config_path",
    "validate_config",
    "load_config",
    "save_config",
    "reset_config",
    "convert_config_value",
    "log_level_for",
]
