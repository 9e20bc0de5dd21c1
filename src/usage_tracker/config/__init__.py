"""Configuration management.

Modules:
    settings: Config loading, saving, and validation
"""

from usage_tracker.config.settings import (
    CONFIG_FILENAME,
    CONFIG_SCHEMA,
    DEFAULT_CONFIG,
    convert_config_value,
    get_config_path,
    load_config,
    log_level_for,
    reset_config,
    save_config,
    validate_config,
)

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
