"""Usage data storage and retrieval.

Loads the registry from the first data file found in the data directory
and writes it back, rotating the previous file to a backup.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable

from usage_tracker.errors import PathIsNotFileError, StorageIOError, StoreParseError
from usage_tracker.models.registry import UsageRegistry
from usage_tracker.storage.legacy import convert_legacy
from usage_tracker.utils.time import parse_timestamp, to_rfc3339

logger = logging.getLogger(__name__)

# Data file names inside the data directory
STORE_FILENAME = "usages.json"
LEGACY_FILENAME = "default.json"
BACKUP_SUFFIX = ".bak"

JSON_FORMAT = "JSON"
LEGACY_FORMAT = "legacy JSON"


def registry_to_dict(registry: UsageRegistry) -> dict[str, Any]:
    """Encode a registry in the current data file layout.

    Returns:
        ``{"<name>": {"usages": ["<RFC 3339>", ...]}, ...}`` in name order.
    """
    return {
        name: {"usages": [to_rfc3339(u) for u in usages.list()]}
        for name, usages in registry.list_verbose().items()
    }


def registry_from_dict(raw: Any) -> UsageRegistry:
    """Decode a registry from the current data file layout.

    Raises:
        TypeError: If the document doesn't have the expected shape.
        ValueError: If a name is empty or a timestamp is malformed.
    """
    if not isinstance(raw, dict):
        raise TypeError("expected an object mapping names to usage records")

    registry = UsageRegistry()
    for name, record in raw.items():
        if not isinstance(record, dict) or not isinstance(record.get("usages"), list):
            raise TypeError(f'record of "{name}" must be an object with a "usages" list')
        usages = registry.add(name)
        for stamp in record["usages"]:
            if not isinstance(stamp, str):
                raise TypeError(f'usage of "{name}" must be a timestamp string: {stamp!r}')
            usages.record(parse_timestamp(stamp))
    return registry


# Decoder for each data file format
DECODERS: dict[str, Callable[[Any], UsageRegistry]] = {
    JSON_FORMAT: registry_from_dict,
    LEGACY_FORMAT: convert_legacy,
}


def get_store_path(data_dir: Path) -> Path:
    return data_dir / STORE_FILENAME


def get_backup_path(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


def store_candidates(data_dir: Path) -> list[tuple[Path, str]]:
    """Data files to load from, in priority order, with their formats."""
    return [
        (data_dir / STORE_FILENAME, JSON_FORMAT),
        (data_dir / LEGACY_FILENAME, LEGACY_FORMAT),
    ]


def read_store(path: Path, format_name: str) -> UsageRegistry:
    """Read a registry from a data file in the given format.

    Raises:
        StorageIOError: If the file can't be read.
        StoreParseError: If the contents don't decode in ``format_name``.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StorageIOError(f'Unable to read "{path}"', e) from e

    try:
        registry = DECODERS[format_name](json.loads(text))
    except (ValueError, TypeError) as e:
        raise StoreParseError(path, format_name, e) from e

    logger.debug("Loaded %d objects from %s (%s)", len(registry), path, format_name)
    return registry


def load_registry(data_dir: Path) -> UsageRegistry:
    """Load the registry from the first data file that exists.

    Args:
        data_dir: Directory holding the data files.

    Returns:
        The stored registry, or an empty one if no data file exists.

    Raises:
        PathIsNotFileError: If a candidate path exists but isn't a file.
        StorageIOError: If the data file can't be read.
        StoreParseError: If the data file is malformed.
    """
    for path, format_name in store_candidates(data_dir):
        if not path.exists():
            logger.debug("No %s data file at %s", format_name, path)
            continue
        if not path.is_file():
            raise PathIsNotFileError(path)
        if format_name == LEGACY_FORMAT:
            logger.info("Migrating legacy data file %s", path)
        return read_store(path, format_name)

    logger.debug("No data file in %s, starting empty", data_dir)
    return UsageRegistry()


def save_registry(registry: UsageRegistry, data_dir: Path, backup: bool = True) -> Path:
    """Write the registry to the data file.

    The previous data file is moved to the backup location (replacing an
    older backup), or deleted when ``backup`` is False.

    Args:
        registry: Registry to save.
        data_dir: Directory holding the data files; created if missing.
        backup: Keep the previous data file as a backup.

    Returns:
        Path of the written data file.

    Raises:
        PathIsNotFileError: If the data file path isn't a regular file.
        StorageIOError: If any filesystem step fails.
    """
    path = get_store_path(data_dir)
    backup_path = get_backup_path(path)
    content = json.dumps(registry_to_dict(registry), indent=2) + "\n"

    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageIOError(f'Unable to create data directory "{data_dir}"', e) from e

    if path.exists() and not path.is_file():
        raise PathIsNotFileError(path)

    if backup and backup_path.exists():
        try:
            backup_path.unlink()
        except OSError as e:
            raise StorageIOError(f'Unable to delete backup file "{backup_path}"', e) from e
        logger.debug("Deleted old backup %s", backup_path)

    if path.exists():
        if backup:
            try:
                path.rename(backup_path)
            except OSError as e:
                raise StorageIOError(
                    f'Unable to move old data to backup location "{backup_path}"', e
                ) from e
            logger.debug("Moved %s to %s", path, backup_path)
        else:
            try:
                path.unlink()
            except OSError as e:
                raise StorageIOError(f'Unable to delete "{path}"', e) from e
            logger.debug("Deleted %s without backup", path)

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise StorageIOError(f'Unable to write data to "{path}"', e) from e

    logger.debug("Saved %d objects to %s", len(registry), path)
    return path


def save_if_changed(
    registry: UsageRegistry,
    snapshot: UsageRegistry,
    data_dir: Path,
    backup: bool = True,
) -> bool:
    """Save the registry only if it differs from the snapshot taken at load.

    Returns:
        True if the registry was written.
    """
    if registry == snapshot:
        logger.debug("No changes, not saving")
        return False
    save_registry(registry, data_dir, backup=backup)
    return True


__all__ = [
    "STORE_FILENAME",
    "LEGACY_FILENAME",
    "BACKUP_SUFFIX",
    "JSON_FORMAT",
    "LEGACY_FORMAT",
    "registry_to_dict",
    "registry_from_dict",
    "get_store_path",
    "get_backup_path",
    "store_candidates",
    "read_store",
    "load_registry",
    "save_registry",
    "save_if_changed",
]
