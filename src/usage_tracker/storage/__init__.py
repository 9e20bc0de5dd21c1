"""Usage data storage and retrieval.

Modules:
    store: Data file lookup, loading, and saving with backup rotation
    legacy: One-way conversion of the legacy data file layout
"""

from usage_tracker.storage.legacy import convert_legacy
from usage_tracker.storage.store import (
    BACKUP_SUFFIX,
    LEGACY_FILENAME,
    STORE_FILENAME,
    get_backup_path,
    get_store_path,
    load_registry,
    registry_from_dict,
    registry_to_dict,
    save_if_changed,
    save_registry,
)

__all__ = [
    "STORE_FILENAME",
    "LEGACY_FILENAME",
    "BACKUP_SUFFIX",
    "get_store_path",
    "get_backup_path",
    "load_registry",
    "save_registry",
    "save_if_changed",
    "registry_to_dict",
    "registry_from_dict",
    "convert_legacy",
]
