"""
Pytest fixtures for usage-tracker tests.

Test imports use the src/usage_tracker/ package via --import-mode=importlib (see pyproject.toml).
"""

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from usage_tracker.models.registry import UsageRegistry
from usage_tracker.models.usages import Usages


# ═══════════════════════════════════════════════════════════════════════════════
# Time Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def fixed_now():
    """Fixed datetime for reproducible tests."""
    return datetime(2024, 12, 19, 14, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_now(fixed_now):
    """Mock datetime.now used when recording usages."""
    with patch("usage_tracker.models.usages.datetime") as mock_dt:
        mock_dt.now.return_value = fixed_now
        yield mock_dt


# ═══════════════════════════════════════════════════════════════════════════════
# Registry Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def registry_empty():
    """Registry without any tracked objects."""
    return UsageRegistry()


@pytest.fixture
def registry_sample(fixed_now):
    """Registry with a used kettle, a used lamp and an unused toaster."""
    return UsageRegistry(
        {
            "kettle": Usages(
                [
                    fixed_now - timedelta(hours=3),
                    fixed_now - timedelta(hours=2),
                    fixed_now - timedelta(hours=1),
                ]
            ),
            "lamp": Usages([fixed_now - timedelta(days=2)]),
            "toaster": Usages(),
        }
    )


@pytest.fixture
def history_even(fixed_now):
    """Ten usages spread evenly over the 240 hours before fixed_now."""
    start = fixed_now - timedelta(hours=240)
    return Usages([start + timedelta(hours=24 * i) for i in range(10)])


# ═══════════════════════════════════════════════════════════════════════════════
# Data File Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def data_dir(tmp_path):
    """Data directory that doesn't exist yet."""
    return tmp_path / "data"


@pytest.fixture
def store_file(data_dir):
    """Current-format data file with one tracked object."""
    data_dir.mkdir(parents=True, exist_ok=True)
    path = data_dir / "usages.json"
    path.write_text(
        json.dumps(
            {
                "kettle": {
                    "usages": ["2024-12-18T08:00:00Z", "2024-12-18T09:00:00Z"],
                }
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def legacy_file(data_dir):
    """Legacy-format data file with one tracked object."""
    data_dir.mkdir(parents=True, exist_ok=True)
    path = data_dir / "default.json"
    path.write_text(
        json.dumps({"lamp": ["2021-03-01T08:00:00Z", "2021-03-02T08:00:00+00:00"]}),
        encoding="utf-8",
    )
    return path
