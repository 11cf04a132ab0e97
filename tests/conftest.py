"""
Global test fixtures for the flowctl project.

This module contains test fixtures that can be used across all test modules.
"""

from datetime import datetime, timedelta, timezone

import pytest

from flowctl.config import clear_settings_cache
from flowctl.models import TaskRecord

TIME_STAMP_0 = datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)
TIME_STAMP_1 = TIME_STAMP_0 + timedelta(milliseconds=1000)
TIME_STAMP_2 = TIME_STAMP_0 + timedelta(milliseconds=2000)


def _make_task(**overrides) -> TaskRecord:
    fields = {
        "id": "1",
        "full_name": "+wf+task",
        "state": "success",
        "updated_at": TIME_STAMP_1,
        "is_group": False,
    }
    fields.update(overrides)
    return TaskRecord(**fields)


@pytest.fixture
def make_task():
    """Factory building a task record with defaults for the fields not given."""
    return _make_task


@pytest.fixture
def time_stamps() -> tuple[datetime, datetime, datetime]:
    """Three instants one second apart."""
    return TIME_STAMP_0, TIME_STAMP_1, TIME_STAMP_2


@pytest.fixture
def sample_tasks() -> list[TaskRecord]:
    """
    Two tasks of one attempt: a group that never started and a started child.

    Returns:
        list[TaskRecord]: The group task "+test" and its child "+test+start".
    """
    return [
        TaskRecord(
            id="42",
            full_name="+test",
            state="success",
            started_at=None,
            updated_at=TIME_STAMP_2,
            config={},
            parent_id=None,
            upstreams=(),
            export_params={},
            store_params={},
            state_params={},
            is_group=True,
            error={},
        ),
        TaskRecord(
            id="43",
            full_name="+test+start",
            state="success",
            started_at=TIME_STAMP_0,
            updated_at=TIME_STAMP_1,
            config={},
            parent_id="42",
            upstreams=(),
            export_params={},
            store_params={},
            state_params={},
            is_group=True,
            error={},
        ),
    ]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test with default settings and a fresh settings cache."""
    for name in (
        "FLOWCTL_URL",
        "FLOWCTL_CLIENT_BASE_URL",
        "FLOWCTL_CLIENT_TIMEOUT",
        "FLOWCTL_CLIENT_MAX_RETRIES",
        "FLOWCTL_CLIENT_RETRY_DELAY",
        "FLOWCTL_DISPLAY_TIMEZONE",
        "FLOWCTL_DISPLAY_DEFAULT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
