"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import typing as typ

import pytest

from gitquest.github import GitHubAdapter
from tests.helpers.event_logger import RecordingEventLogger
from tests.helpers.identities import KNOWN_USERS, PROCESSED_AT, PROJECT_ID

if typ.TYPE_CHECKING:
    import uuid


@pytest.fixture
def project_id() -> uuid.UUID:
    """Return the project the test webhooks belong to."""
    return PROJECT_ID


@pytest.fixture
def event_logger() -> RecordingEventLogger:
    """Return a logger that records mapping outcomes in memory."""
    return RecordingEventLogger()


@pytest.fixture
def adapter(event_logger: RecordingEventLogger) -> GitHubAdapter:
    """Return an adapter with a fixed clock and a static user table."""
    return GitHubAdapter(
        KNOWN_USERS.get,
        clock=lambda: PROCESSED_AT,
        event_logger=event_logger,
    )
