"""Unit tests for base event assembly."""

from __future__ import annotations

import datetime as dt

import pytest

from gitquest.events.models import EventDataField, EventTypeIdentifier
from gitquest.github.base import base_fields, build_event, read_actor_login
from gitquest.github.errors import ActorIdentityError, ActorIdentityReason
from gitquest.github.rules import EventDraft
from tests.helpers.github_payloads import push_payload
from tests.helpers.identities import OCTOCAT_ID, PROCESSED_AT, PROJECT_ID


def test_read_actor_login() -> None:
    """The sender login identifies the actor."""
    assert read_actor_login(push_payload()) == "octocat"


@pytest.mark.parametrize(
    ("payload", "expected_reason"),
    [
        pytest.param({}, ActorIdentityReason.MISSING_SENDER, id="no_sender"),
        pytest.param(
            {"sender": None}, ActorIdentityReason.MISSING_SENDER, id="null_sender"
        ),
        pytest.param(
            {"sender": {"id": 1}}, ActorIdentityReason.MISSING_LOGIN, id="no_login"
        ),
    ],
)
def test_read_actor_login_raises_for_missing_actor(
    payload: dict[str, object], expected_reason: ActorIdentityReason
) -> None:
    """Missing actors raise a typed error with a reason."""
    with pytest.raises(ActorIdentityError) as excinfo:
        read_actor_login(payload)

    assert excinfo.value.reason is expected_reason


def test_base_fields_skip_absent_and_mistyped_values() -> None:
    """Only string values become base attributes."""
    payload = {
        "repository": {"name": "reef", "html_url": None},
        "sender": {"login": "octocat", "avatar_url": 7},
    }

    assert base_fields(payload) == (
        EventDataField.string("repositoryName", "reef"),
        EventDataField.string("vcsUsername", "octocat"),
    )


def test_base_fields_for_empty_payload() -> None:
    """A payload without repository or sender yields no base attributes."""
    assert base_fields({}) == ()


class TestBuildEvent:
    """Tests for ``build_event``."""

    def test_base_fields_precede_rule_fields(self) -> None:
        """Attributes are ordered base first, then event specific."""
        draft = EventDraft(
            event_type=EventTypeIdentifier.PUSH,
            fields=(EventDataField.string("branch", "main"),),
        )
        base = (EventDataField.string("vcsUsername", "octocat"),)

        event = build_event(
            draft,
            project_id=PROJECT_ID,
            user_id=OCTOCAT_ID,
            base=base,
            processed_at=PROCESSED_AT,
        )

        assert event.data_keys() == ("vcsUsername", "branch")
        assert event.timestamp == PROCESSED_AT
        assert event.project_id == PROJECT_ID
        assert event.user_id == OCTOCAT_ID

    def test_draft_timestamp_overrides_processing_time(self) -> None:
        """Rules that determine a timestamp replace the processing time."""
        submitted_at = dt.datetime(2024, 7, 1, 12, 30, tzinfo=dt.UTC)
        draft = EventDraft(
            event_type=EventTypeIdentifier.REVIEW_ACCEPT, timestamp=submitted_at
        )

        event = build_event(
            draft,
            project_id=PROJECT_ID,
            user_id=None,
            base=(),
            processed_at=PROCESSED_AT,
        )

        assert event.timestamp == submitted_at
        assert event.user_id is None
