"""Classification of webhook deliveries and payload discriminators.

Every string that selects a mapping path (the event header, a pull request
``action``, a review ``state``) is parsed into a closed enumeration with an
explicit catch-all variant. Rules then match on members instead of raw
strings.
"""

from __future__ import annotations

import dataclasses
import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class WebhookEventKind(enum.StrEnum):
    """GitHub event names the adapter maps."""

    PUSH = "push"
    PULL_REQUEST = "pull_request"
    PULL_REQUEST_REVIEW = "pull_request_review"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: str | None) -> WebhookEventKind:
        """Return the kind for an exact event name, else ``UNRECOGNIZED``."""
        return _parse_member(cls, value, cls.UNRECOGNIZED)


class PullRequestAction(enum.StrEnum):
    """Pull request ``action`` values with their own event type."""

    OPENED = "opened"
    CLOSED = "closed"
    UNSUPPORTED = "unsupported"

    @classmethod
    def parse(cls, value: str | None) -> PullRequestAction:
        """Return the action for an exact value, else ``UNSUPPORTED``."""
        return _parse_member(cls, value, cls.UNSUPPORTED)


class ReviewAction(enum.StrEnum):
    """Pull request review ``action`` values that can produce an event."""

    SUBMITTED = "submitted"
    UNSUPPORTED = "unsupported"

    @classmethod
    def parse(cls, value: str | None) -> ReviewAction:
        """Return the action for an exact value, else ``UNSUPPORTED``."""
        return _parse_member(cls, value, cls.UNSUPPORTED)


class ReviewState(enum.StrEnum):
    """Review outcomes that map to an event type."""

    APPROVED = "approved"
    CHANGES_REQUESTED = "changes_requested"
    UNSUPPORTED = "unsupported"

    @classmethod
    def parse(cls, value: str | None) -> ReviewState:
        """Return the state for an exact value, else ``UNSUPPORTED``."""
        return _parse_member(cls, value, cls.UNSUPPORTED)


def _parse_member[EnumT: enum.StrEnum](
    enum_type: type[EnumT], value: str | None, fallback: EnumT
) -> EnumT:
    # The catch-all member's own value must not parse as itself.
    if value is None or value == fallback.value:
        return fallback
    try:
        return enum_type(value)
    except ValueError:
        return fallback


@dataclasses.dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of reading the event header of a delivery.

    Attributes
    ----------
    kind
        Parsed event kind, ``UNRECOGNIZED`` for missing or unknown headers.
    raw_event
        Header value as received, ``None`` when the header is missing.

    """

    kind: WebhookEventKind
    raw_event: str | None

    @property
    def header_missing(self) -> bool:
        """Return True when the delivery carried no event header."""
        return self.raw_event is None


def read_event_header(
    headers: cabc.Mapping[str, str], header_name: str
) -> str | None:
    """Return the value of ``header_name`` using a case-insensitive lookup."""
    wanted = header_name.lower()
    value = headers.get(wanted)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == wanted:
            return candidate
    return None


def classify(headers: cabc.Mapping[str, str], header_name: str) -> Classification:
    """Classify a delivery by its event header.

    Examples
    --------
    >>> classify({"X-GitHub-Event": "push"}, "x-github-event").kind
    <WebhookEventKind.PUSH: 'push'>
    >>> classify({}, "x-github-event").header_missing
    True

    """
    raw_event = read_event_header(headers, header_name)
    return Classification(kind=WebhookEventKind.parse(raw_event), raw_event=raw_event)


__all__ = [
    "Classification",
    "PullRequestAction",
    "ReviewAction",
    "ReviewState",
    "WebhookEventKind",
    "classify",
    "read_event_header",
]
