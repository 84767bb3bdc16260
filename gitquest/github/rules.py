"""Mapping rules for the GitHub event kinds gitquest understands.

A rule inspects one payload and returns either an ``EventDraft`` (the
event-specific part of a normalized event) or a ``Skip`` naming why no event
is produced. Rules never raise for payload content and never call the
identity resolver; the adapter combines drafts with the base event material.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import typing as typ

from gitquest.events.models import EventDataField, EventTypeIdentifier, EventVisibility

from .classify import PullRequestAction, ReviewAction, ReviewState, WebhookEventKind
from .extract import JsonObject, find_int, find_list, find_object, find_str
from .observability import SkipReason

if typ.TYPE_CHECKING:
    from .config import AdapterConfig
    from .observability import MappingEventLogger


@dataclasses.dataclass(frozen=True, slots=True)
class RuleContext:
    """Per-delivery inputs shared by all rules."""

    raw_event: str
    config: AdapterConfig
    event_logger: MappingEventLogger
    processed_at: dt.datetime


@dataclasses.dataclass(frozen=True, slots=True)
class EventDraft:
    """Event-specific portion of a normalized event."""

    event_type: EventTypeIdentifier | None
    fields: tuple[EventDataField, ...] = ()
    visibility: EventVisibility | None = None
    timestamp: dt.datetime | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class Skip:
    """No event is produced for the delivery."""

    reason: SkipReason
    detail: str | None = None


RuleOutcome = EventDraft | Skip
MappingRule = typ.Callable[[JsonObject, RuleContext], RuleOutcome]
_registry: dict[WebhookEventKind, MappingRule] = {}


def register(kind: WebhookEventKind) -> typ.Callable[[MappingRule], MappingRule]:
    """Register a mapping rule for an event kind."""

    def _inner(func: MappingRule) -> MappingRule:
        _registry[kind] = func
        return func

    return _inner


def get_rule(kind: WebhookEventKind) -> MappingRule | None:
    """Return the registered rule for the event kind if present."""
    return _registry.get(kind)


def parse_timestamp(value: str) -> dt.datetime:
    """Parse an ISO-8601 timestamp that carries a UTC offset.

    Raises
    ------
    ValueError
        If the string is not ISO-8601 or has no offset.

    """
    parsed = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        msg = f"timestamp {value!r} has no UTC offset"
        raise ValueError(msg)
    return parsed


def _pull_request_fields(pull_request: JsonObject) -> tuple[EventDataField, ...]:
    fields: list[EventDataField] = []
    for source_key, attribute_key in (
        ("title", "pullRequestTitle"),
        ("html_url", "pullRequestUrl"),
    ):
        text = find_str(pull_request, source_key)
        if text is not None:
            fields.append(EventDataField.string(attribute_key, text))
    for source_key, attribute_key in (
        ("commits", "commitCount"),
        ("additions", "additions"),
        ("deletions", "deletions"),
    ):
        number = find_int(pull_request, source_key)
        if number is not None:
            fields.append(EventDataField.integer(attribute_key, number))
    return tuple(fields)


@register(WebhookEventKind.PUSH)
def map_push(payload: JsonObject, context: RuleContext) -> RuleOutcome:
    """Map a push delivery; always yields a ``PUSH`` draft."""
    fields: list[EventDataField] = []
    visibility: EventVisibility | None = None

    ref = find_str(payload, "ref")
    if ref is not None:
        branch = context.config.branch_name(ref)
        visibility = (
            EventVisibility.PUBLIC
            if context.config.is_public_branch(branch)
            else EventVisibility.PRIVATE
        )
        fields.append(EventDataField.string("branch", branch))

    commits = find_list(payload, "commits")
    if commits is not None:
        fields.append(EventDataField.integer("commitCount", len(commits)))

    compare_url = find_str(payload, "compare")
    if compare_url is not None:
        fields.append(EventDataField.string("branchUrl", compare_url))

    return EventDraft(
        event_type=EventTypeIdentifier.PUSH,
        fields=tuple(fields),
        visibility=visibility,
    )


_PULL_REQUEST_EVENT_TYPES: dict[PullRequestAction, EventTypeIdentifier] = {
    PullRequestAction.OPENED: EventTypeIdentifier.OPEN_PULL_REQUEST,
    PullRequestAction.CLOSED: EventTypeIdentifier.CLOSE_PULL_REQUEST,
}


@register(WebhookEventKind.PULL_REQUEST)
def map_pull_request(payload: JsonObject, context: RuleContext) -> RuleOutcome:
    """Map a pull request delivery.

    Actions other than ``opened`` and ``closed`` still produce a draft, but
    without an event type identifier; the delivery is logged as incomplete.
    """
    pull_request = find_object(payload, "pull_request")
    if pull_request is None:
        return Skip(SkipReason.MISSING_PULL_REQUEST)

    raw_action = find_str(payload, "action")
    event_type = _PULL_REQUEST_EVENT_TYPES.get(PullRequestAction.parse(raw_action))
    if event_type is None:
        context.event_logger.log_mapping_incomplete(
            raw_event=context.raw_event, action=raw_action
        )

    return EventDraft(event_type=event_type, fields=_pull_request_fields(pull_request))


_REVIEW_EVENT_TYPES: dict[ReviewState, EventTypeIdentifier] = {
    ReviewState.APPROVED: EventTypeIdentifier.REVIEW_ACCEPT,
    ReviewState.CHANGES_REQUESTED: EventTypeIdentifier.REVIEW_CHANGE_REQUEST,
}


def _review_timestamp(review: JsonObject, context: RuleContext) -> dt.datetime:
    raw_value = review.get("submitted_at")
    if not isinstance(raw_value, str):
        context.event_logger.log_timestamp_fallback(raw_value=raw_value)
        return context.processed_at
    try:
        return parse_timestamp(raw_value)
    except ValueError as exc:
        context.event_logger.log_timestamp_fallback(raw_value=raw_value, error=exc)
        return context.processed_at


@register(WebhookEventKind.PULL_REQUEST_REVIEW)
def map_pull_request_review(payload: JsonObject, context: RuleContext) -> RuleOutcome:
    """Map a submitted review that approves or requests changes."""
    raw_action = find_str(payload, "action")
    if ReviewAction.parse(raw_action) is not ReviewAction.SUBMITTED:
        return Skip(SkipReason.UNSUPPORTED_ACTION, raw_action)

    review = find_object(payload, "review")
    if review is None:
        return Skip(SkipReason.MISSING_REVIEW)

    raw_state = find_str(review, "state")
    event_type = _REVIEW_EVENT_TYPES.get(ReviewState.parse(raw_state))
    if event_type is None:
        return Skip(SkipReason.UNSUPPORTED_REVIEW_STATE, raw_state)

    pull_request = find_object(payload, "pull_request")
    if pull_request is None:
        return Skip(SkipReason.MISSING_PULL_REQUEST)

    return EventDraft(
        event_type=event_type,
        fields=_pull_request_fields(pull_request),
        timestamp=_review_timestamp(review, context),
    )


__all__ = [
    "EventDraft",
    "MappingRule",
    "RuleContext",
    "RuleOutcome",
    "Skip",
    "get_rule",
    "map_pull_request",
    "map_pull_request_review",
    "map_push",
    "parse_timestamp",
    "register",
]
