"""Normalized event records handed to the event ingestion platform.

Every webhook delivery that maps to a recognised activity becomes exactly one
``NormalizedEvent``. Records are frozen msgspec structs so a built event can be
shared freely and encoded straight to JSON with camelCase field names.

Example:
>>> field = EventDataField.integer("commitCount", 3)
>>> field.value
'3'

"""

from __future__ import annotations

import datetime as dt  # noqa: TC003 - msgspec resolves annotations at runtime
import enum
import typing as typ
import uuid  # noqa: TC003 - msgspec resolves annotations at runtime

import msgspec


class AllowedDataType(enum.StrEnum):
    """Value types an event data field can carry."""

    STRING = "STRING"
    INTEGER = "INTEGER"


class EventVisibility(enum.StrEnum):
    """Audience of an event on the gamification platform."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


class EventTypeIdentifier(enum.StrEnum):
    """Internal event kinds produced from GitHub activity."""

    PUSH = "PUSH"
    OPEN_PULL_REQUEST = "OPEN_PULL_REQUEST"
    CLOSE_PULL_REQUEST = "CLOSE_PULL_REQUEST"
    REVIEW_ACCEPT = "REVIEW_ACCEPT"
    REVIEW_CHANGE_REQUEST = "REVIEW_CHANGE_REQUEST"


class EventDataField(msgspec.Struct, frozen=True, kw_only=True):
    """Typed key/value attribute attached to a normalized event.

    Attributes
    ----------
    key : str
        Attribute name, for example ``branch`` or ``commitCount``.
    type : AllowedDataType
        Declared type of the value.
    value : str
        String encoding of the value.

    """

    key: str
    type: AllowedDataType
    value: str

    @classmethod
    def string(cls, key: str, value: str) -> EventDataField:
        """Return a ``STRING`` attribute."""
        return cls(key=key, type=AllowedDataType.STRING, value=value)

    @classmethod
    def integer(cls, key: str, value: int) -> EventDataField:
        """Return an ``INTEGER`` attribute with a decimal string value."""
        return cls(key=key, type=AllowedDataType.INTEGER, value=str(value))


class NormalizedEvent(msgspec.Struct, frozen=True, kw_only=True, rename="camel"):
    """Provider-independent event produced from a single webhook delivery.

    Attributes
    ----------
    timestamp : datetime.datetime
        Time of the activity when the payload carries one, otherwise the
        processing time.
    project_id : uuid.UUID
        Project the webhook is registered for, copied from the caller.
    event_data : tuple[EventDataField, ...]
        Base attributes first, then event-specific attributes.
    event_type_identifier : EventTypeIdentifier | None
        Internal event kind. ``None`` marks an event the ingestion platform
        cannot use (see ``is_complete``).
    visibility : EventVisibility | None
        Only set for push events with a known branch.
    user_id : uuid.UUID | None
        Internal identifier of the actor, ``None`` when resolution failed.

    """

    timestamp: dt.datetime
    project_id: uuid.UUID
    event_data: tuple[EventDataField, ...] = ()
    event_type_identifier: EventTypeIdentifier | None = None
    visibility: EventVisibility | None = None
    user_id: uuid.UUID | None = None

    @property
    def is_complete(self) -> bool:
        """Return True when the event carries an event type identifier."""
        return self.event_type_identifier is not None

    def data_value(self, key: str) -> str | None:
        """Return the first value stored under ``key`` or ``None``."""
        for field in self.event_data:
            if field.key == key:
                return field.value
        return None

    def data_keys(self) -> tuple[str, ...]:
        """Return attribute keys in insertion order."""
        return tuple(field.key for field in self.event_data)


def encode_events(events: typ.Iterable[NormalizedEvent]) -> bytes:
    """Encode events as a JSON array for the ingestion collaborator."""
    return msgspec.json.encode(list(events))


def decode_events(data: bytes | str) -> list[NormalizedEvent]:
    """Decode a JSON array produced by :func:`encode_events`."""
    return msgspec.json.decode(data, type=list[NormalizedEvent])


__all__ = [
    "AllowedDataType",
    "EventDataField",
    "EventTypeIdentifier",
    "EventVisibility",
    "NormalizedEvent",
    "decode_events",
    "encode_events",
]
