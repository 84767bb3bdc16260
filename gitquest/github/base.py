"""Base event assembly shared by every mapping rule.

Each produced event carries the same base material regardless of the GitHub
event kind: the project, the resolved actor and attributes describing the
repository and sender. ``build_event`` combines that material with a rule's
draft in one step so no partially built event is ever observable.
"""

from __future__ import annotations

import typing as typ

from gitquest.events.models import EventDataField, NormalizedEvent

from .errors import ActorIdentityError
from .extract import find_object, find_str

if typ.TYPE_CHECKING:
    import datetime as dt
    import uuid

    from .extract import JsonObject
    from .rules import EventDraft

# (source key, attribute key) pairs, in emission order
_REPOSITORY_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "repositoryName"),
    ("html_url", "repositoryUrl"),
)
_SENDER_FIELDS: tuple[tuple[str, str], ...] = (
    ("login", "vcsUsername"),
    ("avatar_url", "vcsAvatarUrl"),
    ("html_url", "vcsProfileUrl"),
)


def read_actor_login(payload: JsonObject) -> str:
    """Return the login of the user who triggered the delivery.

    Raises
    ------
    ActorIdentityError
        If the payload has no ``sender`` object or the sender has no string
        ``login``.

    """
    sender = find_object(payload, "sender")
    if sender is None:
        raise ActorIdentityError.missing_sender()
    login = find_str(sender, "login")
    if login is None:
        raise ActorIdentityError.missing_login()
    return login


def _string_fields(
    node: JsonObject | None, mapping: tuple[tuple[str, str], ...]
) -> typ.Iterator[EventDataField]:
    if node is None:
        return
    for source_key, attribute_key in mapping:
        value = find_str(node, source_key)
        if value is not None:
            yield EventDataField.string(attribute_key, value)


def base_fields(payload: JsonObject) -> tuple[EventDataField, ...]:
    """Return repository and sender attributes present in ``payload``."""
    return (
        *_string_fields(find_object(payload, "repository"), _REPOSITORY_FIELDS),
        *_string_fields(find_object(payload, "sender"), _SENDER_FIELDS),
    )


def build_event(
    draft: EventDraft,
    *,
    project_id: uuid.UUID,
    user_id: uuid.UUID | None,
    base: tuple[EventDataField, ...],
    processed_at: dt.datetime,
) -> NormalizedEvent:
    """Assemble the immutable event for a rule draft.

    Base attributes precede the draft's own attributes. The draft timestamp
    wins over ``processed_at`` when the rule determined one.
    """
    return NormalizedEvent(
        timestamp=draft.timestamp or processed_at,
        project_id=project_id,
        event_data=(*base, *draft.fields),
        event_type_identifier=draft.event_type,
        visibility=draft.visibility,
        user_id=user_id,
    )


__all__ = ["base_fields", "build_event", "read_actor_login"]
