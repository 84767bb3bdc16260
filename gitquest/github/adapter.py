"""GitHub webhook adapter for the gamification event platform.

``GitHubAdapter`` turns one webhook delivery (JSON payload, HTTP headers and
the project the webhook belongs to) into zero or one ``NormalizedEvent``.
Deliveries that do not describe a supported activity produce an empty list
and a WARNING log line; payload content never raises to the caller.

Example
-------
>>> import uuid
>>> adapter = GitHubAdapter(lambda login: None)
>>> adapter.map_to_events({}, {}, uuid.uuid4())
[]

"""

from __future__ import annotations

import typing as typ

from gitquest.common.time import utcnow

from .base import base_fields, build_event, read_actor_login
from .classify import WebhookEventKind, classify
from .config import AdapterConfig
from .errors import ActorIdentityError
from .observability import MappingEventLogger, SkipReason
from .rules import RuleContext, Skip, get_rule

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt
    import uuid

    from gitquest.events.models import NormalizedEvent

    from .extract import JsonObject

UserResolver = typ.Callable[[str], "uuid.UUID | None"]
Clock = typ.Callable[[], "dt.datetime"]


class ExternalSystemAdapter(typ.Protocol):
    """Maps deliveries from an external system to normalized events."""

    def map_to_events(
        self,
        payload: JsonObject,
        headers: cabc.Mapping[str, str],
        project_id: uuid.UUID,
    ) -> list[NormalizedEvent]: ...


class GitHubAdapter:
    """Map GitHub push, pull request and review deliveries.

    Parameters
    ----------
    resolve_user
        Looks up the internal user id for a GitHub login. ``None`` leaves the
        event's ``user_id`` unset. Exceptions raised by the resolver are not
        caught.
    config
        Adapter settings; defaults to :class:`AdapterConfig` defaults.
    clock
        Source of the processing time used when a payload carries no usable
        timestamp.
    event_logger
        Receives structured mapping outcomes.

    The adapter holds no per-delivery state and may be shared between
    threads.

    """

    def __init__(
        self,
        resolve_user: UserResolver,
        *,
        config: AdapterConfig | None = None,
        clock: Clock = utcnow,
        event_logger: MappingEventLogger | None = None,
    ) -> None:
        """Store collaborators used for every delivery."""
        self._resolve_user = resolve_user
        self._config = config or AdapterConfig()
        self._clock = clock
        self._event_logger = event_logger or MappingEventLogger()

    @property
    def config(self) -> AdapterConfig:
        """Return the adapter configuration."""
        return self._config

    def map_to_events(
        self,
        payload: JsonObject,
        headers: cabc.Mapping[str, str],
        project_id: uuid.UUID,
    ) -> list[NormalizedEvent]:
        """Return a list holding the mapped event, or an empty list."""
        event = self.map_to_event(payload, headers, project_id)
        return [] if event is None else [event]

    def map_to_event(
        self,
        payload: JsonObject,
        headers: cabc.Mapping[str, str],
        project_id: uuid.UUID,
    ) -> NormalizedEvent | None:
        """Map one delivery to a normalized event, or ``None`` when skipped."""
        classification = classify(headers, self._config.event_header)
        raw_event = classification.raw_event
        if raw_event is None:
            return self._skip(Skip(SkipReason.MISSING_EVENT_HEADER), raw_event)

        rule = get_rule(classification.kind)
        if classification.kind is WebhookEventKind.UNRECOGNIZED or rule is None:
            return self._skip(Skip(SkipReason.UNSUPPORTED_EVENT_TYPE), raw_event)

        try:
            login = read_actor_login(payload)
        except ActorIdentityError as exc:
            return self._skip(Skip(SkipReason.MISSING_ACTOR, exc.reason), raw_event)

        processed_at = self._clock()
        context = RuleContext(
            raw_event=raw_event,
            config=self._config,
            event_logger=self._event_logger,
            processed_at=processed_at,
        )
        outcome = rule(payload, context)
        if isinstance(outcome, Skip):
            return self._skip(outcome, raw_event)

        event = build_event(
            outcome,
            project_id=project_id,
            user_id=self._resolve_user(login),
            base=base_fields(payload),
            processed_at=processed_at,
        )
        self._event_logger.log_mapping_completed(raw_event=raw_event, event=event)
        return event

    def _skip(self, skip: Skip, raw_event: str | None) -> None:
        self._event_logger.log_mapping_skipped(
            reason=skip.reason, raw_event=raw_event, detail=skip.detail
        )


__all__ = ["Clock", "ExternalSystemAdapter", "GitHubAdapter", "UserResolver"]
