"""Emit structured observability events for webhook mapping.

``GitHubAdapter`` reports every delivery outcome through
``MappingEventLogger``: produced events at INFO, and skipped deliveries,
untagged events and timestamp fallbacks at WARNING. Messages use the
``[event] key=value`` shape so log aggregators can parse them.

Usage
-----
>>> event_logger = MappingEventLogger()
>>> event_logger.log_mapping_skipped(
...     reason=SkipReason.UNSUPPORTED_EVENT_TYPE,
...     raw_event="issues",
... )

"""

from __future__ import annotations

import enum
import typing as typ

from gitquest.logging import get_logger, log_info, log_warning

if typ.TYPE_CHECKING:
    from gitquest.events.models import NormalizedEvent

logger = get_logger(__name__)


class MappingEventType(enum.StrEnum):
    """Structured log event types for webhook mapping."""

    MAPPING_COMPLETED = "webhook.mapping.completed"
    MAPPING_SKIPPED = "webhook.mapping.skipped"
    MAPPING_INCOMPLETE = "webhook.mapping.incomplete"
    TIMESTAMP_FALLBACK = "webhook.mapping.timestamp_fallback"


class SkipReason(enum.StrEnum):
    """Why a delivery produced no event."""

    MISSING_EVENT_HEADER = "missing_event_header"
    UNSUPPORTED_EVENT_TYPE = "unsupported_event_type"
    UNSUPPORTED_ACTION = "unsupported_action"
    UNSUPPORTED_REVIEW_STATE = "unsupported_review_state"
    MISSING_PULL_REQUEST = "missing_pull_request"
    MISSING_REVIEW = "missing_review"
    MISSING_ACTOR = "missing_actor"


class MappingEventLogger:
    """Emit structured webhook mapping events via femtologging."""

    def log_mapping_completed(self, *, raw_event: str, event: NormalizedEvent) -> None:
        """Log a delivery that produced an event."""
        log_info(
            logger,
            "[%s] github_event=%s event_type=%s project_id=%s "
            "user_resolved=%s data_fields=%d",
            MappingEventType.MAPPING_COMPLETED,
            raw_event,
            event.event_type_identifier,
            event.project_id,
            event.user_id is not None,
            len(event.event_data),
        )

    def log_mapping_skipped(
        self,
        *,
        reason: SkipReason,
        raw_event: str | None,
        detail: str | None = None,
    ) -> None:
        """Log a delivery that produced no event.

        Parameters
        ----------
        reason
            Machine-readable skip reason.
        raw_event
            Event header value, ``None`` when the header was missing.
        detail
            Offending payload value, such as an unsupported review state.

        """
        log_warning(
            logger,
            "[%s] reason=%s github_event=%s detail=%s",
            MappingEventType.MAPPING_SKIPPED,
            reason,
            raw_event,
            detail,
        )

    def log_mapping_incomplete(self, *, raw_event: str, action: str | None) -> None:
        """Log an event produced without an event type identifier."""
        log_warning(
            logger,
            "[%s] github_event=%s action=%s",
            MappingEventType.MAPPING_INCOMPLETE,
            raw_event,
            action,
        )

    def log_timestamp_fallback(
        self, *, raw_value: object, error: BaseException | None = None
    ) -> None:
        """Log that processing time replaced an unusable payload timestamp."""
        log_warning(
            logger,
            "[%s] raw_value=%r",
            MappingEventType.TIMESTAMP_FALLBACK,
            raw_value,
            exc_info=error,
        )


__all__ = ["MappingEventLogger", "MappingEventType", "SkipReason"]
