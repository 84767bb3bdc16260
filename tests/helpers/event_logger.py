"""In-memory mapping event logger for adapter tests."""

from __future__ import annotations

import dataclasses
import typing as typ

from gitquest.github.observability import MappingEventLogger, MappingEventType

if typ.TYPE_CHECKING:
    from gitquest.events.models import NormalizedEvent
    from gitquest.github.observability import SkipReason


@dataclasses.dataclass(frozen=True, slots=True)
class RecordedMappingEvent:
    """One captured call on the mapping event logger."""

    event_type: MappingEventType
    fields: dict[str, object]


class RecordingEventLogger(MappingEventLogger):
    """Collects mapping events instead of emitting log lines."""

    def __init__(self) -> None:
        self.records: list[RecordedMappingEvent] = []

    def _record(self, event_type: MappingEventType, **fields: object) -> None:
        self.records.append(RecordedMappingEvent(event_type, fields))

    def log_mapping_completed(self, *, raw_event: str, event: NormalizedEvent) -> None:
        self._record(
            MappingEventType.MAPPING_COMPLETED, raw_event=raw_event, event=event
        )

    def log_mapping_skipped(
        self,
        *,
        reason: SkipReason,
        raw_event: str | None,
        detail: str | None = None,
    ) -> None:
        self._record(
            MappingEventType.MAPPING_SKIPPED,
            reason=reason,
            raw_event=raw_event,
            detail=detail,
        )

    def log_mapping_incomplete(self, *, raw_event: str, action: str | None) -> None:
        self._record(
            MappingEventType.MAPPING_INCOMPLETE, raw_event=raw_event, action=action
        )

    def log_timestamp_fallback(
        self, *, raw_value: object, error: BaseException | None = None
    ) -> None:
        self._record(
            MappingEventType.TIMESTAMP_FALLBACK, raw_value=raw_value, error=error
        )

    def of_type(self, event_type: MappingEventType) -> list[RecordedMappingEvent]:
        """Return captured events of ``event_type`` in call order."""
        return [record for record in self.records if record.event_type == event_type]

    def skip_reasons(self) -> list[object]:
        """Return the reasons of all skipped deliveries."""
        return [
            record.fields["reason"]
            for record in self.of_type(MappingEventType.MAPPING_SKIPPED)
        ]
