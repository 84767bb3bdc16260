"""Normalized event model shared by gitquest adapters."""

from __future__ import annotations

from .models import (
    AllowedDataType,
    EventDataField,
    EventTypeIdentifier,
    EventVisibility,
    NormalizedEvent,
    decode_events,
    encode_events,
)

__all__ = [
    "AllowedDataType",
    "EventDataField",
    "EventTypeIdentifier",
    "EventVisibility",
    "NormalizedEvent",
    "decode_events",
    "encode_events",
]
