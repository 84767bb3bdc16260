"""Common time utilities."""

from __future__ import annotations

import datetime as dt


def utcnow() -> dt.datetime:
    """Return an aware UTC timestamp used as the processing time of a delivery."""
    return dt.datetime.now(dt.UTC)
