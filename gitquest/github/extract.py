"""Type-safe lookups over untyped webhook JSON.

GitHub payloads are third-party JSON: any field may be absent, ``null`` or of
an unexpected type. Every helper here is total. A lookup returns the value
when it exists with the expected JSON type and ``None`` otherwise, so mapping
rules never repeat null and type checks inline.

Examples
--------
>>> payload = {"sender": {"login": "octocat"}, "commits": [{}, {}]}
>>> find_path(payload, "sender", "login")
'octocat'
>>> find_list(payload, "commits")
[{}, {}]
>>> find_int({"commits": True}, "commits") is None
True

"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

JsonObject = cabc.Mapping[str, typ.Any]


def _lookup(node: object, key: str) -> object | None:
    if not isinstance(node, cabc.Mapping):
        return None
    return typ.cast("JsonObject", node).get(key)


def find_object(node: object, key: str) -> JsonObject | None:
    """Return the nested JSON object stored under ``key``."""
    value = _lookup(node, key)
    if isinstance(value, cabc.Mapping):
        return typ.cast("JsonObject", value)
    return None


def find_str(node: object, key: str) -> str | None:
    """Return the JSON string stored under ``key``."""
    value = _lookup(node, key)
    return value if isinstance(value, str) else None


def find_int(node: object, key: str) -> int | None:
    """Return the JSON integer stored under ``key``.

    Booleans are excluded even though ``bool`` subclasses ``int`` in Python,
    and floats are never truncated.
    """
    value = _lookup(node, key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def find_list(node: object, key: str) -> list[typ.Any] | None:
    """Return the JSON array stored under ``key``."""
    value = _lookup(node, key)
    return value if isinstance(value, list) else None


def find_path(node: object, *keys: str) -> object | None:
    """Walk nested objects by ``keys`` and return the final value.

    Returns ``None`` as soon as an intermediate value is missing or not an
    object. The final value is returned untyped; combine with the typed
    helpers for checked access to leaves.
    """
    current: object | None = node
    for key in keys:
        current = _lookup(current, key)
        if current is None:
            return None
    return current


__all__ = [
    "JsonObject",
    "find_int",
    "find_list",
    "find_object",
    "find_path",
    "find_str",
]
