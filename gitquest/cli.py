"""Replay a stored GitHub webhook payload through the adapter.

Useful for checking what the gamification platform would receive for a
captured delivery::

    python -m gitquest.cli payload.json --event pull_request --project-id <uuid>

Exit codes: 0 when an event was produced, 1 when the delivery maps to no
event, 2 when the input or configuration is unusable.
"""

from __future__ import annotations

import argparse
import os
import sys
import uuid
from pathlib import Path

import msgspec

from gitquest.events.models import encode_events
from gitquest.github import AdapterConfig, AdapterConfigError, GitHubAdapter
from gitquest.logging import configure_logging, get_logger, log_error, log_warning

logger = get_logger(__name__)

_EXIT_PRODUCED = 0
_EXIT_NO_EVENT = 1
_EXIT_UNUSABLE_INPUT = 2


def _parse_user_mapping(value: str) -> tuple[str, uuid.UUID]:
    """Parse a ``login=uuid`` pair for the static user table."""
    login, sep, raw_id = value.partition("=")
    if not sep or not login:
        msg = f"expected LOGIN=UUID, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    try:
        return login, uuid.UUID(raw_id)
    except ValueError as exc:
        msg = f"invalid user id {raw_id!r} for {login}"
        raise argparse.ArgumentTypeError(msg) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("payload", type=Path, help="JSON webhook payload to map")
    parser.add_argument(
        "--event",
        required=True,
        help="Value of the GitHub event header, e.g. push or pull_request",
    )
    parser.add_argument(
        "--project-id",
        type=uuid.UUID,
        required=True,
        help="Project the webhook is registered for",
    )
    parser.add_argument(
        "--user",
        type=_parse_user_mapping,
        action="append",
        default=[],
        metavar="LOGIN=UUID",
        help="Known GitHub login and its internal user id (repeatable)",
    )
    parser.add_argument(
        "--json-out",
        type=Path,
        default=None,
        help="Optional path to write the events as JSON instead of stdout",
    )
    return parser


def _load_payload(path: Path) -> dict[str, object] | None:
    """Decode the payload file, logging why it is unusable."""
    try:
        payload = msgspec.json.decode(path.read_bytes())
    except (OSError, msgspec.DecodeError) as exc:
        log_error(logger, "Cannot read webhook payload %s: %s", path, exc)
        return None
    if not isinstance(payload, dict):
        log_error(logger, "Webhook payload %s is not a JSON object", path)
        return None
    return payload


def main(argv: list[str] | None = None) -> int:
    """Map a stored payload and emit the resulting events as JSON.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Process exit code.

    """
    args = _build_parser().parse_args(argv)

    log_level = os.environ.get("GITQUEST_LOG_LEVEL", "INFO")
    normalized_level, invalid_level = configure_logging(log_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid GITQUEST_LOG_LEVEL %r, falling back to %s",
            log_level,
            normalized_level,
        )

    try:
        config = AdapterConfig.from_env()
    except AdapterConfigError as exc:
        log_error(logger, "Invalid adapter configuration: %s", exc)
        return _EXIT_UNUSABLE_INPUT

    payload = _load_payload(args.payload)
    if payload is None:
        return _EXIT_UNUSABLE_INPUT

    users: dict[str, uuid.UUID] = dict(args.user)
    adapter = GitHubAdapter(users.get, config=config)
    events = adapter.map_to_events(
        payload, {config.event_header: args.event}, args.project_id
    )

    encoded = encode_events(events)
    if args.json_out:
        args.json_out.write_bytes(encoded)
    else:
        sys.stdout.write(encoded.decode() + "\n")

    return _EXIT_PRODUCED if events else _EXIT_NO_EVENT


if __name__ == "__main__":
    raise SystemExit(main())
