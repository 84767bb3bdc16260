"""GitHub webhook mapping errors."""

from __future__ import annotations

import enum


class ActorIdentityReason(enum.StrEnum):
    """Machine-readable reasons for a missing webhook actor."""

    MISSING_SENDER = "missing_sender"
    MISSING_LOGIN = "missing_login"


class ActorIdentityError(LookupError):
    """Raised when a payload does not name the user who triggered it."""

    def __init__(self, message: str, reason: ActorIdentityReason) -> None:
        """Store a machine-readable reason for programmatic handling."""
        super().__init__(message)
        self.reason = reason

    @classmethod
    def missing_sender(cls) -> ActorIdentityError:
        """Return an error for payloads without a ``sender`` object."""
        return cls(
            "webhook payload has no sender object",
            ActorIdentityReason.MISSING_SENDER,
        )

    @classmethod
    def missing_login(cls) -> ActorIdentityError:
        """Return an error for senders without a string ``login``."""
        return cls(
            "webhook sender has no login",
            ActorIdentityReason.MISSING_LOGIN,
        )


class AdapterConfigError(RuntimeError):
    """Raised when GitHub adapter configuration is invalid."""

    @classmethod
    def empty_event_header(cls) -> AdapterConfigError:
        """Return an error when the event header name is blank."""
        return cls("GITQUEST_EVENT_HEADER must be non-empty")

    @classmethod
    def empty_public_branches(cls) -> AdapterConfigError:
        """Return an error when no public branch names remain after parsing."""
        return cls("GITQUEST_PUBLIC_BRANCHES must name at least one branch")
