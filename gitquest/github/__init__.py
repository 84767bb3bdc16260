"""GitHub webhook mapping to normalized gamification events."""

from __future__ import annotations

from .adapter import ExternalSystemAdapter, GitHubAdapter, UserResolver
from .classify import (
    Classification,
    PullRequestAction,
    ReviewAction,
    ReviewState,
    WebhookEventKind,
    classify,
)
from .config import AdapterConfig
from .errors import ActorIdentityError, AdapterConfigError
from .observability import MappingEventLogger, MappingEventType, SkipReason

__all__ = [
    "ActorIdentityError",
    "AdapterConfig",
    "AdapterConfigError",
    "Classification",
    "ExternalSystemAdapter",
    "GitHubAdapter",
    "MappingEventLogger",
    "MappingEventType",
    "PullRequestAction",
    "ReviewAction",
    "ReviewState",
    "SkipReason",
    "UserResolver",
    "WebhookEventKind",
    "classify",
]
