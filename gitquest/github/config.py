"""Configuration for the GitHub webhook adapter."""

from __future__ import annotations

import dataclasses
import os

from gitquest.github.errors import AdapterConfigError

# Default configuration values - single source of truth
_DEFAULT_EVENT_HEADER = "x-github-event"
_DEFAULT_PUBLIC_BRANCHES = ("master", "main")
_DEFAULT_BRANCH_REF_PREFIX = "refs/heads/"


@dataclasses.dataclass(frozen=True, slots=True)
class AdapterConfig:
    """Settings that shape how webhook deliveries are mapped.

    Attributes
    ----------
    event_header
        Header carrying the GitHub event name. Compared case-insensitively.
    public_branches
        Branch names whose pushes are visible to the whole project.
    branch_ref_prefix
        Prefix stripped from ``ref`` values to obtain the branch name.

    """

    event_header: str = _DEFAULT_EVENT_HEADER
    public_branches: tuple[str, ...] = _DEFAULT_PUBLIC_BRANCHES
    branch_ref_prefix: str = _DEFAULT_BRANCH_REF_PREFIX

    def __post_init__(self) -> None:
        """Validate and normalise the header name."""
        header = self.event_header.strip().lower()
        if not header:
            raise AdapterConfigError.empty_event_header()
        object.__setattr__(self, "event_header", header)
        if not self.public_branches:
            raise AdapterConfigError.empty_public_branches()

    def is_public_branch(self, branch: str) -> bool:
        """Return True when pushes to ``branch`` are public."""
        return branch in self.public_branches

    def branch_name(self, ref: str) -> str:
        """Strip the branch ref prefix from ``ref`` when present."""
        return ref.removeprefix(self.branch_ref_prefix)

    @staticmethod
    def _parse_public_branches_from_env() -> tuple[str, ...]:
        """Parse the comma separated public branch list from the environment.

        Raises
        ------
        AdapterConfigError
            If the variable is set but names no branch.

        """
        raw_branches = os.environ.get("GITQUEST_PUBLIC_BRANCHES")
        if raw_branches is None:
            return _DEFAULT_PUBLIC_BRANCHES

        branches = tuple(
            branch.strip() for branch in raw_branches.split(",") if branch.strip()
        )
        if not branches:
            raise AdapterConfigError.empty_public_branches()
        return branches

    @classmethod
    def from_env(cls) -> AdapterConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GITQUEST_EVENT_HEADER``: Optional event header override
        - ``GITQUEST_PUBLIC_BRANCHES``: Optional comma separated branch names

        Raises
        ------
        AdapterConfigError
            If a variable is set to an unusable value.

        """
        event_header = os.environ.get("GITQUEST_EVENT_HEADER", _DEFAULT_EVENT_HEADER)
        return cls(
            event_header=event_header,
            public_branches=cls._parse_public_branches_from_env(),
        )
