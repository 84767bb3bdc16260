"""Unit tests for GitHub adapter configuration."""

from __future__ import annotations

import pytest

from gitquest.github.config import AdapterConfig
from gitquest.github.errors import AdapterConfigError


class TestAdapterConfigDefaults:
    """Tests for default configuration values."""

    def test_defaults(self) -> None:
        """Defaults read the GitHub header and treat main/master as public."""
        config = AdapterConfig()

        assert config.event_header == "x-github-event"
        assert config.public_branches == ("master", "main")
        assert config.branch_ref_prefix == "refs/heads/"

    def test_event_header_is_normalised(self) -> None:
        """Header names are stored lower-cased and stripped."""
        assert AdapterConfig(event_header=" X-GitHub-Event ").event_header == (
            "x-github-event"
        )

    @pytest.mark.parametrize("header", ["", "   "])
    def test_blank_event_header_is_rejected(self, header: str) -> None:
        """A blank header name can never classify a delivery."""
        with pytest.raises(AdapterConfigError, match="GITQUEST_EVENT_HEADER"):
            AdapterConfig(event_header=header)

    def test_empty_public_branches_are_rejected(self) -> None:
        """At least one public branch is required."""
        with pytest.raises(AdapterConfigError, match="GITQUEST_PUBLIC_BRANCHES"):
            AdapterConfig(public_branches=())

    @pytest.mark.parametrize(
        ("ref", "expected"),
        [
            pytest.param("refs/heads/main", "main", id="prefixed"),
            pytest.param("main", "main", id="bare"),
            pytest.param("refs/heads/refs/heads/x", "refs/heads/x", id="once_only"),
        ],
    )
    def test_branch_name_strips_prefix_once(self, ref: str, expected: str) -> None:
        """Only one leading prefix is removed."""
        assert AdapterConfig().branch_name(ref) == expected


class TestAdapterConfigFromEnv:
    """Tests for AdapterConfig.from_env."""

    @pytest.fixture(autouse=True)
    def _clear_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GITQUEST_EVENT_HEADER", raising=False)
        monkeypatch.delenv("GITQUEST_PUBLIC_BRANCHES", raising=False)

    def test_from_env_uses_defaults(self) -> None:
        """Unset variables fall back to defaults."""
        assert AdapterConfig.from_env() == AdapterConfig()

    def test_from_env_reads_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Header and branch overrides are parsed."""
        monkeypatch.setenv("GITQUEST_EVENT_HEADER", "X-Relay-Event")
        monkeypatch.setenv("GITQUEST_PUBLIC_BRANCHES", " trunk, release ,,")

        config = AdapterConfig.from_env()

        assert config.event_header == "x-relay-event"
        assert config.public_branches == ("trunk", "release")
        assert config.is_public_branch("release")
        assert not config.is_public_branch("main")

    def test_from_env_rejects_empty_branch_list(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A branch list with no names is a configuration error."""
        monkeypatch.setenv("GITQUEST_PUBLIC_BRANCHES", " , ")

        with pytest.raises(AdapterConfigError):
            AdapterConfig.from_env()
