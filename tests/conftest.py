"""Shared test fixtures."""

import os

import pytest

from ci_slack_notify.config import Settings, SlackEnvironment, get_settings
from ci_slack_notify.github.context import GitHubEnvironment
from ci_slack_notify.models.github import ContextFields

_ENV_PREFIXES = ("INPUT_", "SLACK_", "GITHUB_")


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from the runner's own INPUT_/SLACK_/GITHUB_ variables."""
    for key in list(os.environ):
        if key.upper().startswith(_ENV_PREFIXES):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def github_env() -> GitHubEnvironment:
    """Runner context for a push to main."""
    return GitHubEnvironment(
        repository="octo-org/octo-repo",
        ref="refs/heads/main",
        sha="abc123def456",
        event_name="push",
        workflow="CI",
        server_url="https://github.com",
        api_url="https://api.github.com",
        run_id="1658821493",
        event_path=None,
    )


@pytest.fixture
def context_fields() -> ContextFields:
    """Context fields for a push to main."""
    return ContextFields(
        repo_owner="octo-org",
        repo_name="octo-repo",
        repo_url="https://github.com/octo-org/octo-repo",
        ref="refs/heads/main",
        event_name="push",
        event_url=None,
        workflow_name="CI",
        workflow_url="https://github.com/octo-org/octo-repo/actions/runs/1658821493",
    )


@pytest.fixture
def no_slack_env() -> SlackEnvironment:
    """No SLACK_WEBHOOK / SLACK_BOT_TOKEN overrides."""
    return SlackEnvironment(slack_webhook="", slack_bot_token="")


@pytest.fixture
def make_settings():
    """Return a factory building Settings with required inputs filled in."""

    def _make(**overrides) -> Settings:
        values = {"type": "success", "job_name": "Build"}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make
