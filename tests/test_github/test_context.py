"""Tests for run context collection from the GITHUB_* environment."""

import json
from pathlib import Path

import pytest

from ci_slack_notify.errors import CollectionError
from ci_slack_notify.github.context import GitHubEnvironment, collect_context

REPO_URL = "https://github.com/octo-org/octo-repo"


def test_collect_context_push(github_env: GitHubEnvironment):
    """A push event has no event URL and links the workflow run."""
    context = collect_context(github_env)

    assert context.repo_owner == "octo-org"
    assert context.repo_name == "octo-repo"
    assert context.repo_url == REPO_URL
    assert context.ref == "refs/heads/main"
    assert context.event_name == "push"
    assert context.event_url is None
    assert context.workflow_name == "CI"
    assert context.workflow_url == f"{REPO_URL}/actions/runs/1658821493"


def test_collect_context_without_run_id_links_checks(github_env: GitHubEnvironment):
    """Without a run id the workflow links to the commit checks page."""
    env = github_env.model_copy(update={"run_id": None})

    context = collect_context(env)

    assert context.workflow_url == f"{REPO_URL}/commit/abc123def456/checks"


def test_collect_context_pull_request(github_env: GitHubEnvironment, tmp_path: Path):
    """pull_request events link to the PR page from the event payload."""
    event_file = tmp_path / "event.json"
    event_file.write_text(json.dumps({"number": 42, "pull_request": {"number": 42}}))
    env = github_env.model_copy(
        update={"event_name": "pull_request", "event_path": str(event_file)}
    )

    context = collect_context(env)

    assert context.event_url == f"{REPO_URL}/pull/42"


def test_collect_context_pull_request_unreadable_payload(github_env: GitHubEnvironment):
    """A missing event payload leaves the event as plain text."""
    env = github_env.model_copy(
        update={"event_name": "pull_request_target", "event_path": "/nonexistent/event.json"}
    )

    context = collect_context(env)

    assert context.event_url is None


def test_collect_context_enterprise_server(github_env: GitHubEnvironment):
    """GITHUB_SERVER_URL is honored for GitHub Enterprise Server."""
    env = github_env.model_copy(update={"server_url": "https://ghe.example.com/"})

    context = collect_context(env)

    assert context.repo_url == "https://ghe.example.com/octo-org/octo-repo"


@pytest.mark.parametrize("repository", ["", "octo-repo", "octo-org/", "/octo-repo"])
def test_collect_context_bad_repository(github_env: GitHubEnvironment, repository: str):
    """GITHUB_REPOSITORY not in owner/repo form raises CollectionError."""
    env = github_env.model_copy(update={"repository": repository})

    with pytest.raises(CollectionError, match="owner/repo"):
        collect_context(env)


def test_github_environment_reads_env(monkeypatch: pytest.MonkeyPatch):
    """GitHubEnvironment loads GITHUB_* variables."""
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo-org/octo-repo")
    monkeypatch.setenv("GITHUB_REF", "refs/tags/v1.0.0")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "release")
    monkeypatch.setenv("GITHUB_WORKFLOW", "Release")

    env = GitHubEnvironment()

    assert env.owner_and_repo == ("octo-org", "octo-repo")
    assert env.ref == "refs/tags/v1.0.0"
    assert env.event_name == "release"
    assert env.workflow == "Release"
    assert env.server_url == "https://github.com"
    assert env.run_id is None


@pytest.mark.parametrize(
    "payload",
    [{"pull_request": None}, [], "pull_request", {"number": "42"}],
)
def test_collect_context_pull_request_unexpected_payload(
    github_env: GitHubEnvironment, tmp_path: Path, payload
):
    """Payloads without a usable PR number leave the event as plain text."""
    event_file = tmp_path / "event.json"
    event_file.write_text(json.dumps(payload))
    env = github_env.model_copy(
        update={"event_name": "pull_request", "event_path": str(event_file)}
    )

    context = collect_context(env)

    assert context.event_url is None
    assert context.event_name == "pull_request"


def test_collect_context_pull_request_number_nested(
    github_env: GitHubEnvironment, tmp_path: Path
):
    """The number is read from pull_request when the top-level key is missing."""
    event_file = tmp_path / "event.json"
    event_file.write_text(json.dumps({"pull_request": {"number": 7}}))
    env = github_env.model_copy(
        update={"event_name": "pull_request", "event_path": str(event_file)}
    )

    assert collect_context(env).event_url == f"{REPO_URL}/pull/7"
