"""GitHub Actions run context from the runner's ``GITHUB_*`` environment."""

import json
import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from ci_slack_notify.errors import CollectionError
from ci_slack_notify.models.github import ContextFields

logger = logging.getLogger(__name__)

PULL_REQUEST_EVENTS = ("pull_request", "pull_request_target")


class GitHubEnvironment(BaseSettings):
    """Default environment variables set by the Actions runner."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    repository: str = ""  # owner/repo
    ref: str = ""
    sha: str = ""
    event_name: str = ""
    workflow: str = ""
    server_url: str = "https://github.com"
    api_url: str = "https://api.github.com"
    run_id: str | None = None
    event_path: str | None = None

    @property
    def owner_and_repo(self) -> tuple[str, str]:
        """Split ``repository`` into (owner, repo).

        Raises CollectionError if it is not in ``owner/repo`` form.
        """
        owner, sep, repo = self.repository.partition("/")
        if not sep or not owner or not repo:
            raise CollectionError(
                f"GITHUB_REPOSITORY must be in owner/repo form, got {self.repository!r}"
            )
        return owner, repo


def _pull_request_number(event_path: str | None) -> int | None:
    """Read the pull request number from the webhook event payload file."""
    if not event_path:
        return None
    try:
        payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("Could not read event payload: %s", event_path, exc_info=True)
        return None
    if not isinstance(payload, dict):
        return None
    number = payload.get("number") or (payload.get("pull_request") or {}).get("number")
    return number if isinstance(number, int) else None


def collect_context(env: GitHubEnvironment | None = None) -> ContextFields:
    """Build the repository/ref/event/workflow fields for the current run.

    - repo URL: ``{server_url}/{owner}/{repo}``
    - event URL: the pull request page for pull request events, else None
    - workflow URL: the run page when a run id is known, else the commit checks page
    """
    if env is None:
        env = GitHubEnvironment()
    owner, repo = env.owner_and_repo
    repo_url = f"{env.server_url.rstrip('/')}/{owner}/{repo}"

    event_url = None
    if env.event_name in PULL_REQUEST_EVENTS:
        number = _pull_request_number(env.event_path)
        if number is not None:
            event_url = f"{repo_url}/pull/{number}"

    if env.run_id:
        workflow_url = f"{repo_url}/actions/runs/{env.run_id}"
    else:
        workflow_url = f"{repo_url}/commit/{env.sha}/checks"

    return ContextFields(
        repo_owner=owner,
        repo_name=repo,
        repo_url=repo_url,
        ref=env.ref,
        event_name=env.event_name,
        event_url=event_url,
        workflow_name=env.workflow,
        workflow_url=workflow_url,
    )
