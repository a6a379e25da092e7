"""Commit lookup through the GitHub REST API."""

import logging

import httpx

from ci_slack_notify.errors import CollectionError
from ci_slack_notify.github.context import GitHubEnvironment
from ci_slack_notify.models.github import CommitAuthor, CommitContext

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"


def _parse_commit(data: dict) -> CommitContext:
    """Map a ``GET /repos/{owner}/{repo}/commits/{ref}`` response to a CommitContext.

    ``author`` is the linked GitHub user; it is null when the commit email
    does not belong to any account, in which case no author field is shown.
    """
    user = data.get("author")
    author = None
    if user and user.get("login"):
        author = CommitAuthor(name=user["login"], url=user.get("html_url", ""))
    return CommitContext(
        message=data["commit"]["message"],
        url=data["html_url"],
        author=author,
    )


async def get_commit(token: str, env: GitHubEnvironment | None = None) -> CommitContext:
    """Fetch the commit that triggered the run.

    Args:
        token: GitHub token used as a bearer credential. May be empty for
            public repositories.
        env: Runner environment (defaults to the current process environment).

    Raises:
        CollectionError: the request failed or the response was malformed.
    """
    if env is None:
        env = GitHubEnvironment()
    owner, repo = env.owner_and_repo
    if not env.sha:
        raise CollectionError("GITHUB_SHA is not set; cannot look up the commit")

    url = f"{env.api_url.rstrip('/')}/repos/{owner}/{repo}/commits/{env.sha}"
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"

    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(10.0)) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPError as exc:
        raise CollectionError(f"Failed to fetch commit {env.sha}: {exc}") from exc
    except ValueError as exc:
        raise CollectionError(f"Invalid commit response for {env.sha}: {exc}") from exc

    try:
        commit = _parse_commit(data)
    except (KeyError, TypeError, AttributeError) as exc:
        raise CollectionError(f"Unexpected commit response for {env.sha}: {exc}") from exc

    logger.debug("Fetched commit", extra={"sha": env.sha, "commit_url": commit.url})
    return commit
