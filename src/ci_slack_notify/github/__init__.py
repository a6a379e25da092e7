"""GitHub Actions context: run identifiers and commit lookup."""

from ci_slack_notify.github.commit import get_commit
from ci_slack_notify.github.context import GitHubEnvironment, collect_context

__all__ = [
    "collect_context",
    "get_commit",
    "GitHubEnvironment",
]
