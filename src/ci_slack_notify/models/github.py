"""Models for GitHub context rendered into the message."""

from pydantic import BaseModel, ConfigDict


class CommitAuthor(BaseModel):
    """GitHub user linked to a commit."""

    model_config = ConfigDict(frozen=True)

    name: str  # GitHub login
    url: str  # Profile URL


class CommitContext(BaseModel):
    """The commit that triggered the workflow run."""

    model_config = ConfigDict(frozen=True)

    message: str
    url: str
    author: CommitAuthor | None = None  # None when the commit has no linked GitHub user

    @property
    def first_line(self) -> str:
        """Commit subject: everything before the first newline."""
        return self.message.split("\n", 1)[0]


class ContextFields(BaseModel):
    """Repository, ref, event and workflow identifiers for the current run."""

    model_config = ConfigDict(frozen=True)

    repo_owner: str
    repo_name: str
    repo_url: str
    ref: str
    event_name: str
    event_url: str | None = None  # Set for pull request events
    workflow_name: str
    workflow_url: str
