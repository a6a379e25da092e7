"""Composed message and transport target models."""

from pydantic import BaseModel, ConfigDict


class MessageField(BaseModel):
    """A labeled value rendered in the attachment body."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str

    def to_mrkdwn(self) -> str:
        """Render as bold label over value, e.g. ``*ref*\\nrefs/heads/main``."""
        return f"*{self.label}*\n{self.value}"


class MessagePayload(BaseModel):
    """Transport-agnostic message: headline text plus a colored field list."""

    text: str
    color: str
    fields: list[MessageField]


class DisplayOverrides(BaseModel):
    """Per-message display settings passed through to Slack unmodified."""

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    channel: str | None = None
    icon_emoji: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Return only the overrides that are set."""
        return self.model_dump(exclude_none=True)


class WebhookTarget(BaseModel):
    """Deliver through a Slack incoming webhook."""

    model_config = ConfigDict(frozen=True)

    url: str
    overrides: DisplayOverrides = DisplayOverrides()


class ApiTarget(BaseModel):
    """Deliver through ``chat.postMessage`` with a bot token."""

    model_config = ConfigDict(frozen=True)

    token: str
    overrides: DisplayOverrides = DisplayOverrides()


TransportTarget = WebhookTarget | ApiTarget
