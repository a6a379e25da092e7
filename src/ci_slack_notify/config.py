"""Action configuration via pydantic-settings.

GitHub Actions exposes each action input as an ``INPUT_<NAME>`` environment
variable. The Slack credentials can also be supplied through the
``SLACK_WEBHOOK`` and ``SLACK_BOT_TOKEN`` variables, which take precedence.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Action inputs loaded from ``INPUT_*`` environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    # Job
    type: str
    job_name: str

    # Slack transport
    url: str = ""
    slack_bot_token: str = ""

    # Mention
    mention: str = ""
    mention_if: str = ""

    # Display overrides
    username: str = ""
    channel: str = ""
    icon_emoji: str = ""

    # Commit annotation
    commit: bool = False
    token: str = ""

    # App
    log_level: str = "INFO"


class SlackEnvironment(BaseSettings):
    """Slack credentials set directly in the job environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    slack_webhook: str = ""
    slack_bot_token: str = ""


@lru_cache
def get_settings() -> Settings:
    """Return cached action settings. Lazy initialization to avoid import-time errors."""
    return Settings()


def resolve_credentials(
    settings: Settings, slack_env: SlackEnvironment | None = None
) -> tuple[str, str]:
    """Return ``(webhook_url, bot_token)`` with environment variables winning over inputs."""
    if slack_env is None:
        slack_env = SlackEnvironment()
    webhook_url = slack_env.slack_webhook or settings.url
    bot_token = slack_env.slack_bot_token or settings.slack_bot_token
    return webhook_url, bot_token
