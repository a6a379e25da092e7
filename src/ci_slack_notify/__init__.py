"""Post CI job outcomes to Slack via incoming webhook or bot token."""

__version__ = "0.1.0"
