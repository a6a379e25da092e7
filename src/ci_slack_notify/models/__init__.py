"""Data models and enums for the Slack notifier."""

from ci_slack_notify.models.github import CommitAuthor, CommitContext, ContextFields
from ci_slack_notify.models.message import (
    ApiTarget,
    DisplayOverrides,
    MessageField,
    MessagePayload,
    TransportTarget,
    WebhookTarget,
)
from ci_slack_notify.models.status import MentionCondition, MentionRule, Outcome

__all__ = [
    "Outcome",
    "MentionCondition",
    "MentionRule",
    "CommitAuthor",
    "CommitContext",
    "ContextFields",
    "MessageField",
    "MessagePayload",
    "DisplayOverrides",
    "WebhookTarget",
    "ApiTarget",
    "TransportTarget",
]
