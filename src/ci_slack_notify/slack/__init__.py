"""Slack egress: message composition, payload envelopes and transports."""

from ci_slack_notify.slack.blocks import base_fields, commit_fields, compose_message, headline
from ci_slack_notify.slack.client import get_web_client, get_webhook_client
from ci_slack_notify.slack.notifier import notify_api, notify_webhook
from ci_slack_notify.slack.payload import api_payload, build_attachments, webhook_payload

__all__ = [
    "api_payload",
    "base_fields",
    "build_attachments",
    "commit_fields",
    "compose_message",
    "get_web_client",
    "get_webhook_client",
    "headline",
    "notify_api",
    "notify_webhook",
    "webhook_payload",
]
