"""Webhook and Web API payload envelopes around a composed message."""

from ci_slack_notify.models.message import DisplayOverrides, MessagePayload


def build_attachments(message: MessagePayload) -> list[dict]:
    """One colored attachment holding a single section block of mrkdwn fields."""
    section = {
        "type": "section",
        "fields": [{"type": "mrkdwn", "text": f.to_mrkdwn()} for f in message.fields],
    }
    return [{"color": message.color, "blocks": [section]}]


def webhook_payload(message: MessagePayload) -> dict:
    """Body for an incoming webhook post."""
    return {
        "text": message.text,
        "attachments": build_attachments(message),
        "unfurl_links": True,
    }


def api_payload(message: MessagePayload, overrides: DisplayOverrides) -> dict:
    """Arguments for ``chat.postMessage``: the webhook body plus display overrides."""
    return {
        "username": overrides.username or "",
        "channel": overrides.channel or "",
        "icon_emoji": overrides.icon_emoji or "",
        **webhook_payload(message),
    }
