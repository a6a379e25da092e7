"""Deliver a payload through the incoming webhook or the Web API.

Each send is attempted once. Any failure is logged with its detail and
re-raised as a TransportError carrying a generic message.
"""

import logging

from ci_slack_notify.errors import TransportError
from ci_slack_notify.models.message import ApiTarget, WebhookTarget
from ci_slack_notify.slack.client import get_web_client, get_webhook_client

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to post message to Slack"


async def notify_webhook(target: WebhookTarget, payload: dict) -> None:
    """Post to an incoming webhook. Slack answers a plain ``ok`` body on success.

    Args:
        target: Webhook URL and display overrides (merged into the body).
        payload: Webhook body from ``webhook_payload``.
    """
    body = {**target.overrides.as_dict(), **payload}
    try:
        client = get_webhook_client(target)
        response = await client.send_dict(body)
        if response.body != "ok":
            raise RuntimeError(
                f"Webhook responded {response.status_code}: {response.body!r}"
            )
    except Exception as e:
        logger.error("Slack webhook post failed: %s", e, exc_info=True)
        raise TransportError(FAILURE_MESSAGE) from e


async def notify_api(target: ApiTarget, payload: dict) -> None:
    """Post with ``chat.postMessage``. Success requires ``ok: true`` in the response.

    Args:
        target: Bot token.
        payload: Keyword arguments from ``api_payload``.
    """
    try:
        client = get_web_client(target)
        response = await client.chat_postMessage(**payload)
        if response.get("ok") is not True:
            raise RuntimeError(f"chat.postMessage responded: {response.data!r}")
    except Exception as e:
        logger.error("Slack Web API post failed: %s", e, exc_info=True)
        raise TransportError(FAILURE_MESSAGE) from e
