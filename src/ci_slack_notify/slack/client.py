"""Async Slack client factories.

One client is created per transport target; the process posts a single
message and exits, so nothing is cached.
"""

from slack_sdk.web.async_client import AsyncWebClient
from slack_sdk.webhook.async_client import AsyncWebhookClient

from ci_slack_notify.models.message import ApiTarget, WebhookTarget


def get_webhook_client(target: WebhookTarget) -> AsyncWebhookClient:
    """Return an async incoming-webhook client for the target URL."""
    return AsyncWebhookClient(url=target.url)


def get_web_client(target: ApiTarget) -> AsyncWebClient:
    """Return an async Web API client authenticated with the target's bot token."""
    return AsyncWebClient(token=target.token)
