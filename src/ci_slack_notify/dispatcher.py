"""Notification run: validate inputs, collect context, compose, send.

Steps run strictly in sequence. Validation finishes before any network call,
and the commit lookup (if requested) finishes before the message is composed.
"""

import json
import logging
from enum import Enum

from ci_slack_notify.config import Settings, SlackEnvironment, resolve_credentials
from ci_slack_notify.github.commit import get_commit
from ci_slack_notify.github.context import GitHubEnvironment, collect_context
from ci_slack_notify.models.message import DisplayOverrides, WebhookTarget
from ci_slack_notify.slack.blocks import compose_message
from ci_slack_notify.slack.notifier import notify_api, notify_webhook
from ci_slack_notify.slack.payload import api_payload, webhook_payload
from ci_slack_notify.validation import parse_mention_rule, parse_outcome, select_transport

logger = logging.getLogger(__name__)


class Transport(str, Enum):
    """Which delivery mechanism posted the message."""

    WEBHOOK = "webhook"
    API = "api"


async def notify(
    settings: Settings,
    slack_env: SlackEnvironment | None = None,
    github_env: GitHubEnvironment | None = None,
) -> Transport:
    """Post the job outcome to Slack.

    Args:
        settings: Action inputs.
        slack_env: ``SLACK_WEBHOOK`` / ``SLACK_BOT_TOKEN`` overrides
            (defaults to the process environment).
        github_env: Runner context (defaults to the process environment).

    Returns:
        The transport that delivered the message.

    Raises:
        InvalidInputError: ``type`` is not success, failure or cancelled.
        ConfigurationError: neither a webhook URL nor a bot token is set.
        CollectionError: run context or the requested commit is unavailable.
        TransportError: Slack did not accept the message.
    """
    # 1. Validate
    outcome = parse_outcome(settings.type)
    mention = parse_mention_rule(settings.mention, settings.mention_if)
    webhook_url, bot_token = resolve_credentials(settings, slack_env)
    overrides = DisplayOverrides(
        username=settings.username or None,
        channel=settings.channel or None,
        icon_emoji=settings.icon_emoji or None,
    )
    target = select_transport(webhook_url, bot_token, overrides)

    # 2. Collect
    if github_env is None:
        github_env = GitHubEnvironment()
    context = collect_context(github_env)
    commit = None
    if settings.commit:
        commit = await get_commit(settings.token, github_env)

    # 3. Compose
    message = compose_message(settings.job_name, outcome, mention, context, commit)

    # 4. Send
    if isinstance(target, WebhookTarget):
        payload = webhook_payload(message)
        logger.debug("Generated payload for Slack webhook: %s", json.dumps(payload))
        await notify_webhook(target, payload)
        logger.info(
            "Posted message to Slack incoming webhook",
            extra={"outcome": outcome.value, "job_name": settings.job_name},
        )
        return Transport.WEBHOOK

    payload = api_payload(message, target.overrides)
    logger.debug("Generated payload for Slack Web API: %s", json.dumps(payload))
    await notify_api(target, payload)
    logger.info(
        "Posted message to Slack Web API",
        extra={"outcome": outcome.value, "job_name": settings.job_name},
    )
    return Transport.API
