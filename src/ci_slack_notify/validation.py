"""Action input validation: outcome, mention rule and transport selection."""

import logging

from ci_slack_notify.errors import ConfigurationError, InvalidInputError
from ci_slack_notify.models.message import (
    ApiTarget,
    DisplayOverrides,
    TransportTarget,
    WebhookTarget,
)
from ci_slack_notify.models.status import MentionCondition, MentionRule, Outcome

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = (
    "Missing Slack incoming webhook URL or Slack bot token. "
    'To use incoming webhooks, set the "SLACK_WEBHOOK" environment variable '
    'or the "url" input. To use the Web API, set the "SLACK_BOT_TOKEN" '
    'environment variable or the "slack_bot_token" input.'
)


def parse_outcome(raw: str) -> Outcome:
    """Parse the ``type`` input into an Outcome (case-insensitive).

    Raises InvalidInputError for anything other than success, failure or cancelled.
    """
    try:
        return Outcome(raw.strip().lower())
    except ValueError:
        raise InvalidInputError(
            f"Invalid type: {raw!r}. Expected one of: "
            + ", ".join(o.value for o in Outcome)
        ) from None


def parse_mention_rule(target: str, condition_raw: str) -> MentionRule | None:
    """Build a MentionRule, or None when no usable rule is configured.

    An empty target means no mention. An unrecognized condition drops the
    mention and logs a warning; the run continues.
    """
    target = target.strip()
    if not target:
        return None
    try:
        condition = MentionCondition(condition_raw.strip().lower())
    except ValueError:
        logger.warning(
            "Ignoring Slack mention: mention_if %r is invalid",
            condition_raw,
            extra={"mention": target, "mention_if": condition_raw},
        )
        return None
    return MentionRule(target=target, condition=condition)


def is_mention(condition: MentionCondition | str, outcome: Outcome) -> bool:
    """Return True if a mention with this condition fires for the outcome."""
    value = condition.value if isinstance(condition, MentionCondition) else condition
    return value == MentionCondition.ALWAYS.value or value == outcome.value


def select_transport(
    url: str | None,
    token: str | None,
    overrides: DisplayOverrides | None = None,
) -> TransportTarget:
    """Pick the delivery target. A webhook URL wins over a bot token.

    Raises ConfigurationError when neither is set.
    """
    overrides = overrides or DisplayOverrides()
    url = (url or "").strip()
    token = (token or "").strip()
    if url:
        return WebhookTarget(url=url, overrides=overrides)
    if token:
        return ApiTarget(token=token, overrides=overrides)
    raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE)
