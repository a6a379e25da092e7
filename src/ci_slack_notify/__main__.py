"""Command-line entry point: ``python -m ci_slack_notify`` or ``ci-slack-notify``."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from ci_slack_notify.config import get_settings
from ci_slack_notify.dispatcher import notify
from ci_slack_notify.errors import NotifierError
from ci_slack_notify.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Run one notification and return the process exit code (0 ok, 1 failed)."""
    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("Invalid action inputs: %s", e)
        return 1

    configure_logging(settings.log_level)
    try:
        asyncio.run(notify(settings))
    except NotifierError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
