"""Fatal error types. Each one ends the run with a failed status."""


class NotifierError(Exception):
    """Base class for errors that fail the notification run."""


class InvalidInputError(NotifierError):
    """An action input has a value outside its accepted set."""


class ConfigurationError(NotifierError):
    """Neither a webhook URL nor a bot token is configured."""


class CollectionError(NotifierError):
    """Commit or event context could not be retrieved."""


class TransportError(NotifierError):
    """The Slack transport did not accept the message."""
