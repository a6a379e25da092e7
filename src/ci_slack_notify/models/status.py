"""Job outcome and mention rule models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Outcome(str, Enum):
    """Result of the CI job being reported, with its display attributes."""

    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"

    @property
    def color(self) -> str:
        """Attachment bar color as a hex string."""
        match self:
            case Outcome.SUCCESS:
                return "#2cbe4e"
            case Outcome.FAILURE:
                return "#cb2431"
            case Outcome.CANCELLED:
                return "#ffc107"

    @property
    def label(self) -> str:
        """Human-readable result appended to the job name."""
        match self:
            case Outcome.SUCCESS:
                return "Succeeded"
            case Outcome.FAILURE:
                return "Failed"
            case Outcome.CANCELLED:
                return "Cancelled"


class MentionCondition(str, Enum):
    """When a configured mention should be included."""

    ALWAYS = "always"
    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"


class MentionRule(BaseModel):
    """A mention target (e.g. ``here``, ``channel``) and the outcome that triggers it."""

    model_config = ConfigDict(frozen=True)

    target: str
    condition: MentionCondition
