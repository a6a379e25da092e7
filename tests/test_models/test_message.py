"""Tests for message, display override and transport target models."""

from ci_slack_notify.models.message import (
    ApiTarget,
    DisplayOverrides,
    MessageField,
    WebhookTarget,
)


def test_message_field_to_mrkdwn():
    """Fields render as bold label, newline, value."""
    field = MessageField(label="ref", value="refs/heads/main")
    assert field.to_mrkdwn() == "*ref*\nrefs/heads/main"


def test_display_overrides_as_dict_skips_unset():
    """Only overrides that are set appear in as_dict()."""
    overrides = DisplayOverrides(username="ci-bot", icon_emoji=":rocket:")
    assert overrides.as_dict() == {"username": "ci-bot", "icon_emoji": ":rocket:"}


def test_display_overrides_empty():
    """No overrides yields an empty dict."""
    assert DisplayOverrides().as_dict() == {}


def test_targets_default_overrides():
    """Targets default to no display overrides."""
    assert WebhookTarget(url="https://hooks.slack.com/x").overrides == DisplayOverrides()
    assert ApiTarget(token="xoxb-test").overrides == DisplayOverrides()
