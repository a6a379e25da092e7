"""Message composition: headline text and attachment fields for a job outcome.

Pure functions with no I/O. The result is transport-agnostic; see
``slack.payload`` for the webhook and Web API envelopes.
"""

from ci_slack_notify.models.github import CommitContext, ContextFields
from ci_slack_notify.models.message import MessageField, MessagePayload
from ci_slack_notify.models.status import MentionRule, Outcome
from ci_slack_notify.validation import is_mention


def link(url: str, label: str) -> str:
    """Format a Slack mrkdwn link: ``<url|label>``."""
    return f"<{url}|{label}>"


def base_fields(context: ContextFields) -> list[MessageField]:
    """Repository, ref, event name and workflow, in that order."""
    if context.event_url:
        event = link(context.event_url, context.event_name)
    else:
        event = context.event_name
    return [
        MessageField(
            label="repository",
            value=link(context.repo_url, f"{context.repo_owner}/{context.repo_name}"),
        ),
        MessageField(label="ref", value=context.ref),
        MessageField(label="event name", value=event),
        MessageField(label="workflow", value=link(context.workflow_url, context.workflow_name)),
    ]


def commit_fields(commit: CommitContext) -> list[MessageField]:
    """Commit subject line, then author when the commit has a linked user."""
    fields = [MessageField(label="commit", value=link(commit.url, commit.first_line))]
    if commit.author:
        fields.append(
            MessageField(label="author", value=link(commit.author.url, commit.author.name))
        )
    return fields


def headline(job_name: str, outcome: Outcome, mention: MentionRule | None = None) -> str:
    """``"{job_name} {label}"``, prefixed with ``<!target>`` when the mention fires."""
    text = f"{job_name} {outcome.label}"
    if mention and is_mention(mention.condition, outcome):
        text = f"<!{mention.target}> {text}"
    return text


def compose_message(
    job_name: str,
    outcome: Outcome,
    mention: MentionRule | None,
    context: ContextFields,
    commit: CommitContext | None = None,
) -> MessagePayload:
    """Build the message for a job outcome.

    Args:
        job_name: Name shown at the start of the headline.
        outcome: Parsed job outcome; selects the label and attachment color.
        mention: Optional mention rule, applied only if it fires for ``outcome``.
        context: Run identifiers rendered as the base fields.
        commit: Optional commit rendered after the base fields.
    """
    fields = base_fields(context)
    if commit:
        fields.extend(commit_fields(commit))
    return MessagePayload(
        text=headline(job_name, outcome, mention),
        color=outcome.color,
        fields=fields,
    )
