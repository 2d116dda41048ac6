"""Slack slash command toolkit: escaped mentions, invocation context, and response payloads."""

from slack_command.context import build_context, parse_form_fields
from slack_command.exceptions import (
    ExpectedError,
    MentionFormatError,
    ResponseShapeError,
    SlackCommandError,
)
from slack_command.mentions import (
    encode_mention,
    find_mentions,
    parse_channel,
    parse_mention,
    parse_user,
)
from slack_command.models import (
    Attachment,
    AttachmentField,
    CommandContext,
    CommandResponse,
    InvocationInfo,
    Mention,
    MentionKind,
    MrkdwnTarget,
)
from slack_command.responses import is_command_response, to_message_body

__all__ = [
    "Attachment",
    "AttachmentField",
    "CommandContext",
    "CommandResponse",
    "ExpectedError",
    "InvocationInfo",
    "Mention",
    "MentionFormatError",
    "MentionKind",
    "MrkdwnTarget",
    "ResponseShapeError",
    "SlackCommandError",
    "build_context",
    "encode_mention",
    "find_mentions",
    "is_command_response",
    "parse_channel",
    "parse_form_fields",
    "parse_mention",
    "parse_user",
    "to_message_body",
]
