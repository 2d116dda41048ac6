"""Data models for slash command mentions, contexts and responses."""

from slack_command.models.context import COMMAND_FIELDS, CommandContext, InvocationInfo
from slack_command.models.mention import Mention, MentionKind
from slack_command.models.response import (
    Attachment,
    AttachmentField,
    CommandResponse,
    MrkdwnTarget,
)

__all__ = [
    "Mention",
    "MentionKind",
    "COMMAND_FIELDS",
    "CommandContext",
    "InvocationInfo",
    "Attachment",
    "AttachmentField",
    "CommandResponse",
    "MrkdwnTarget",
]
