"""Assembly of a CommandContext from an inbound slash command request."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl

from slack_command.models.context import CommandContext, InvocationInfo


def parse_form_fields(body: str | bytes) -> dict[str, str]:
    """Decode an application/x-www-form-urlencoded body into a flat field bag.

    Blank values are kept. For repeated keys the last value wins.
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    return dict(parse_qsl(body, keep_blank_values=True))


def build_context(
    fields: Mapping[str, Any],
    invocation: InvocationInfo | Mapping[str, Any] | None = None,
) -> CommandContext:
    """Build the per-invocation context from decoded form fields.

    Never fails because of ``fields``; see ``CommandContext.from_fields`` for
    how ``invocation`` is validated.
    """
    return CommandContext.from_fields(fields, invocation)
