"""Recognition and serialization of command handler return values."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from slack_command.exceptions import ResponseShapeError
from slack_command.models.response import CommandResponse

logger = logging.getLogger(__name__)

# What a handler may return: a built response, a response-shaped mapping,
# or any other value that is sent as plain text.
HandlerResult = CommandResponse | Mapping[str, Any] | str | None | object


def is_command_response(value: HandlerResult) -> bool:
    """Return True if a handler's return value should be sent as a structured message.

    Deliberately coarse: a key/value value qualifies when its ``text`` is a
    string or its ``attachments`` is a list or tuple. Attachment contents,
    ``username`` and ``mrkdwn`` are not inspected.
    """
    if isinstance(value, CommandResponse):
        text = value.text
        attachments = value.attachments
    elif isinstance(value, Mapping):
        text = value.get("text")
        attachments = value.get("attachments")
    else:
        return False
    return isinstance(text, str) or isinstance(attachments, (list, tuple))


def to_message_body(value: HandlerResult) -> dict:
    """Convert a handler's return value into the JSON body Slack expects.

    - ``CommandResponse``: dumped as-is
    - recognized mapping: validated into ``CommandResponse`` then dumped
    - ``None``: empty body
    - anything else, including mappings the predicate rejects such as
      ``{"username": "bot"}``: wrapped as ``{"text": str(value)}``, so a
      mapping is sent as its Python repr

    Unset fields are omitted from the body.

    Raises:
        ResponseShapeError: if a recognized mapping fails validation.
    """
    if isinstance(value, CommandResponse):
        return value.model_dump(mode="json", exclude_none=True)

    if value is None:
        return {}

    if is_command_response(value):
        try:
            response = CommandResponse.model_validate(dict(value))
        except ValidationError as exc:
            raise ResponseShapeError(f"Invalid command response: {exc}") from exc
        return response.model_dump(mode="json", exclude_none=True)

    logger.debug("Wrapping %s handler result as plain text", type(value).__name__)
    return {"text": str(value)}
