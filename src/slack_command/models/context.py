"""Slash command invocation context model."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from slack_command.models.mention import Mention

logger = logging.getLogger(__name__)

# Form fields Slack sends with every slash command request
COMMAND_FIELDS = (
    "token",
    "team_id",
    "team_domain",
    "enterprise_id",
    "enterprise_name",
    "channel_id",
    "channel_name",
    "user_id",
    "user_name",
    "command",
    "text",
    "response_url",
    "trigger_id",
)


class InvocationInfo(BaseModel):
    """Metadata from the dispatcher that resolved the command (not from Slack)."""

    model_config = ConfigDict(frozen=True)

    commands: tuple[str, ...] = ()  # Resolved command path, e.g. ("/deploy", "staging")
    cwd: str | None = None


class CommandContext(BaseModel):
    """One slash command invocation.

    Holds the raw Slack form fields verbatim. ``user`` and ``channel`` are
    derived from ``user_id``/``user_name`` and ``channel_id``/``channel_name``
    on every access, so they always agree with the raw fields.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    token: str = ""
    team_id: str = ""
    team_domain: str = ""
    enterprise_id: str = ""
    enterprise_name: str = ""
    channel_id: str = ""
    channel_name: str = ""
    user_id: str = ""
    user_name: str = ""
    command: str = ""  # e.g. "/deploy"
    text: str = ""  # Everything after the command, may contain escaped mentions
    response_url: str = ""
    trigger_id: str = ""

    invocation: InvocationInfo = Field(default_factory=InvocationInfo)

    @property
    def user(self) -> Mention:
        return Mention.user(self.user_id, self.user_name)

    @property
    def channel(self) -> Mention:
        return Mention.channel(self.channel_id, self.channel_name)

    @classmethod
    def from_fields(
        cls,
        fields: Mapping[str, Any],
        invocation: InvocationInfo | Mapping[str, Any] | None = None,
    ) -> "CommandContext":
        """Build a context from a decoded field bag and separate invocation metadata.

        Recognized fields are copied without trimming or validation. Unknown keys
        are ignored. Missing or non-string values become the empty string, so
        construction never fails because of the field bag.

        The invocation metadata is not covered by that guarantee: it comes from
        the dispatcher, not from Slack, and a mapping is validated as-is.

        Raises:
            pydantic.ValidationError: if ``invocation`` is a mapping that is not
                valid ``InvocationInfo`` data, e.g. ``{"commands": 5}``.
        """
        values: dict[str, str] = {}
        for name in COMMAND_FIELDS:
            value = fields.get(name)
            if isinstance(value, str):
                values[name] = value
            elif value is not None:
                logger.debug("Ignoring non-string value for field %s", name)

        if invocation is None:
            invocation = InvocationInfo()
        elif not isinstance(invocation, InvocationInfo):
            invocation = InvocationInfo.model_validate(invocation)

        return cls(invocation=invocation, **values)
