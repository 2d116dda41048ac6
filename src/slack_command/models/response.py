"""Outbound message and attachment models for slash command responses.

Field semantics follow Slack's legacy message attachment format. The
producer rules Slack documents (text or fallback required, author/title/footer
links needing their parent field) are not enforced on construction; call
``Attachment.contract_warnings()`` to check them.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

NAMED_COLORS = frozenset({"good", "warning", "danger"})
HEX_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")


class MrkdwnTarget(str, Enum):
    """Attachment parts that may have message markup applied."""

    PRETEXT = "pretext"
    TEXT = "text"
    FIELDS = "fields"


class AttachmentField(BaseModel):
    """A title/value pair shown in a table inside an attachment."""

    title: str  # Bold heading, no markup
    value: str  # May contain markup, may be multi-line
    short: bool | None = None  # Hint: render side-by-side with other short fields


class Attachment(BaseModel):
    """A rich content block attached to a message."""

    model_config = ConfigDict(extra="allow")

    fallback: str | None = None  # Plain-text summary for clients without formatting
    color: str | None = None  # "good", "warning", "danger" or "#RRGGBB"
    pretext: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    title: str | None = None
    title_link: str | None = None
    text: str | None = None
    fields: list[AttachmentField] | None = None
    image_url: str | None = None
    thumb_url: str | None = None
    footer: str | None = None
    footer_icon: str | None = None
    ts: int | float | None = None  # Epoch seconds
    mrkdwn_in: list[MrkdwnTarget] | None = None

    def contract_warnings(self) -> list[str]:
        """Return the producer rules this attachment breaks. Empty when it will render correctly."""
        warnings = []
        if self.text is None and self.fallback is None:
            warnings.append("either text or fallback must be set")
        if self.author_name is None:
            if self.author_link is not None:
                warnings.append("author_link has no effect without author_name")
            if self.author_icon is not None:
                warnings.append("author_icon has no effect without author_name")
        if self.title_link is not None and self.title is None:
            warnings.append("title_link has no effect without title")
        if self.footer_icon is not None and self.footer is None:
            warnings.append("footer_icon has no effect without footer")
        if (
            self.color is not None
            and self.color not in NAMED_COLORS
            and not HEX_COLOR_PATTERN.fullmatch(self.color)
        ):
            warnings.append(f"color {self.color!r} is not good/warning/danger or #RRGGBB")
        if self.mrkdwn_in is not None and len(set(self.mrkdwn_in)) != len(self.mrkdwn_in):
            warnings.append("mrkdwn_in contains duplicate entries")
        return warnings


class CommandResponse(BaseModel):
    """A structured message returned by a command handler."""

    model_config = ConfigDict(extra="allow")

    text: str | None = None
    username: str | None = None
    attachments: list[Attachment] | None = None
    mrkdwn: bool | None = None  # None leaves the platform default in place
