"""Mention model: a reference to a Slack user or channel."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class MentionKind(str, Enum):
    """The two kinds of escaped mention, each with its own sigil."""

    USER = "user"
    CHANNEL = "channel"

    @property
    def sigil(self) -> str:
        return _SIGILS[self]


_SIGILS = {
    MentionKind.USER: "@",
    MentionKind.CHANNEL: "#",
}


class Mention(BaseModel):
    """An immutable user or channel reference with its platform ID and display name.

    ``str(mention)`` renders the escaped token, e.g. ``<@U123|bob>``. No escaping
    is applied; IDs and names containing ``<``, ``>`` or ``|`` do not round-trip.
    """

    model_config = ConfigDict(frozen=True)

    kind: MentionKind
    id: str  # e.g. "U024BE7LH" or "C024BE91L"
    name: str  # Display name, already unescaped

    @classmethod
    def user(cls, id: str, name: str) -> "Mention":
        return cls(kind=MentionKind.USER, id=id, name=name)

    @classmethod
    def channel(cls, id: str, name: str) -> "Mention":
        return cls(kind=MentionKind.CHANNEL, id=id, name=name)

    def __str__(self) -> str:
        return f"<{self.kind.sigil}{self.id}|{self.name}>"
