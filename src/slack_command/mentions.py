"""Encoding and decoding of Slack's escaped mention syntax.

Users are written ``<@U024BE7LH|bob>`` and channels ``<#C024BE91L|general>``.
"""

import logging
import re

from slack_command.exceptions import MentionFormatError
from slack_command.models.mention import Mention, MentionKind

logger = logging.getLogger(__name__)

# Whole-string tokens: sigil, non-empty ID up to "|", non-empty name up to ">"
MENTION_PATTERNS = {
    MentionKind.USER: re.compile(r"<@([^|]+)\|([^>]+)>"),
    MentionKind.CHANNEL: re.compile(r"<#([^|]+)\|([^>]+)>"),
}

# Tokens embedded in free text. Neither part may contain "<" or ">" so a
# match never spans two tokens. Unlike the whole-string patterns, an ID
# holding ">" is therefore not found here.
EMBEDDED_MENTION_PATTERN = re.compile(r"<([@#])([^|<>]+)\|([^<>]+)>")

_KINDS_BY_SIGIL = {kind.sigil: kind for kind in MentionKind}


def encode_mention(mention: Mention) -> str:
    """Render a mention as its escaped token."""
    return str(mention)


def parse_mention(text: str, kind: MentionKind) -> Mention:
    """Parse text that must consist of exactly one escaped mention of ``kind``.

    Raises:
        MentionFormatError: if the text is not a complete, well-formed token
            of the requested kind.
    """
    match = MENTION_PATTERNS[kind].fullmatch(text)
    if match is None:
        logger.debug("Rejected escaped %s: %r", kind.value, text)
        raise MentionFormatError(text, kind.value)
    return Mention(kind=kind, id=match.group(1), name=match.group(2))


def parse_user(text: str) -> Mention:
    """Parse an escaped user mention such as ``<@U123|bob>``."""
    return parse_mention(text, MentionKind.USER)


def parse_channel(text: str) -> Mention:
    """Parse an escaped channel mention such as ``<#C123|general>``."""
    return parse_mention(text, MentionKind.CHANNEL)


def find_mentions(text: str, kind: MentionKind | None = None) -> list[Mention]:
    """Extract every escaped mention from free-form text, in order of appearance.

    Optionally restricted to one kind. Malformed tokens are skipped, as are
    tokens whose ID or name contains "<" or ">", which ``parse_mention`` may
    still accept as a whole string.
    """
    mentions = []
    for sigil, mention_id, name in EMBEDDED_MENTION_PATTERN.findall(text):
        found_kind = _KINDS_BY_SIGIL[sigil]
        if kind is None or found_kind == kind:
            mentions.append(Mention(kind=found_kind, id=mention_id, name=name))
    return mentions
