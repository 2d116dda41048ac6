"""Tests for handler result recognition and message body serialization."""

import pytest

from slack_command.exceptions import ResponseShapeError
from slack_command.models.response import Attachment, CommandResponse
from slack_command.responses import is_command_response, to_message_body

# -- is_command_response --


@pytest.mark.parametrize(
    "value",
    [
        {"text": "hello"},
        {"text": ""},
        {"attachments": []},
        {"attachments": [{"text": "x"}]},
        {"attachments": ("not", "validated")},
        {"text": 5, "attachments": []},
        {"text": "hi", "username": 7, "mrkdwn": "yes"},
        CommandResponse(text="hello"),
        CommandResponse(attachments=[]),
    ],
)
def test_recognized(value: object):
    """Values with a string text or a sequence of attachments are recognized."""
    assert is_command_response(value) is True


@pytest.mark.parametrize(
    "value",
    [
        {},
        {"username": "bot"},
        None,
        "hello",
        b"hello",
        42,
        ["hello"],
        {"text": 5},
        {"text": None},
        {"attachments": "x"},
        {"attachments": {"text": "x"}},
        CommandResponse(username="bot"),
    ],
)
def test_not_recognized(value: object):
    """Everything else is not a structured response."""
    assert is_command_response(value) is False


# -- to_message_body --


def test_body_from_command_response():
    """A built response is dumped without unset fields."""
    response = CommandResponse(
        text="Deployed",
        attachments=[Attachment(text="v1.2.3", color="good", mrkdwn_in=["text"])],
    )
    assert to_message_body(response) == {
        "text": "Deployed",
        "attachments": [{"text": "v1.2.3", "color": "good", "mrkdwn_in": ["text"]}],
    }


def test_body_from_recognized_mapping():
    """A recognized mapping is validated and dumped."""
    body = to_message_body({"text": "hi", "mrkdwn": False, "response_type": "in_channel"})
    assert body == {"text": "hi", "mrkdwn": False, "response_type": "in_channel"}


def test_body_from_tuple_attachments():
    """Tuple attachments serialize as a JSON list."""
    body = to_message_body({"attachments": ({"fallback": "x"},)})
    assert body == {"attachments": [{"fallback": "x"}]}


def test_body_from_none():
    """None gives an empty body."""
    assert to_message_body(None) == {}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("hello", {"text": "hello"}),
        (42, {"text": "42"}),
        ({"username": "bot"}, {"text": "{'username': 'bot'}"}),
    ],
)
def test_body_wraps_other_values(value: object, expected: dict):
    """Unrecognized values are sent as plain text."""
    assert to_message_body(value) == expected


def test_body_invalid_attachments_raise():
    """A recognized mapping with malformed attachments raises ResponseShapeError."""
    with pytest.raises(ResponseShapeError) as exc_info:
        to_message_body({"attachments": [{"fields": [{"title": "missing value"}]}]})
    assert exc_info.value.__cause__ is not None
