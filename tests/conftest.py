"""Shared test fixtures."""

import pytest


@pytest.fixture
def command_fields() -> dict[str, str]:
    """A decoded slash command field bag as Slack sends it."""
    return {
        "token": "gIkuvaNzQIHg97ATvDxqgjtO",
        "team_id": "T0001",
        "team_domain": "example",
        "enterprise_id": "E0001",
        "enterprise_name": "Globular Construct Inc",
        "channel_id": "C2",
        "channel_name": "eng",
        "user_id": "U9",
        "user_name": "carol",
        "command": "/weather",
        "text": "94070 <@U2|bob>",
        "response_url": "https://hooks.slack.com/commands/1234/5678",
        "trigger_id": "13345224609.738474920.8088930838d88f008e0",
    }
