"""Exception hierarchy for slack_command."""


class SlackCommandError(Exception):
    """Base class for all slack_command errors."""


class ExpectedError(SlackCommandError):
    """A failure caused by user input, meant to be reported back to the command issuer."""


class MentionFormatError(ExpectedError, ValueError):
    """Raised when text is not a valid escaped mention of the requested kind."""

    def __init__(self, text: str, kind: str) -> None:
        self.text = text
        self.kind = kind
        super().__init__(f'"{text}" is not a valid escaped slack {kind}')


class ResponseShapeError(SlackCommandError):
    """Raised when a recognized response payload cannot be validated for serialization."""
