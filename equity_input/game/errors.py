"""Error type raised when an equity input is rejected."""

from typing import Any


class ValidationError(ValueError):
    """
    Raised when an input field is malformed or contradicts another field.

    Attributes:
        field: Caller-facing name of the offending field (e.g. ``"numPlayers"``)
        value: The rejected value
        reason: Human-readable description of the broken constraint
    """

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{reason} Invalid: {value!r}")
