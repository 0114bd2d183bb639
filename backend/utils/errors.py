"""
Error Kinds and Formatting

Symbolic play validation errors and consistent formatting for API responses.

- PlayError: kinds a play can be rejected with
- format_api_error(kind, message): Convert to API error detail
"""

from enum import Enum


class PlayError(str, Enum):
    """Reasons a proposed play is rejected."""

    BET_NOT_VALID = "BET_NOT_VALID"
    BET_NOT_VALID_MIN = "BET_NOT_VALID_MIN"
    BET_NOT_VALID_MAX = "BET_NOT_VALID_MAX"
    CHOICE_NOT_VALID = "CHOICE_NOT_VALID"
    BET_CLOSED = "BET_CLOSED"


def format_api_error(kind: PlayError, message: str) -> dict[str, str]:
    return {"code": kind.value, "message": message}
