"""Session brief error types."""

from __future__ import annotations

from enum import Enum


class SessionBriefErrorCode(Enum):
    """Error classification codes."""

    EMPTY_SOURCE = "empty_source"
    NOT_FOUND = "not_found"
    MALFORMED_INPUT = "malformed_input"
    INSUFFICIENT_DATA = "insufficient_data"
    VALIDATION_FAILED = "validation_failed"


class SessionBriefError(Exception):
    """Session brief exception with an error code.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
    """

    def __init__(
        self,
        message: str,
        code: SessionBriefErrorCode = SessionBriefErrorCode.MALFORMED_INPUT,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
