from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_FILTER_NAME = "INVALID_FILTER_NAME"
    FILTER_ALREADY_REGISTERED = "FILTER_ALREADY_REGISTERED"
    FILTER_NOT_FOUND = "FILTER_NOT_FOUND"


class TocFilterError(Exception):
    """Raised while wiring filters into a template host.

    The ``toc`` filter itself never raises; only registration does.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
            }
        }
