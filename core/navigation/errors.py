from __future__ import annotations

from enum import Enum


class DecodeFailure(Enum):
    UNKNOWN_TAG = "unknown_tag"
    ARITY_MISMATCH = "arity_mismatch"
    FIELD_PARSE_FAILURE = "field_parse_failure"


class NavigationError(Exception):
    pass


class EncodingError(NavigationError):
    pass


class DecodeError(NavigationError):
    def __init__(self, reason: DecodeFailure, token: str, detail: str = "") -> None:
        self.reason = reason
        self.token = token
        self.detail = detail
        message = f"{reason.value}: {token!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


__all__ = ["DecodeError", "DecodeFailure", "EncodingError", "NavigationError"]
