"""
Domain errors raised by the tracker

Missing records are not errors here: lookups return None and mutations on
an unknown id do nothing.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Stable error codes surfaced to callers"""
    SESSION_DATA_TYPE_MISMATCH = "SESSION_DATA_TYPE_MISMATCH"
    UNSUPPORTED_SESSION_VALUE = "UNSUPPORTED_SESSION_VALUE"
    VALIDATION_FAILED = "VALIDATION_FAILED"


class DomainError(Exception):
    """Base error with a code and a user-safe message"""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message, "error_code": self.code.value}


class SessionDataTypeError(DomainError, TypeError):
    """Stored session value does not have the kind the caller asked for"""

    def __init__(self, key: str, expected: str, actual: str):
        super().__init__(
            ErrorCode.SESSION_DATA_TYPE_MISMATCH,
            f"Session value '{key}' is {actual}, not {expected}",
        )
        self.key = key
        self.expected = expected
        self.actual = actual


class UnsupportedSessionValueError(DomainError, TypeError):
    """Value cannot be stored in the session data bag"""

    def __init__(self, value_type: type):
        super().__init__(
            ErrorCode.UNSUPPORTED_SESSION_VALUE,
            f"Cannot store values of type {value_type.__name__} in session data",
        )
        self.value_type = value_type


class RecordValidationError(DomainError, ValueError):
    """Input rejected before it reaches the record store"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(ErrorCode.VALIDATION_FAILED, message)
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["details"] = self.errors
        return data
