"""
Billing errors.

Raised by the engine and the data loader. Statement generation is
all-or-nothing, so these propagate to the caller untouched.
"""
from enum import Enum
from pathlib import Path
from typing import Union


class ErrorCode(Enum):
    """Billing error codes."""

    PLAY_NOT_FOUND = "PLAY_NOT_FOUND"
    UNKNOWN_GENRE = "UNKNOWN_GENRE"
    INVALID_DATA = "INVALID_DATA"


class BillingError(Exception):
    """Base billing error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PlayNotFoundError(BillingError):
    """Raised when a performance references a play missing from the lookup."""

    def __init__(self, play_id: str):
        super().__init__(
            code=ErrorCode.PLAY_NOT_FOUND,
            message=f"Play '{play_id}' not found",
        )
        self.play_id = play_id


class UnknownGenreError(BillingError):
    """Raised when a play's type is not a recognized genre."""

    def __init__(self, genre: str, play_id: str = None):
        message = f"unknown type: {genre}"
        if play_id:
            message += f" (play '{play_id}')"
        super().__init__(code=ErrorCode.UNKNOWN_GENRE, message=message)
        self.genre = genre
        self.play_id = play_id


class DataLoadError(BillingError):
    """Raised when a plays or invoices file is malformed."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(
            code=ErrorCode.INVALID_DATA,
            message=f"{path}: {reason}",
        )
        self.path = str(path)
        self.reason = reason
