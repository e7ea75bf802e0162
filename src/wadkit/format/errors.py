"""Error definitions for wadkit.

Every decode failure is a ``WadError`` carrying a stable code, a message and
optional context (offsets, sizes, indices) for reporters.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_UNRECOGNIZED_FORMAT = "E_UNRECOGNIZED_FORMAT"
E_TRUNCATED_INPUT = "E_TRUNCATED_INPUT"
E_TRUNCATED_DIRECTORY = "E_TRUNCATED_DIRECTORY"
E_TRAILING_DATA = "E_TRAILING_DATA"
E_INVALID_LENGTH = "E_INVALID_LENGTH"
E_OUT_OF_BOUNDS = "E_OUT_OF_BOUNDS"
E_INVALID_CHARACTER = "E_INVALID_CHARACTER"
E_SIZE_MISMATCH = "E_SIZE_MISMATCH"
E_IO_FAILURE = "E_IO_FAILURE"
E_VIRTUAL_LUMP = "E_VIRTUAL_LUMP"
E_INTERNAL = "E_INTERNAL"


@dataclass
class WadError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class _CodedError(WadError):
    CODE = E_INTERNAL

    def __init__(
        self, message: str, context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(code=self.CODE, message=message, context=context)


class UnrecognizedFormatError(_CodedError):
    CODE = E_UNRECOGNIZED_FORMAT


class TruncatedInputError(_CodedError):
    CODE = E_TRUNCATED_INPUT


class TruncatedDirectoryError(_CodedError):
    CODE = E_TRUNCATED_DIRECTORY


class TrailingDataError(_CodedError):
    CODE = E_TRAILING_DATA


class InvalidLengthError(_CodedError):
    CODE = E_INVALID_LENGTH


class OutOfBoundsError(_CodedError):
    CODE = E_OUT_OF_BOUNDS


class InvalidCharacterError(_CodedError):
    CODE = E_INVALID_CHARACTER


class SizeMismatchError(_CodedError):
    CODE = E_SIZE_MISMATCH


class IoFailureError(_CodedError):
    CODE = E_IO_FAILURE


class VirtualLumpError(_CodedError):
    CODE = E_VIRTUAL_LUMP


__all__ = [
    "WadError",
    "UnrecognizedFormatError",
    "TruncatedInputError",
    "TruncatedDirectoryError",
    "TrailingDataError",
    "InvalidLengthError",
    "OutOfBoundsError",
    "InvalidCharacterError",
    "SizeMismatchError",
    "IoFailureError",
    "VirtualLumpError",
    "E_UNRECOGNIZED_FORMAT",
    "E_TRUNCATED_INPUT",
    "E_TRUNCATED_DIRECTORY",
    "E_TRAILING_DATA",
    "E_INVALID_LENGTH",
    "E_OUT_OF_BOUNDS",
    "E_INVALID_CHARACTER",
    "E_SIZE_MISMATCH",
    "E_IO_FAILURE",
    "E_VIRTUAL_LUMP",
    "E_INTERNAL",
]
