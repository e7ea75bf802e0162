from .constants import INVULNERABILITY_MAP
from .container import (
    Container,
    DirectoryEntry,
    WadHeader,
    WadType,
    open_wad,
    read_header,
)
from .cursor import ByteCursor
from .errors import (
    WadError,
    UnrecognizedFormatError,
    TruncatedInputError,
    TruncatedDirectoryError,
    TrailingDataError,
    InvalidLengthError,
    OutOfBoundsError,
    InvalidCharacterError,
    SizeMismatchError,
    IoFailureError,
    VirtualLumpError,
)
from .names import FixedString

__all__ = [
    "INVULNERABILITY_MAP",
    "ByteCursor",
    "FixedString",
    "Container",
    "DirectoryEntry",
    "WadHeader",
    "WadType",
    "open_wad",
    "read_header",
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
]
