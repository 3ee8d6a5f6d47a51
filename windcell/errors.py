"""
Errors
======

Failures raised by cell loading and querying. Each carries structured
fields so callers can branch on the kind of problem instead of parsing
messages.
"""

from enum import Enum, auto
from typing import Optional


class WindCellError(Exception):
    """Base class for all wind cell errors."""


class DecodeError(WindCellError, ValueError):
    """A velocity encoding character outside the table."""

    def __init__(self, character: str, line: Optional[int] = None,
                 column: Optional[int] = None):
        self.character = character
        self.line = line
        self.column = column

        message = f"invalid encoding [{character}]"
        if line is not None:
            message += f" at line {line}"
            if column is not None:
                message += f" column {column}"
        super().__init__(message)


class FormatErrorKind(Enum):
    """Structural violations of a cell definition."""
    MALFORMED_ANCHOR = auto()   # Anchor line is not <int>,<int>
    MISSING_ROW = auto()        # Stream ended before all rows were read
    ROW_LENGTH = auto()         # Row is not exactly the expected length
    PLANE_DELIMITER = auto()    # Altitude planes not separated by a space
    COLUMN_COUNT = auto()       # Characters consumed differ from row length
    EXTRA_ROW = auto()          # Non-blank line after the last row


class FormatError(WindCellError, ValueError):
    """
    A cell definition that does not follow the format.

    Attributes:
        kind: Which rule was broken
        line: 1-based line number in the definition, when known
        expected: Expected count or length, when meaningful
        actual: Actual count or length, when meaningful
        character: Offending character, for delimiter errors
        text: Offending line text, for anchor errors
    """

    def __init__(self, kind: FormatErrorKind, line: Optional[int] = None,
                 expected: Optional[int] = None, actual: Optional[int] = None,
                 character: Optional[str] = None, text: Optional[str] = None):
        self.kind = kind
        self.line = line
        self.expected = expected
        self.actual = actual
        self.character = character
        self.text = text
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind is FormatErrorKind.MALFORMED_ANCHOR:
            return (f"invalid anchor format [{self.text}]; "
                    f"expected [latitude_degrees,longitude_degrees]")
        if self.kind is FormatErrorKind.MISSING_ROW:
            return f"invalid row count {self.actual}; expected {self.expected}"
        if self.kind is FormatErrorKind.ROW_LENGTH:
            return (f"invalid row length {self.actual} at line {self.line}; "
                    f"expected {self.expected}")
        if self.kind is FormatErrorKind.PLANE_DELIMITER:
            return (f"invalid altitude plane delimiter [{self.character}] at line "
                    f"{self.line}; expected space")
        if self.kind is FormatErrorKind.COLUMN_COUNT:
            return (f"invalid column count {self.actual} at line {self.line}; "
                    f"expected {self.expected}")
        return f"additional row(s) beyond expected {self.expected} at line {self.line}"


class UnsupportedCoordinateError(WindCellError):
    """A coordinate that does not lie on the queried cell."""

    def __init__(self, coordinate, anchor):
        self.coordinate = coordinate
        self.anchor = anchor
        super().__init__(f"coordinate {coordinate} not on cell {anchor}")
