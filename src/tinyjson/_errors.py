"""
Error taxonomy for parsing and value access.

Parse failures carry the document, the symbol position and the derived
line/column so callers can point at the offending input. Value access
failures double as the matching builtin exception types.
"""

from typing import Any
from typing import TypeAlias

Position: TypeAlias = int


class TinyJsonError(Exception):
    """Base class for every error the library raises deliberately."""


class ParseError(TinyJsonError, ValueError):
    """
    Handles JSON parsing failures with precise position and context.

    Error state containing position, line/column numbers, and surrounding
    context to help users identify and fix JSON syntax issues.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @property
    def byte_pos(self) -> Position:
        """UTF-8 byte offset of ``pos`` within the document."""
        return len(self.doc[: self.pos].encode("utf-8", "surrogatepass"))

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.msg, self.doc, self.pos)


class EncodingError(ParseError):
    """Input is not valid Unicode text."""


class UnexpectedCharacter(ParseError):
    """A structural symbol did not match what the grammar expects."""


class TrailingDataError(ParseError):
    """Non-whitespace content follows the top-level value."""


class InvalidEscape(ParseError):
    """A backslash escape inside a string is malformed."""


class InvalidLiteral(ParseError):
    """Text in boolean or null position is not a recognised literal."""


class NumberFormatError(ParseError):
    """Numeric text does not convert in full."""


class DepthLimitExceeded(ParseError):
    """Nesting is deeper than the configured ``max_depth``."""


class TypeMismatch(TinyJsonError, TypeError):
    """An accessor or mutator was invoked on the wrong kind of value."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected type {expected}, but found type {actual}")


class KeyNotFound(TinyJsonError, KeyError):
    """Keyed access on an object that has no such member."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key {self.key!r} not found"


class IndexOutOfRange(TinyJsonError, IndexError):
    """Indexed access outside ``0..size-1``."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(
            f"index {index} out of range for array of size {size}"
        )
