"""
Recursive-descent JSON parser.

One method per production, each deciding from the single lookahead symbol of
the codepoint stream. Only an object or an array is accepted as a document.
The grammar is deliberately looser than RFC 8259 in a few places: leading
zeros are accepted, literals are case-insensitive, duplicate keys overwrite
earlier ones, commas between object members are separators that may be
repeated or left out, and raw control characters may appear inside strings.
"""

import logging
import re
import string
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from ._errors import DepthLimitExceeded
from ._errors import EncodingError
from ._errors import InvalidEscape
from ._errors import InvalidLiteral
from ._errors import NumberFormatError
from ._errors import ParseError
from ._errors import TrailingDataError
from ._errors import UnexpectedCharacter
from ._profile import ProfileContext
from ._scanner import WHITESPACE
from ._scanner import expect
from ._scanner import get_next_non_space
from ._scanner import peek_next_non_space
from ._scanner import scan_bare_token
from ._stream import CodepointStream
from ._value import INT64_MAX
from ._value import INT64_MIN
from ._value import Value

logger = logging.getLogger(__name__)

_BOM = "\ufeff"
_TRIM = "".join(WHITESPACE)
_NUMBER_START = frozenset("0123456789-.")
_BOOLEAN_START = frozenset("tTfF")
_NULL_START = frozenset("nN")
_INTEGER_CHARS = frozenset("0123456789-")
_HEX_DIGITS = frozenset(string.hexdigits)

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Decimal strtod grammar; hex floats, inf and nan are not numbers here
_DOUBLE_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``max_depth`` bounds how many objects and arrays may be open at once;
    ``None`` leaves the bound to the interpreter's recursion limit.
    """

    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is None:
            return
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer or None")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")


class JsonParser:
    """
    Parses one document from a codepoint stream into a Value tree.

    The first error aborts the whole parse; no partial tree is returned.
    """

    def __init__(
        self, stream: CodepointStream, config: ParseConfig | None = None
    ) -> None:
        self.stream = stream
        self.config = config or ParseConfig()
        self.depth = 0

    def _fail(
        self,
        error: type[ParseError],
        msg: str,
        pos: int | None = None,
    ) -> ParseError:
        return error(
            msg, self.stream.text, self.stream.pos if pos is None else pos
        )

    @contextmanager
    def _nested(self) -> Iterator[None]:
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth >= max_depth:
            raise self._fail(
                DepthLimitExceeded, f"Nesting deeper than {max_depth} levels"
            )
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def parse_document(self) -> Value:
        """Parses a top-level object or array and rejects anything after it."""
        with ProfileContext("parse_document", self.stream.length):
            symbol = peek_next_non_space(self.stream)
            if symbol == "{":
                result = self.parse_object()
            elif symbol == "[":
                result = self.parse_array()
            elif symbol == _BOM:
                raise self._fail(
                    UnexpectedCharacter,
                    "JSON input should not contain BOM (Byte Order Mark)",
                )
            elif symbol is None:
                raise self._fail(
                    UnexpectedCharacter,
                    "Expecting object or array, found end of input",
                )
            else:
                raise self._fail(
                    UnexpectedCharacter,
                    f"Expecting object or array, found {symbol!r}",
                )

            if peek_next_non_space(self.stream) is not None:
                raise self._fail(TrailingDataError, "Extra data")
            return result

    def parse_value(self) -> Value:
        """Dispatches on the next non-space symbol."""
        symbol = peek_next_non_space(self.stream)
        if symbol == '"':
            return self.parse_string()
        elif symbol == "[":
            return self.parse_array()
        elif symbol == "{":
            return self.parse_object()
        elif symbol is None:
            raise self._fail(
                UnexpectedCharacter, "Expecting value, found end of input"
            )
        elif symbol in _NUMBER_START:
            return self.parse_number()
        elif symbol in _BOOLEAN_START:
            return self.parse_bool()
        elif symbol in _NULL_START:
            return self.parse_null()
        else:
            raise self._fail(
                UnexpectedCharacter, f"Expecting value, found {symbol!r}"
            )

    def parse_object(self) -> Value:
        """Parses ``{ "key": value, ... }``; later duplicate keys win."""
        with ProfileContext("parse_object"), self._nested():
            result = Value.object()
            expect(self.stream, "{")

            symbol = peek_next_non_space(self.stream)
            while symbol != "}":
                if symbol == '"':
                    key = self.parse_member()
                    expect(self.stream, ":")
                    result._adopt_member(key, self.parse_value())
                elif symbol == ",":
                    get_next_non_space(self.stream)
                    if peek_next_non_space(self.stream) == "}":
                        raise self._fail(
                            UnexpectedCharacter,
                            "Expecting property name after ','",
                        )
                elif symbol is None:
                    raise self._fail(
                        UnexpectedCharacter,
                        "Expecting '}', found end of input",
                    )
                else:
                    raise self._fail(
                        UnexpectedCharacter,
                        "Expecting property name enclosed in double quotes",
                    )
                symbol = peek_next_non_space(self.stream)

            expect(self.stream, "}")
            return result

    def parse_array(self) -> Value:
        """Parses ``[ value, ... ]``."""
        with ProfileContext("parse_array"), self._nested():
            result = Value.array()
            expect(self.stream, "[")

            if peek_next_non_space(self.stream) == "]":
                get_next_non_space(self.stream)
                return result

            while True:
                result._adopt_element(self.parse_value())
                symbol = peek_next_non_space(self.stream)
                if symbol == ",":
                    get_next_non_space(self.stream)
                elif symbol == "]" or symbol is None:
                    break
                else:
                    raise self._fail(
                        UnexpectedCharacter, "Expecting ',' or ']' delimiter"
                    )

            expect(self.stream, "]")
            return result

    def _scan_quoted(self) -> str:
        start = self.stream.pos
        expect(self.stream, '"')

        chars: list[str] = []
        symbol = self.stream.peek()
        while symbol is not None and symbol != '"':
            if symbol == "\\":
                chars.append(self.parse_escape())
            else:
                chars.append(symbol)
                self.stream.advance()
            symbol = self.stream.peek()

        if symbol is None:
            raise self._fail(
                UnexpectedCharacter, "Unterminated string", start
            )
        expect(self.stream, '"')

        text = "".join(chars)
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            code_point = ord(text[e.start])
            raise self._fail(
                EncodingError,
                f"Escape yields unpaired surrogate U+{code_point:04X}",
                start,
            ) from e
        return text

    def parse_member(self) -> str:
        """Parses an object key."""
        return self._scan_quoted()

    def parse_string(self) -> Value:
        with ProfileContext("parse_string"):
            return Value.string(self._scan_quoted())

    def parse_escape(self) -> str:
        """Decodes one backslash escape, starting at the backslash."""
        start = self.stream.pos
        expect(self.stream, "\\")
        symbol = self.stream.advance()
        if symbol is None:
            raise self._fail(
                InvalidEscape, "Unterminated escape sequence", start
            )
        if symbol in _ESCAPES:
            return _ESCAPES[symbol]
        if symbol == "u":
            return self.parse_hex()
        raise self._fail(
            InvalidEscape, f"Invalid escape sequence: \\{symbol}", start
        )

    def parse_hex(self) -> str:
        """Reads exactly four hex digits and returns that code point."""
        start = self.stream.pos
        digits: list[str] = []
        for _ in range(4):
            symbol = self.stream.advance()
            if symbol is None or symbol not in _HEX_DIGITS:
                raise self._fail(
                    InvalidEscape,
                    f"Invalid unicode escape sequence: \\u{''.join(digits)}",
                    start,
                )
            digits.append(symbol)
        return chr(int("".join(digits), 16))

    def _scan_literal(self) -> tuple[str, int]:
        skip_start = self.stream.pos
        raw = scan_bare_token(self.stream)
        token = raw.strip(_TRIM)
        return token, skip_start + (len(raw) - len(raw.lstrip(_TRIM)))

    def parse_bool(self) -> Value:
        with ProfileContext("parse_bool"):
            token, start = self._scan_literal()
            lowered = token.lower()
            if lowered == "true":
                return Value.boolean(True)
            if lowered == "false":
                return Value.boolean(False)
            raise self._fail(
                InvalidLiteral, f"Invalid boolean literal: {token!r}", start
            )

    def parse_null(self) -> Value:
        with ProfileContext("parse_null"):
            token, start = self._scan_literal()
            if token.lower() == "null":
                return Value.null()
            raise self._fail(
                InvalidLiteral, f"Invalid null literal: {token!r}", start
            )

    def parse_number(self) -> Value:
        """
        Parses a number, classifying it as INTEGER or DOUBLE.

        Text made only of digits and ``-`` must convert in full to a signed
        64-bit integer; anything else must convert in full to a double.
        """
        with ProfileContext("parse_number"):
            token, start = self._scan_literal()

            if all(c in _INTEGER_CHARS for c in token):
                try:
                    number = int(token)
                except ValueError as e:
                    raise self._fail(
                        NumberFormatError,
                        f"Invalid integer: {token!r}",
                        start,
                    ) from e
                if not INT64_MIN <= number <= INT64_MAX:
                    raise self._fail(
                        NumberFormatError,
                        f"Integer out of 64-bit range: {token}",
                        start,
                    )
                return Value.integer(number)

            if _DOUBLE_PATTERN.fullmatch(token) is None:
                raise self._fail(
                    NumberFormatError, f"Invalid number: {token!r}", start
                )
            number = float(token)
            if number in (float("inf"), float("-inf")):
                raise self._fail(
                    NumberFormatError,
                    f"Number out of double range: {token}",
                    start,
                )
            return Value.double(number)


def parse(
    text: str | bytes | bytearray | memoryview, **kwargs: object
) -> Value:
    """
    Parses a JSON document into a Value tree.

    Accepts ``str`` or UTF-8 bytes. Keyword arguments build a ``ParseConfig``.
    """
    config = ParseConfig(**kwargs)  # type: ignore[arg-type]
    try:
        stream = CodepointStream(text)
        return JsonParser(stream, config).parse_document()
    except ParseError as e:
        logger.debug("parse failed: %s", e)
        raise
