"""
Scanning primitives shared by every sub-parser.

All of them are stateless: the only state is the stream's position, and no
primitive inspects more than the single buffered lookahead symbol.
"""

from ._errors import UnexpectedCharacter
from ._stream import CodepointStream
from ._stream import Symbol

WHITESPACE = frozenset(" \t\r\n")
DELIMITERS = frozenset(",]}")


def skip_space(stream: CodepointStream) -> None:
    """Skips whitespace characters according to JSON spec."""
    symbol = stream.peek()
    while symbol is not None and symbol in WHITESPACE:
        stream.advance()
        symbol = stream.peek()


def peek_next_non_space(stream: CodepointStream) -> Symbol:
    skip_space(stream)
    return stream.peek()


def get_next_non_space(stream: CodepointStream) -> Symbol:
    skip_space(stream)
    return stream.advance()


def expect(stream: CodepointStream, symbol: str) -> None:
    """Consumes ``symbol`` after optional whitespace or fails."""
    found = peek_next_non_space(stream)
    if found != symbol:
        if found is None:
            msg = f"Expecting '{symbol}', found end of input"
        else:
            msg = f"Expecting '{symbol}', found {found!r}"
        raise UnexpectedCharacter(msg, stream.text, stream.pos)
    stream.advance()


def scan_bare_token(stream: CodepointStream) -> str:
    """
    Consumes symbols up to the next ``,``, ``]``, ``}`` or end of input.

    Used for numbers and literals, whose extent is decided by the next
    structural delimiter rather than by their own grammar.
    """
    symbols: list[str] = []
    symbol = stream.peek()
    while symbol is not None and symbol not in DELIMITERS:
        symbols.append(symbol)
        stream.advance()
        symbol = stream.peek()
    return "".join(symbols)
