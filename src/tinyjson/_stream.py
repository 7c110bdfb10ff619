"""Codepoint stream with one symbol of lookahead over a decoded document."""

from typing import TypeAlias

from ._errors import EncodingError

Symbol: TypeAlias = str | None


def _decode(data: str | bytes | bytearray | memoryview) -> str:
    """Transcodes the whole input up front so bad bytes fail before parsing."""
    if isinstance(data, str):
        try:
            data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(
                "Invalid Unicode text: unpaired surrogate", data, e.start
            ) from e
        return data

    if not isinstance(data, bytes | bytearray | memoryview):
        msg = (
            "the JSON document must be str or bytes, "
            f"not {type(data).__name__}"
        )
        raise TypeError(msg)

    raw = bytes(data)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        # Report the position in symbols of the valid prefix
        prefix = raw[: e.start].decode("utf-8")
        raise EncodingError(
            f"Invalid UTF-8 byte 0x{raw[e.start]:02x}",
            raw.decode("utf-8", errors="replace"),
            len(prefix),
        ) from e


class CodepointStream:
    """
    Sequence of Unicode scalar values read one at a time.

    ``peek`` and ``advance`` return ``None`` once the input is exhausted.
    """

    def __init__(self, data: str | bytes | bytearray | memoryview) -> None:
        self.text = _decode(data)
        self.pos = 0
        self.length = len(self.text)

    def peek(self) -> Symbol:
        """Returns current symbol without advancing."""
        return self.text[self.pos] if self.pos < self.length else None

    def advance(self) -> Symbol:
        """Returns current symbol and advances position."""
        if self.pos < self.length:
            symbol = self.text[self.pos]
            self.pos += 1
            return symbol
        return None

    def at_end(self) -> bool:
        return self.pos >= self.length
