"""
application/x-www-form-urlencoded pair encoding.

One routine, write_pair, encodes a key/value pair into any sink that has a
write(str) method. The byte buffer used by TwilioRequest and the text
stream used for display strings are both just sinks of that routine, so
the two targets cannot drift apart.
"""

from typing import Protocol
from urllib.parse import quote_plus

SEP = "&"
EQ = "="


class TextSink(Protocol):
    """Anything accepting encoded text."""

    def write(self, text: str) -> object: ...


class BufferSink:
    """Adapts a growable bytearray to the TextSink protocol.

    Encoded text is pure ASCII, so the byte and text forms are identical.
    """

    __slots__ = ("_buffer",)

    def __init__(self, buffer: bytearray) -> None:
        self._buffer = buffer

    def write(self, text: str) -> int:
        self._buffer += text.encode("ascii")
        return len(text)


def encode_component(text: str) -> str:
    """Form-urlencode the UTF-8 bytes of text.

    A-Z a-z 0-9 - _ . ~ pass through, space becomes '+', every other byte
    becomes %XX with upper-case hex. Text that is not valid Unicode (a lone
    surrogate) cannot be UTF-8 encoded; such code points are replaced with
    '?' and sent as %3F.
    """
    return quote_plus(text, safe="", encoding="utf-8", errors="replace")


def write_pair(sink: TextSink, key: str, value: str) -> None:
    """Write `key=value`, both encoded, without any separator."""
    sink.write(encode_component(key))
    sink.write(EQ)
    sink.write(encode_component(value))


def push_pair(key: str, value: str, out: bytearray) -> None:
    """Append an encoded pair to out, preceded by '&' unless out is empty."""
    if out:
        out += SEP.encode("ascii")
    write_pair(BufferSink(out), key, value)


def format_pair(key: str, value: str, stream: TextSink) -> None:
    """Stream an encoded pair to a text sink (e.g. io.StringIO).

    The caller owns separator placement.
    """
    write_pair(stream, key, value)
