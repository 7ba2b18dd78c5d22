"""
Structured decode adapters.

Decoding is modelled as a single capability, "accept next key/value pair"
(PairSink). decode_into() figures out the shape of the structured input and
feeds its pairs, in arrival order, to the sink. Nothing here knows about
pydantic or any other serialization framework.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Protocol
from urllib.parse import parse_qsl

from twilio_form.errors import FormatError

EXPECTING = "sequence of key and value pairs or map"


class PairSink(Protocol):
    """Receives decoded key/value pairs one at a time."""

    def add_pair(self, key: str, value: str) -> object: ...


def _require_text(item: Any, what: str) -> str:
    if not isinstance(item, str):
        raise FormatError(
            f"invalid type: {what} must be str, got {type(item).__name__}, expected {EXPECTING}"
        )
    return item


def iter_mapping(data: Mapping[Any, Any]) -> Iterator[tuple[str, str]]:
    for key, value in data.items():
        yield _require_text(key, "key"), _require_text(value, "value")


def iter_sequence(data: Iterable[Any]) -> Iterator[tuple[str, str]]:
    for index, element in enumerate(data):
        if isinstance(element, (str, bytes)) or not isinstance(element, (tuple, list)):
            raise FormatError(
                f"invalid element at index {index}: {element!r}, expected {EXPECTING}"
            )
        if len(element) != 2:
            raise FormatError(
                f"invalid length {len(element)} at index {index}, expected a (key, value) pair"
            )
        key, value = element
        yield _require_text(key, "key"), _require_text(value, "value")


def iter_encoded(data: str | bytes) -> Iterator[tuple[str, str]]:
    """Percent-decode an existing form-urlencoded string into pairs."""
    if isinstance(data, bytes):
        try:
            data = data.decode("ascii")
        except UnicodeDecodeError as e:
            raise FormatError(f"encoded form must be ASCII: {e}") from e
    yield from parse_qsl(data, keep_blank_values=True)


def iter_pairs(data: Any) -> Iterator[tuple[str, str]]:
    """Dispatch on the shape of data and yield its pairs in order."""
    if isinstance(data, Mapping):
        return iter_mapping(data)
    if isinstance(data, (str, bytes, bytearray)):
        return iter_encoded(bytes(data) if isinstance(data, bytearray) else data)
    if isinstance(data, Iterable):
        return iter_sequence(data)
    raise FormatError(f"invalid type: {type(data).__name__}, expected {EXPECTING}")


def decode_into(sink: PairSink, data: Any) -> PairSink:
    for key, value in iter_pairs(data):
        sink.add_pair(key, value)
    return sink
