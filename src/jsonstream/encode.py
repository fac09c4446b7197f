"""Streaming JSON encoder implementation."""

import io
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from .primitives import encode_key, encode_primitive, is_primitive
from .string_utils import quote_string
from .types import EncodeOptions, JsonSerializable
from .writer import Writer

logger = logging.getLogger(__name__)

# Never encoded as containers even though they are iterable
OPAQUE_TYPES = (io.IOBase, bytes, bytearray, memoryview)


def encode(value: Any, options: EncodeOptions | None = None) -> str:
    """
    Encode a Python value to a JSON string.

    Args:
        value: The value to encode.
        options: Encoding options.

    Returns:
        The JSON text.
    """
    return Encoder(options=options).encode(value)


def dump(value: Any, sink: Any, options: EncodeOptions | None = None) -> None:
    """
    Encode a Python value, streaming the JSON text into ``sink``.

    Args:
        value: The value to encode.
        sink: An open, writable text or binary stream.
        options: Encoding options.

    Raises:
        InvalidSinkError: If ``sink`` cannot be written to.
        SinkWriteError: If writing to ``sink`` fails.
    """
    Encoder(sink, options).encode(value)


def is_list_shaped(mapping: Mapping) -> bool:
    """
    Check if a mapping's keys are exactly 0, 1, ..., n-1 in iteration order.

    An empty mapping matches vacuously. Boolean keys never match.
    """
    for index, key in enumerate(mapping):
        if type(key) is bool or not isinstance(key, int) or key != index:
            return False
    return True


class Encoder:
    """
    Encode values as JSON, one token at a time, through a Writer.

    Args:
        sink: Optional open, writable stream. Without one, ``encode`` returns
            the complete JSON text.
        options: Encoding options.
        writer: An existing writer to encode through, instead of ``sink``.
            The writer keeps its own buffer size, so ``options.buffer_size``
            must be left unset.

    Raises:
        ValueError: If ``writer`` is combined with ``sink`` or with
            ``options.buffer_size``.
    """

    def __init__(
        self,
        sink: Any = None,
        options: EncodeOptions | None = None,
        *,
        writer: Writer | None = None,
    ) -> None:
        if writer is not None and sink is not None:
            raise ValueError("Pass either a sink or a writer, not both")

        self._options = options or EncodeOptions()
        if writer is not None and self._options.buffer_size is not None:
            raise ValueError("buffer_size has no effect on an existing writer")
        if writer is None:
            writer = Writer(sink, self._options.buffer_size)
        self._writer = writer

    @property
    def writer(self) -> Writer:
        return self._writer

    def encode(self, value: Any) -> str:
        """
        Encode a value and flush the writer.

        Returns:
            The complete JSON text without a sink, otherwise the last
            segment flushed to the sink.
        """
        try:
            self._encode(value)
        except BaseException:
            # Partial output must not leak into the next encode
            self._writer.discard()
            raise
        return self._writer.flush()

    def _encode(self, value: Any) -> None:
        value = _resolve_hook(value)
        write = self._writer.write

        if is_primitive(value):
            write(encode_primitive(value))
        elif isinstance(value, Mapping):
            if not value:
                write("[]" if self._options.empty_mapping == "array" else "{}")
            elif is_list_shaped(value):
                self._encode_list(value.values())
            else:
                self._encode_object(value)
        elif isinstance(value, OPAQUE_TYPES):
            logger.debug("Skipping unserializable %s", type(value).__name__)
        elif isinstance(value, Sequence):
            self._encode_list(value)
        elif isinstance(value, (set, frozenset)):
            self._encode_list(sorted(value, key=str))
        elif callable(getattr(value, "isoformat", None)) and not isinstance(value, type):
            # Dates and times
            write(quote_string(value.isoformat()))
        elif isinstance(value, Iterator):
            self._encode_list(value)
        else:
            logger.debug("Skipping unserializable %s", type(value).__name__)

    def _encode_list(self, items: Iterable) -> None:
        """Encode items as a JSON array."""
        write = self._writer.write
        write("[")

        first = True
        for item in items:
            if not first:
                write(",")
            first = False
            self._encode(item)

        write("]")

    def _encode_object(self, obj: Mapping) -> None:
        """Encode a mapping as a JSON object."""
        write = self._writer.write
        write("{")

        first = True
        for key, value in obj.items():
            if not first:
                write(",")
            first = False

            write(encode_key(key))
            write(":")
            self._encode(value)

        write("}")


def _resolve_hook(value: Any) -> Any:
    """Replace value by its json_serialize() result until no hook is left."""
    while isinstance(value, JsonSerializable) and not isinstance(value, type):
        replacement = value.json_serialize()
        if replacement is value:
            break
        value = replacement
    return value
