"""
jsonstream - Streaming JSON encoder for Python

Encodes Python values to JSON while writing the output to a stream in
batches, so large structures never have to exist as one string in memory.

Usage:
    import jsonstream

    # Encode to a string
    data = {"name": "Alice", "tags": ["a", "b"]}
    encoded = jsonstream.encode(data)

    # Stream into an open file
    with open("out.json", "wb") as fh:
        jsonstream.dump(data, fh)

    # With options
    from jsonstream import EncodeOptions, Encoder

    encoder = Encoder(fh, EncodeOptions(buffer_size=64, empty_mapping="array"))
    encoder.encode(data)
"""

__version__ = "1.0.0"

from .encode import Encoder, dump, encode, is_list_shaped
from .errors import InvalidSinkError, JsonStreamError, SinkWriteError
from .types import (
    DEFAULT_BUFFER_SIZE,
    MANUAL_FLUSH,
    UNBUFFERED,
    EncodeOptions,
    JsonSerializable,
    JsonValue,
)
from .writer import Writer

__all__ = [
    # Version
    "__version__",
    # Main API
    "encode",
    "dump",
    "Encoder",
    "Writer",
    "is_list_shaped",
    # Options
    "EncodeOptions",
    "DEFAULT_BUFFER_SIZE",
    "MANUAL_FLUSH",
    "UNBUFFERED",
    # Types
    "JsonValue",
    "JsonSerializable",
    # Errors
    "JsonStreamError",
    "InvalidSinkError",
    "SinkWriteError",
]
