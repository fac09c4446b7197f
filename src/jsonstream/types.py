"""Type definitions for the jsonstream encoder and writer."""

from dataclasses import dataclass
from typing import Any, Final, Literal, Protocol, runtime_checkable

# JSON type aliases
JsonPrimitive = str | int | float | bool | None
JsonArray = list["JsonValue"]
JsonObject = dict[str, "JsonValue"]
JsonValue = JsonPrimitive | JsonArray | JsonObject

# Empty mapping policy
EmptyMapping = Literal["object", "array"]

# Buffer thresholds, counted in write calls rather than bytes
DEFAULT_BUFFER_SIZE: Final[int] = 32
MANUAL_FLUSH: Final[int] = 0
UNBUFFERED: Final[int] = 1


@runtime_checkable
class JsonSerializable(Protocol):
    """An object that supplies a substitute value to encode in its place."""

    def json_serialize(self) -> Any:
        ...


@dataclass
class EncodeOptions:
    """Options for JSON encoding."""

    buffer_size: int | None = None
    """Writes buffered before an automatic flush to the sink.

    None picks DEFAULT_BUFFER_SIZE when a sink is given and no limit otherwise.
    MANUAL_FLUSH (0) disables automatic flushing, UNBUFFERED (1) flushes on
    every write.
    """

    empty_mapping: EmptyMapping = "object"
    """How an empty mapping is written: "object" gives {}, "array" gives []."""

    def __post_init__(self) -> None:
        if self.buffer_size is not None and self.buffer_size < 0:
            raise ValueError(f"buffer_size must not be negative: {self.buffer_size}")
        if self.empty_mapping not in ("object", "array"):
            raise ValueError(f"Unknown empty_mapping policy: {self.empty_mapping!r}")
