"""Exceptions raised by jsonstream."""


class JsonStreamError(Exception):
    """Base class for jsonstream errors."""


class InvalidSinkError(JsonStreamError, TypeError):
    """The given sink is not an open, writable destination."""

    def __init__(self, sink: object, reason: str) -> None:
        super().__init__(f"Invalid sink {type(sink).__name__}: {reason}")
        self.sink = sink
        self.reason = reason


class SinkWriteError(JsonStreamError, OSError):
    """
    Delivering buffered output to the sink failed.

    The content of the failed flush is not retained by the writer.
    """
