"""Buffered writer that delivers encoded fragments to a sink."""

import io
import logging
from types import TracebackType
from typing import Any

from .errors import InvalidSinkError, SinkWriteError
from .types import DEFAULT_BUFFER_SIZE

logger = logging.getLogger(__name__)


class Writer:
    """
    Accumulate text fragments and push them to a sink in batches.

    The buffer is bounded by the number of ``write`` calls, not by byte size.
    Without a sink the writer keeps everything until ``flush`` returns it.

    Args:
        sink: An open, writable stream. Text streams receive ``str``; any
            other stream receives UTF-8 encoded ``bytes``.
        buffer_size: Writes buffered before an automatic flush. None picks
            a default when a sink is given and no limit otherwise; 0 disables
            automatic flushing.

    Raises:
        InvalidSinkError: If ``sink`` cannot be written to.
        ValueError: If ``buffer_size`` is negative.
    """

    def __init__(self, sink: Any = None, buffer_size: int | None = None) -> None:
        if sink is not None:
            _check_sink(sink)
        if buffer_size is not None and buffer_size < 0:
            raise ValueError(f"buffer_size must not be negative: {buffer_size}")

        self._sink = sink
        self._text_sink = isinstance(sink, io.TextIOBase)
        self._buffer: list[str] = []

        if buffer_size is None and sink is not None:
            buffer_size = DEFAULT_BUFFER_SIZE
        self._buffer_size = buffer_size

    @property
    def sink(self) -> Any:
        return self._sink

    @property
    def buffer_size(self) -> int | None:
        """Effective flush threshold; None means unbounded."""
        return self._buffer_size

    @property
    def pending(self) -> int:
        """Number of writes buffered since the last flush."""
        return len(self._buffer)

    def write(self, fragment: object) -> None:
        """Buffer a fragment, flushing to the sink once the threshold is hit."""
        self._buffer.append(str(fragment))

        if (
            self._sink is not None
            and self._buffer_size
            and len(self._buffer) >= self._buffer_size
        ):
            self.flush()

    def flush(self) -> str:
        """
        Empty the buffer.

        With a sink the content is written in a single call; an empty buffer
        makes no call at all. Without a sink the content is only returned.

        Returns:
            The text that was buffered.

        Raises:
            SinkWriteError: If the sink fails or accepts only part of the data.
        """
        entries = len(self._buffer)
        content = "".join(self._buffer)
        self._buffer = []

        if self._sink is not None and content:
            logger.debug("Flushing %d entries (%d chars) to sink", entries, len(content))
            self._deliver(content)
        return content

    def _deliver(self, content: str) -> None:
        data: str | bytes = content if self._text_sink else content.encode("utf-8")
        try:
            written = self._sink.write(data)
        except (OSError, ValueError, TypeError) as exc:
            # TypeError: a text-only sink that was not detected as one
            raise SinkWriteError(f"Failed to write to sink: {exc}") from exc

        # Non-blocking raw streams return None when nothing was accepted
        if written is None and isinstance(self._sink, io.RawIOBase):
            raise SinkWriteError(f"Sink accepted none of {len(data)} bytes")

        # Raw binary streams may accept fewer bytes than given
        if isinstance(written, int) and not isinstance(written, bool) and written < len(data):
            raise SinkWriteError(f"Short write to sink: {written} of {len(data)} written")

    def discard(self) -> None:
        """Drop buffered content without delivering it."""
        self._buffer = []

    def __enter__(self) -> "Writer":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.flush()
        else:
            self.discard()


def _check_sink(sink: Any) -> None:
    """Raise InvalidSinkError unless sink is an open, writable stream."""
    if not callable(getattr(sink, "write", None)):
        raise InvalidSinkError(sink, "no write() method")

    if getattr(sink, "closed", False) is True:
        raise InvalidSinkError(sink, "stream is closed")

    writable = getattr(sink, "writable", None)
    if callable(writable):
        try:
            ok = writable()
        except (OSError, ValueError):
            ok = False
        if not ok:
            raise InvalidSinkError(sink, "stream is not writable")
