"""
Output utilities for writing rendered markup to streams.
"""
import io
from typing import IO, Optional, Union

from svg_builder.utils.logger import get_logger

logger = get_logger(__name__)

OUTPUT_ENCODING = "utf-8"

Sink = Union[IO[str], IO[bytes]]


def is_binary_sink(sink: Sink) -> bool:
    """
    Decide whether a sink expects bytes.

    Text streams (io.TextIOBase) take str. Raw and buffered streams, and
    file-like objects opened in a "b" mode (e.g. SpooledTemporaryFile),
    take bytes. Any other object with a write method is treated as text.

    Args:
        sink: Writable stream or file-like object

    Returns:
        True if the sink should receive bytes
    """
    if isinstance(sink, io.TextIOBase):
        return False
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return 'b' in str(getattr(sink, 'mode', ''))


def write_markup(sink: Sink, markup: str, binary: Optional[bool] = None) -> None:
    """
    Write markup to a sink, encoding it for binary sinks.

    Short writes are retried with the remaining data until everything
    is written. A write that accepts nothing raises OSError. Apart from
    raw streams, sinks whose write returns None are taken to have written
    everything.

    Args:
        sink: Writable stream or file-like object
        markup: Text to write
        binary: Whether the sink takes bytes (detected when None)

    Raises:
        OSError: If the sink fails or stops accepting data
    """
    if binary is None:
        binary = is_binary_sink(sink)

    data = markup.encode(OUTPUT_ENCODING) if binary else markup

    while len(data):
        written = sink.write(data)
        if written is None and isinstance(sink, io.RawIOBase):
            # Non-blocking raw stream that could not take any data
            raise BlockingIOError(f"Sink would block with {len(data)} items left to write")
        if not isinstance(written, int) or written >= len(data):
            return
        if written <= 0:
            raise OSError(f"Sink accepted no data with {len(data)} items left to write")
        logger.debug(f"Short write: {written} of {len(data)} written, retrying")
        data = data[written:]
