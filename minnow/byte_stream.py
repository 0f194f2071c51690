"""A bounded in-memory byte stream with separate writer and reader views."""

from __future__ import annotations

__all__ = ["ByteStream", "Reader", "Writer", "read"]


class ByteStream:
    """A flow-controlled byte pipe holding at most ``capacity`` unread bytes.

    Bytes go in through :meth:`writer` and come out through :meth:`reader`.
    Both views share this object's state.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._error = False
        self._closed = False
        self._buffer = bytearray()
        self._bytes_popped = 0
        self._bytes_pushed = 0
        self._reader = Reader(self)
        self._writer = Writer(self)

    def reader(self) -> Reader:
        """Return the reading view of this stream."""
        return self._reader

    def writer(self) -> Writer:
        """Return the writing view of this stream."""
        return self._writer

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        """Whether the stream has had an error."""
        return self._error

    def __repr__(self) -> str:
        return (
            f"ByteStream(capacity={self.capacity}, buffered={len(self._buffer)}, "
            f"closed={self._closed}, error={self._error})"
        )


class _View:
    __slots__ = ("_stream",)

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream


class Writer(_View):
    """The writing end of a :class:`ByteStream`."""

    __slots__ = ()

    def push(self, data: bytes | bytearray | memoryview) -> None:
        """Append as much of ``data`` as the available capacity allows.

        Pushing to a closed stream does nothing.
        """
        stream = self._stream
        if stream._closed:
            return
        count = min(len(data), self.available_capacity())
        stream._buffer.extend(memoryview(data)[:count])
        stream._bytes_pushed += count

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._stream._closed = True

    def is_closed(self) -> bool:
        """Whether the stream has been closed."""
        return self._stream._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self._stream.capacity - len(self._stream._buffer)

    def bytes_pushed(self) -> int:
        """Total number of bytes pushed so far."""
        return self._stream._bytes_pushed

    def set_error(self) -> None:
        """Mark the underlying stream as having suffered an error."""
        self._stream.set_error()

    def has_error(self) -> bool:
        """Whether the underlying stream has had an error."""
        return self._stream.has_error()


class Reader(_View):
    """The reading end of a :class:`ByteStream`."""

    __slots__ = ()

    def peek(self) -> bytes:
        """Return every buffered byte without removing it."""
        return bytes(self._stream._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must be non-negative")
        stream = self._stream
        count = min(length, len(stream._buffer))
        del stream._buffer[:count]
        stream._bytes_popped += count

    def is_finished(self) -> bool:
        """Whether the stream is closed and fully drained."""
        return self._stream._closed and not self._stream._buffer

    def bytes_buffered(self) -> int:
        """Number of bytes pushed but not yet popped."""
        return len(self._stream._buffer)

    def bytes_popped(self) -> int:
        """Total number of bytes popped so far."""
        return self._stream._bytes_popped

    def set_error(self) -> None:
        """Mark the underlying stream as having suffered an error."""
        self._stream.set_error()

    def has_error(self) -> bool:
        """Whether the underlying stream has had an error."""
        return self._stream.has_error()


def read(reader: Reader, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``reader`` and return them."""
    out = bytearray()
    while reader.bytes_buffered() and len(out) < max_len:
        view = reader.peek()
        if not view:
            raise RuntimeError("Reader.peek() returned no bytes")
        chunk = view[: max_len - len(out)]
        out += chunk
        reader.pop(len(chunk))
    return bytes(out)