# minnow

`minnow` provides a bounded, in-memory byte stream with flow control. It suits code that moves bytes from a producer to a consumer. The stream holds at most a fixed number of unread bytes. Once that capacity is full, anything more that is pushed is cut off.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

Everything lives in `minnow.byte_stream`. You create a `ByteStream` with a capacity. It has two views that share its state:

- a `Writer`, returned by `stream.writer()`, which pushes bytes in and can close the stream;
- a `Reader`, returned by `stream.reader()`, which peeks at bytes and pops them out.

```python
from minnow.byte_stream import ByteStream, read

stream = ByteStream(8)
writer = stream.writer()
reader = stream.reader()

writer.push(b"hello, world")        # only b"hello, w" fits
print(writer.bytes_pushed())        # 8
print(writer.available_capacity())  # 0

print(reader.peek())                # b'hello, w'
reader.pop(7)
print(reader.bytes_popped())        # 7
print(reader.bytes_buffered())      # 1

writer.close()
print(read(reader, 10))             # b'w'
print(reader.is_finished())         # True
```

A negative capacity raises `ValueError`.

### Writer

- `push(data)` appends as much of `data` as the remaining capacity allows. `data` may be `bytes`, `bytearray` or `memoryview`. Once the stream is closed, `push` does nothing.
- `close()` marks the end of the stream.
- `is_closed()` reports whether `close()` has been called.
- `available_capacity()` returns how many more bytes fit right now.
- `bytes_pushed()` returns the total number of bytes accepted so far.

### Reader

- `peek()` returns every buffered byte as `bytes` and leaves them in the buffer.
- `pop(length)` removes up to `length` bytes from the front of the buffer. A negative `length` raises `ValueError`.
- `is_finished()` is true once the stream is closed and every byte has been popped.
- `bytes_buffered()` returns the number of bytes that have been pushed and not yet popped.
- `bytes_popped()` returns the total number of bytes removed so far.

### Errors

`set_error()` marks the stream as failed. It can be called on the `ByteStream`, its `Writer` or its `Reader`. All three report the flag through `has_error()`.

### Helper

`read(reader, max_len)` peeks and pops up to `max_len` bytes from `reader` and returns them as `bytes`.

## What it does not do

The package is only the byte stream. It opens no sockets and has no transport protocol, sender or receiver logic. It ships no command-line program. Any network I/O has to be built on top of it.