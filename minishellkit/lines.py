"""Line-at-a-time reading from a stream with a fixed read size."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

__all__ = ["LineReader", "BUFFER_SIZE"]

BUFFER_SIZE = 50

Chunk = Union[str, bytes]


class LineReader:
    """Read lines from *stream*, *buffer_size* characters or bytes at a time.

    Each line keeps its trailing newline; the last line is returned without
    one when the stream does not end in a newline. Text and binary streams
    are both accepted.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[Chunk] = None
        self._newline: Optional[Chunk] = None

    def _fill(self) -> Optional[Chunk]:
        stash = self._stash
        while stash is None or self._newline not in stash:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._newline is None:
                self._newline = (
                    b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
                )
            stash = chunk if stash is None else stash + chunk
        return stash

    def next_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream is exhausted."""
        try:
            stash = self._fill()
        except Exception:
            self._stash = None
            raise
        if not stash:
            self._stash = None
            return None
        index = stash.find(self._newline)
        if index < 0:
            self._stash = None
            return stash
        rest = stash[index + 1:]
        self._stash = rest or None
        return stash[:index + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line