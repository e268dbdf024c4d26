"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 64


class LineReader(Generic[AnyStr]):
    """Return one line at a time from a text or binary stream.

    The stream is read in chunks of ``buffer_size``; data past the current
    line is kept for the next call. Lines keep their trailing newline; the
    last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._storage: Optional[AnyStr] = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return b"\n" if isinstance(data, bytes) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while self._storage is None or self._newline(self._storage) not in self._storage:
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._storage = None
                raise
            if not chunk:
                return
            self._storage = chunk if self._storage is None else self._storage + chunk

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None when the stream is exhausted."""
        self._fill()
        storage = self._storage
        if not storage:
            self._storage = None
            return None
        end = storage.find(self._newline(storage))
        if end < 0:
            self._storage = None
            return storage
        self._storage = storage[end + 1 :]
        return storage[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line