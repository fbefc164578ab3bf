"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 1


class LineReader(Generic[AnyStr]):
    """Hands out the lines of a text or binary stream one at a time.

    Each line keeps its trailing newline; the last line may lack one. The
    stream is read in chunks of ``buffer_size`` and what follows a newline is
    kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream has nothing left."""
        pending = self._pending
        while True:
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)  # type: ignore[arg-type]
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[:index + 1]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        self._pending = None
        return pending if pending else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """All remaining lines of ``stream``, each with its newline."""
    return list(LineReader(stream))