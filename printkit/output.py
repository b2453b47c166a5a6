"""A fixed-size character buffer that flushes to a text stream."""

from __future__ import annotations

import sys
from types import TracebackType
from typing import TextIO

DEFAULT_SIZE = 1024


class OutputBuffer:
    """Collects characters and writes them to ``stream`` when full or flushed."""

    def __init__(self, stream: TextIO | None = None, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"buffer size must be positive, got {size}")
        self.stream = stream if stream is not None else sys.stdout
        self.size = size
        self._chars: list[str] = []

    def __len__(self) -> int:
        return len(self._chars)

    def put(self, char: str) -> None:
        """Append one character, flushing first if the buffer is full."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if len(self._chars) == self.size:
            self.flush()
        self._chars.append(char)

    def write(self, text: str) -> int:
        """Append every character of ``text``; return how many were added."""
        for char in text:
            self.put(char)
        return len(text)

    def flush(self) -> int:
        """Write the buffered characters to the stream and empty the buffer."""
        pending = "".join(self._chars)
        self._chars.clear()
        if pending:
            self.stream.write(pending)
        return len(pending)

    def __enter__(self) -> OutputBuffer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.flush()