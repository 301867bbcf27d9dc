"""Buffered line reading that keeps line terminators."""

from __future__ import annotations

import codecs
import os
from collections.abc import Iterator
from typing import IO, AnyStr

BUFFER_SIZE = 42


class LineReader:
    """Read a stream line by line in fixed-size chunks.

    Each line keeps its trailing newline; the last line may lack one.
    Binary streams are decoded as UTF-8.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="surrogateescape")

    def _fill(self) -> bool:
        data = self._stream.read(self._buffer_size)
        if isinstance(data, bytes):
            self._stash += self._decoder.decode(data, final=not data)
        else:
            self._stash += data
        return bool(data)

    def read_line(self) -> str | None:
        """Return the next line, or None once the stream is exhausted."""
        while "\n" not in self._stash:
            if not self._fill():
                break
        if not self._stash:
            return None
        end = self._stash.find("\n")
        if end < 0:
            line, self._stash = self._stash, ""
        else:
            line, self._stash = self._stash[: end + 1], self._stash[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return every line of a file, terminators included."""
    with open(path, "rb") as stream:
        return list(LineReader(stream))