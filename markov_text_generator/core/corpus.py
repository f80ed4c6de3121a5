# corpus.py
# Character streams used as training sources.

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, TextIO, Union

Source = Union["CharStream", TextIO, str, "os.PathLike[str]"]


class CharStream:
    """
    Read-once character stream with a single character of look-ahead.

    Only two operations matter to the trainer:
      - read_char(): next character, EOFError when exhausted
      - is_empty(): True once every character has been consumed
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._next = stream.read(1)

    def is_empty(self) -> bool:
        return self._next == ""

    def read_char(self) -> str:
        if self._next == "":
            raise EOFError("read past end of corpus")
        c = self._next
        self._next = self._stream.read(1)
        return c

    def __iter__(self) -> Iterator[str]:
        while not self.is_empty():
            yield self.read_char()


@contextmanager
def open_corpus(path: Union[str, "os.PathLike[str]"], encoding: str = "utf-8") -> Iterator[CharStream]:
    """Open a corpus file and yield a CharStream over it."""
    with open(path, "r", encoding=encoding, newline="") as f:
        yield CharStream(f)


@contextmanager
def as_char_stream(source: Source, encoding: str = "utf-8") -> Iterator[CharStream]:
    """
    Normalise a training source into a CharStream.
    Paths are opened (and closed again), file-like objects are wrapped,
    existing CharStreams are passed through.
    """
    if isinstance(source, CharStream):
        yield source
    elif isinstance(source, (str, os.PathLike)):
        with open_corpus(source, encoding=encoding) as stream:
            yield stream
    elif hasattr(source, "read"):
        yield CharStream(source)
    else:
        raise TypeError(f"unsupported corpus source: {type(source).__name__}")
