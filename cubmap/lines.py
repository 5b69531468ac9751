"""Line-by-line reading of text streams in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TextIO

BUFFER_SIZE = 42


def iter_lines(stream: TextIO, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of ``stream``, each keeping its trailing newline.

    The stream is read ``buffer_size`` characters at a time. The last line
    is yielded without a newline if the stream does not end with one.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    pending = ""
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending += chunk
        start = 0
        while (end := pending.find("\n", start)) != -1:
            yield pending[start : end + 1]
            start = end + 1
        pending = pending[start:]
    if pending:
        yield pending


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read every line of the file at ``path``, newlines included."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        return list(iter_lines(handle))