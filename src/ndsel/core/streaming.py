"""Line sources for NDJSON input.

Utilities for turning byte streams into text lines:
- stream_stdin: lines from standard input
- stream_file: lines from one file
- stream_files: lines from several files, one after another

Lines are yielded without their terminator. A line that is not valid UTF-8
is dropped without being reported.
"""

from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional

import click

from ..errors import InputOpenError


def decode_line(raw: bytes) -> Optional[str]:
    """Strip the line terminator and decode as UTF-8.

    Args:
        raw: One line as read from a binary stream, with or without "\\n"

    Returns:
        Decoded text, or None if the bytes are not valid UTF-8
    """
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None


def iter_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield decoded lines from an open binary stream."""
    for raw in stream:
        line = decode_line(raw)
        if line is not None:
            yield line


def stream_stdin() -> Iterator[str]:
    """Yield lines from standard input."""
    yield from iter_lines(click.get_binary_stream("stdin"))


def stream_file(path: str | Path) -> Iterator[str]:
    """Yield lines from a single file.

    The file is opened on first iteration, not when this is called.

    Raises:
        InputOpenError: If the file cannot be opened
    """
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise InputOpenError(path, e.strerror or str(e)) from e

    with handle:
        yield from iter_lines(handle)


def stream_files(paths: Iterable[str | Path]) -> Iterator[str]:
    """Yield lines of every file in order, without interleaving."""
    for path in paths:
        yield from stream_file(path)
