"""Parallel gzip decompression into a single line stream.

Worker threads each decode one file at a time and push its lines onto a
bounded LineChannel. A single writer thread pops lines in arrival order and
writes them out, so output lines never interleave and at most
``queue_size`` decoded lines are buffered at any time.

Any open or decode failure aborts the whole run (fail-fast).
"""

import gzip
import os
import queue
import sys
import threading
import zlib
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, TextIO

from ..errors import DecompressionError
from .streaming import decode_line

DEFAULT_QUEUE_SIZE = 1024

_CLOSED = object()


def effective_workers(parallelism: int) -> int:
    """Number of decoding threads for a requested parallelism degree.

    0 means every available CPU. A positive value keeps one unit for the
    writer, with a floor of one worker.
    """
    if parallelism < 0:
        raise ValueError("parallelism must be >= 0")
    if parallelism == 0:
        return os.cpu_count() or 1
    return max(parallelism - 1, 1)


class LineChannel(queue.Queue):
    """Bounded FIFO of decoded lines with an end-of-stream marker.

    ``put`` blocks while the channel is full. ``high_water`` is the largest
    number of lines ever buffered at once.
    """

    def __init__(self, capacity: int = DEFAULT_QUEUE_SIZE):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        super().__init__(maxsize=capacity)
        self.capacity = capacity
        self.high_water = 0

    def _put(self, item):
        # Runs under the queue mutex
        super()._put(item)
        if item is not _CLOSED:
            self.high_water = max(self.high_water, len(self.queue))

    def close(self) -> None:
        """Signal that no more lines will be put."""
        self.put(_CLOSED)

    def __iter__(self):
        while True:
            item = self.get()
            if item is _CLOSED:
                return
            yield item


@dataclass
class DecompressStats:
    """Summary of a finished decompression run."""

    files: int
    lines: int
    high_water: int


def _decode_file(path: Path, channel: LineChannel, stop: threading.Event) -> int:
    """Push every line of one gzip file onto the channel, in file order."""
    count = 0
    try:
        with gzip.open(path, "rb") as handle:
            for raw in handle:
                if stop.is_set():
                    break
                line = decode_line(raw)
                if line is None:
                    continue
                channel.put(line)
                count += 1
    except (OSError, EOFError, zlib.error) as e:
        reason = getattr(e, "strerror", None) or str(e) or type(e).__name__
        raise DecompressionError(path, reason) from e
    return count


class _Writer(threading.Thread):
    """Sole consumer of the channel; owns all writes to the output."""

    def __init__(self, channel: LineChannel, output: TextIO, stop: threading.Event):
        super().__init__(name="ndsel-writer", daemon=True)
        self.channel = channel
        self.output = output
        self.stop = stop
        self.lines = 0
        self.broken_pipe = False
        self.error: Optional[BaseException] = None

    def run(self):
        for line in self.channel:
            # Keep draining after a stop so blocked workers can finish
            if self.stop.is_set():
                continue
            try:
                self.output.write(line + "\n")
            except BrokenPipeError:
                self.broken_pipe = True
                self.stop.set()
                continue
            except Exception as e:
                self.error = e
                self.stop.set()
                continue
            self.lines += 1
        if not self.broken_pipe:
            try:
                self.output.flush()
            except BrokenPipeError:
                self.broken_pipe = True


def decompress(
    paths: Sequence[str | Path],
    parallelism: int = 0,
    output: Optional[TextIO] = None,
    queue_size: int = DEFAULT_QUEUE_SIZE,
) -> DecompressStats:
    """Decompress gzip files concurrently and write all their lines out.

    Lines of one file keep their relative order; lines of different files
    may interleave.

    Args:
        paths: gzip-compressed, line-oriented input files (at least one)
        parallelism: Requested parallelism degree (0 = all CPUs)
        output: Destination stream (default: stdout)
        queue_size: Capacity of the line channel

    Returns:
        DecompressStats for the run

    Raises:
        DecompressionError: On the first file that cannot be opened or decoded
    """
    if not paths:
        raise ValueError("decompress needs at least one input file")

    output = output or sys.stdout
    channel = LineChannel(queue_size)
    stop = threading.Event()
    writer = _Writer(channel, output, stop)
    writer.start()

    error: Optional[BaseException] = None
    try:
        with ThreadPoolExecutor(
            max_workers=effective_workers(parallelism),
            thread_name_prefix="ndsel-gunzip",
        ) as pool:
            futures = [
                pool.submit(_decode_file, Path(path), channel, stop)
                for path in paths
            ]
            for future in as_completed(futures):
                if future.cancelled():
                    continue
                exc = future.exception()
                if exc is not None and error is None:
                    error = exc
                    stop.set()
                    for pending in futures:
                        pending.cancel()
    except BaseException:
        stop.set()
        raise
    finally:
        channel.close()
        writer.join()

    if error is not None:
        raise error
    if writer.error is not None:
        raise writer.error

    return DecompressStats(
        files=len(paths),
        lines=writer.lines,
        high_water=channel.high_water,
    )
