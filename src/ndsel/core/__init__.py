"""ndsel core business logic.

This module contains the engines, separated from CLI presentation:
- streaming: line sources (stdin, one file, several files)
- extract: JSON Pointer field extraction
- decompress: parallel gzip decompression into one line stream
"""

from .decompress import DecompressStats, LineChannel, decompress, effective_workers
from .extract import Extractor, extract, render_value
from .streaming import stream_file, stream_files, stream_stdin

__all__ = [
    "DecompressStats",
    "Extractor",
    "LineChannel",
    "decompress",
    "effective_workers",
    "extract",
    "render_value",
    "stream_file",
    "stream_files",
    "stream_stdin",
]
