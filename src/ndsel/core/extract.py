"""Pointer extraction engine.

Turns each NDJSON line into at most one output record holding the values
selected by an ordered list of JSON Pointers.
"""

import json
import re
import sys
from typing import Any, Iterable, Optional, Sequence, TextIO

import click

from ..errors import DocumentParseError, PointerResolutionError
from ..models.policy import FormatPolicy, RunCounters
from ..pointer import JsonPointer

# A \u escape in the surrogate range; only these can decode to a lone surrogate
_SURROGATE_ESCAPE = re.compile(r"\\u[dD][89a-fA-F]")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_document(line: str) -> Any:
    """Parse a line as exactly one strict JSON document.

    Raises:
        DocumentParseError: On malformed JSON, trailing data, NaN/Infinity
            literals, unpaired surrogate escapes, or nesting too deep
    """
    try:
        document = json.loads(line, parse_constant=_reject_constant)
        if _SURROGATE_ESCAPE.search(line):
            # UnicodeEncodeError (a ValueError) on any unpaired surrogate
            json.dumps(document, ensure_ascii=False).encode("utf-8")
    except (ValueError, RecursionError) as e:
        raise DocumentParseError(str(e)) from e
    return document


def render_value(value: Any, raw: bool = False) -> str:
    """Render a JSON value in minified form.

    With raw, a string value loses its first and last characters (the
    enclosing quotes); escapes inside it are left as they are.
    """
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if raw and isinstance(value, str):
        return text[1:-1]
    return text


class Extractor:
    """Resolve a fixed pointer list against documents and serialize the result."""

    def __init__(self, pointers: Sequence[JsonPointer], policy: FormatPolicy):
        if not pointers:
            raise ValueError("Extractor needs at least one pointer")
        self.pointers = tuple(pointers)
        self.policy = policy

    def extract_fields(self, document: Any) -> list[str]:
        """Render every selected value, in pointer order.

        Raises:
            PointerResolutionError: On the first pointer that does not resolve
        """
        return [
            render_value(pointer.resolve(document), self.policy.raw)
            for pointer in self.pointers
        ]

    def extract_line(self, line: str) -> Optional[str]:
        """Turn one input line into a serialized record.

        Returns:
            The record, or None for an empty line

        Raises:
            DocumentParseError: If the line is not one JSON document, or a
                selected value is nested too deep to render
            PointerResolutionError: If any pointer does not resolve
        """
        if not line:
            return None
        document = parse_document(line)
        try:
            fields = self.extract_fields(document)
        except RecursionError as e:
            raise DocumentParseError(str(e)) from e
        return self.policy.join(fields)


def extract(
    lines: Iterable[str],
    extractor: Extractor,
    output: Optional[TextIO] = None,
    verbosity: int = 0,
) -> RunCounters:
    """Run the extractor over a line stream, writing one record per line.

    Lines that fail to parse or resolve are skipped and counted once each.
    With verbosity above zero a diagnostic naming the line goes to stderr.

    Args:
        lines: Input lines, without terminators
        extractor: Configured extractor
        output: Stream for records (default: stdout)
        verbosity: Per-line diagnostic level

    Returns:
        Counters for the run
    """
    output = output or sys.stdout
    counters = RunCounters()

    for line in lines:
        try:
            record = extractor.extract_line(line)
        except DocumentParseError:
            counters.record_error()
            if verbosity > 0:
                click.echo(f"parse error on line: {line}", err=True)
            continue
        except PointerResolutionError as e:
            counters.record_error()
            if verbosity > 0:
                click.echo(f"missing field on line: {line}", err=True)
                if verbosity > 1:
                    click.echo(f"  {e}", err=True)
            continue

        if record is None:
            continue
        output.write(record + "\n")
        counters.record_output()

    return counters
