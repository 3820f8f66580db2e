"""Run options and the per-run format/error policy."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..pointer import JsonPointer, parse_pointers


class OutputFormat(str, Enum):
    """How rendered fields are joined into one output record."""

    SPACE = "space"
    TAB = "tab"
    JSON = "json"


class FormatPolicy(BaseModel):
    """Immutable serialization policy for one run.

    ``raw`` is forced off for JSON output, where unquoted strings would
    break the array syntax.
    """

    model_config = ConfigDict(frozen=True)

    format: OutputFormat = OutputFormat.SPACE
    raw: bool = False

    @model_validator(mode="before")
    @classmethod
    def _raw_off_for_json(cls, data):
        if isinstance(data, dict) and data.get("format") == OutputFormat.JSON:
            data = {**data, "raw": False}
        return data

    def join(self, values: list[str]) -> str:
        """Join rendered values into one record."""

        if self.format is OutputFormat.SPACE:
            return " ".join(values)
        if self.format is OutputFormat.TAB:
            return "\t".join(values)
        if self.format is OutputFormat.JSON:
            return "[" + ",".join(values) + "]"
        raise AssertionError(f"unhandled format {self.format!r}")


class SelectOptions(BaseModel):
    """Validated options of the select command."""

    model_config = ConfigDict(frozen=True)

    pointers: Tuple[JsonPointer, ...]
    raw: bool = False
    quiet: bool = False
    verbose: int = Field(default=0, ge=0)
    format: OutputFormat = OutputFormat.SPACE

    @field_validator("pointers", mode="before")
    @classmethod
    def _split_fields(cls, v):
        """Accept the raw comma-separated --fields string."""

        if isinstance(v, str):
            return parse_pointers(v)
        return v

    @property
    def raw_ignored(self) -> bool:
        """True when --raw was asked for but JSON output disables it."""

        return self.raw and self.format is OutputFormat.JSON

    @property
    def verbosity(self) -> int:
        """Effective verbosity; quiet always silences per-line diagnostics."""

        return 0 if self.quiet else self.verbose

    @property
    def policy(self) -> FormatPolicy:
        return FormatPolicy(format=self.format, raw=self.raw)


class RunCounters:
    """Counters for one extraction run.

    Only ever incremented while lines are processed and read once at the end.
    """

    def __init__(self):
        self.errors = 0
        self.records = 0

    def record_error(self) -> None:
        self.errors += 1

    def record_output(self) -> None:
        self.records += 1

    def __repr__(self) -> str:
        return f"RunCounters(errors={self.errors}, records={self.records})"
