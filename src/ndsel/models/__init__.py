"""Pydantic models for run options and output policy."""

from .policy import FormatPolicy, OutputFormat, RunCounters, SelectOptions

__all__ = [
    "FormatPolicy",
    "OutputFormat",
    "RunCounters",
    "SelectOptions",
]
