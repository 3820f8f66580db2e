"""Pytest configuration and shared fixtures."""

import gzip
from pathlib import Path

import pytest
from click.testing import CliRunner

from ndsel.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["select", "-f", "/a", "data.ndjson"])
        result = invoke(["select", "-f", "/a"], input_data='{"a":1}\\n')

    ``result.stdout`` holds the records, ``result.stderr`` the diagnostics.
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def sample_ndjson():
    """Provide sample NDJSON data as string."""
    return (
        '{"name":"Alice","age":30,"tags":["admin","dev"]}\n'
        '{"name":"Bob","age":25,"tags":[]}\n'
    )


@pytest.fixture
def write_gz(tmp_path):
    """Write lines into a gzip file under tmp_path and return its path."""

    def _write(name: str, lines, raw: bytes | None = None) -> Path:
        path = tmp_path / name
        data = raw if raw is not None else "".join(f"{l}\n" for l in lines).encode()
        with gzip.open(path, "wb") as handle:
            handle.write(data)
        return path

    return _write
