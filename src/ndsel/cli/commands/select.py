"""Select command - extract fields from NDJSON by JSON Pointer."""

import sys

import click
from pydantic import ValidationError

from ...core.extract import Extractor, extract
from ...core.streaming import stream_files, stream_stdin
from ...errors import ConfigurationError, NdselError
from ...models.policy import OutputFormat, SelectOptions


@click.command()
@click.argument("inputs", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "-f",
    "--fields",
    required=True,
    help="List of JSON pointer formatted selectors, comma separated",
)
@click.option(
    "-r",
    "--raw",
    is_flag=True,
    help="Raw string output (ignored if format output is json)",
)
@click.option("-q", "--quiet", is_flag=True, help="Suppress warnings and errors")
@click.option("-v", "--verbose", count=True, help="Verbosity level (repeatable)")
@click.option(
    "--format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.SPACE.value,
    show_default=True,
    help="Output record format",
)
def select(inputs, fields, raw, quiet, verbose, format):
    """Select fields from each JSON document in INPUTS (default: stdin).

    Examples:
        ndsel select -f /name,/age people.ndjson     # "Alice" 30
        ndsel select -f /name -r people.ndjson       # Alice
        cat people.ndjson | ndsel select -f /name,/tags/0 --format json
    """
    try:
        options = SelectOptions(
            pointers=fields,
            raw=raw,
            quiet=quiet,
            verbose=verbose,
            format=format,
        )
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="'-f' / '--fields'") from e
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    if options.raw_ignored and not options.quiet:
        click.echo("warning: --raw has no effect when using json formatting", err=True)

    lines = stream_files(inputs) if inputs else stream_stdin()
    extractor = Extractor(options.pointers, options.policy)

    try:
        counters = extract(lines, extractor, sys.stdout, options.verbosity)
    except NdselError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if counters.errors > 0 and not options.quiet:
        click.echo(
            f"{counters.errors} parser error(s) -- use -v for more info", err=True
        )
        sys.exit(1)
