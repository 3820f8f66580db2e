"""Zcat command - decompress gzip files in parallel."""

import sys

import click

from ...core.decompress import DEFAULT_QUEUE_SIZE, decompress
from ...errors import NdselError


@click.command()
@click.argument("inputs", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option(
    "-p",
    "--parallelism",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Parallelism degree; 0 uses every CPU",
)
@click.option(
    "--queue-size",
    type=click.IntRange(min=1),
    default=DEFAULT_QUEUE_SIZE,
    show_default=True,
    help="Maximum number of decoded lines buffered in memory",
)
def zcat(inputs, parallelism, queue_size):
    """Decompress gzip INPUTS concurrently and write their lines to stdout.

    Lines of one file keep their order; files may interleave. The first
    file that cannot be read aborts the whole run.

    Examples:
        ndsel zcat logs/*.ndjson.gz | ndsel select -f /user/id
        ndsel zcat -p 4 a.gz b.gz c.gz
    """
    try:
        decompress(inputs, parallelism, sys.stdout, queue_size)
    except NdselError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
