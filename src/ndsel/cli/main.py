"""ndsel CLI main entry point."""

import click

from .. import __version__


@click.group(context_settings=dict(auto_envvar_prefix="NDSEL"))
@click.version_option(__version__, prog_name="ndsel")
def cli():
    """ndsel - select fields from NDJSON and decompress gzip streams."""


# Register commands at module level so tests can import cli with commands attached
from .commands.select import select
from .commands.zcat import zcat

cli.add_command(select)
cli.add_command(zcat)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
