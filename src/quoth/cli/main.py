"""Entry point for the ``quoth`` command line tool."""

import click

from quoth import __version__
from quoth.cli.commands.embed import embed
from quoth.cli.commands.ref import ref


@click.group()
@click.version_option(__version__, prog_name="quoth")
def main() -> None:
    """Quoth - copy unique references to markdown sections and blocks."""


main.add_command(ref)
main.add_command(embed)


if __name__ == "__main__":
    main()
