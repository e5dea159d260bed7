"""Main CLI entry point for minivcs."""

import logging

import click
from colorama import init

from minivcs import __version__
from minivcs.cli.output import BANNER
from minivcs.cli.commands import (init_cmd, add_cmd, commit_cmd, log_cmd,
                                  changes_cmd, show_cmd, diff_cmd, tree_cmd)
from minivcs.core.config import get_config
from minivcs.core.repository import Repository

# Initialize colorama for cross-platform colored output
init(autoreset=True)

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


class VcsGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


def configure_logging(verbose: bool) -> None:
    """Set the root log level from --verbose or the log.level setting."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = get_config(Repository.find_repository()).get('log', 'level')
        level = getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


@click.group(cls=VcsGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Verbose (debug) logging')
def cli(verbose):
    configure_logging(verbose)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(log_cmd)
cli.add_command(changes_cmd)
cli.add_command(show_cmd)
cli.add_command(diff_cmd)
cli.add_command(tree_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
