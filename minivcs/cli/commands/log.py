"""Log command - show commit history."""

import click
from colorama import Fore, Style
from minivcs.core.repository import Repository
from minivcs.core.errors import VcsError
from minivcs.cli.output import error, warning


def format_timestamp(timestamp):
    """Format a commit timestamp to a readable local date."""
    return timestamp.astimezone().strftime("%a %b %d %H:%M:%S %Y %z")


@click.command('log')
@click.option('-n', '--max-count', type=int, help='Limit number of commits to show')
@click.option('--oneline', is_flag=True, help='Show each commit on a single line')
def log_cmd(max_count, oneline):
    """
    Show commit history, newest first.

    Examples:
        minivcs log
        minivcs log -n 5
        minivcs log --oneline
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a minivcs repository"))
        raise click.Abort()

    shown = 0
    empty = True
    try:
        for commit in repo.history():
            empty = False
            if max_count is not None and shown >= max_count:
                break
            shown += 1

            if oneline:
                subject = commit.message.split('\n')[0]
                click.echo(f"{Fore.YELLOW}{commit.hash[:7]}{Style.RESET_ALL} {subject}")
                continue

            click.echo(f"{Fore.BLUE}commit {commit.hash}{Style.RESET_ALL}")
            click.echo(f"Date: {format_timestamp(commit.timestamp)}")
            click.echo()
            for line in commit.message.split('\n'):
                click.echo(f"    {line}")
            click.echo()
    except VcsError as e:
        click.echo(error(f"Failed to read history: {e}"))
        raise click.Abort()

    if empty:
        click.echo(warning("no commits yet"))
