"""Diff commands - show changes between commits."""

import click
from minivcs.core.repository import Repository
from minivcs.core.errors import VcsError
from minivcs.cli.output import error, warning, format_commit_diff


def _echo_diff(commit_a, commit_b, no_color):
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a minivcs repository"))
        raise click.Abort()

    try:
        result = repo.diff(commit_a, commit_b)
    except VcsError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    if result is None:
        click.echo(warning("no commits yet"))
        return

    click.echo(format_commit_diff(result, color=not no_color))


@click.command('changes')
@click.option('--no-color', is_flag=True, help='Disable colored output')
def changes_cmd(no_color):
    """
    Show changes of HEAD against its parent (file-level and inline).

    Examples:
        minivcs changes
    """
    _echo_diff(None, None, no_color)


@click.command('show')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('commit')
def show_cmd(no_color, commit):
    """
    Show changes of a commit against its parent.

    Examples:
        minivcs show HEAD
        minivcs show 3f2a9c1
    """
    _echo_diff(commit, None, no_color)


@click.command('diff')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('commit1')
@click.argument('commit2')
def diff_cmd(no_color, commit1, commit2):
    """
    Show changes between two commits.

    Examples:
        minivcs diff abc123 def456
    """
    _echo_diff(commit1, commit2, no_color)
