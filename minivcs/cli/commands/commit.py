"""Commit command - create a commit from staged changes."""

import click
from minivcs.core.repository import Repository
from minivcs.core.errors import NothingToCommit, VcsError
from minivcs.cli.output import success, error, info, warning


@click.command('commit')
@click.option('-m', '--message', required=True, help='Commit message')
def commit_cmd(message):
    """
    Record the staged files as a new commit.

    Examples:
        minivcs commit -m "Initial commit"
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a minivcs repository"))
        raise click.Abort()

    try:
        parent = repo.head_hash()
        commit_hash = repo.commit(message)
    except NothingToCommit:
        click.echo(warning("Nothing to commit (staging area is empty)"))
        click.echo(info("Use 'minivcs add <file>' to stage changes"))
        return
    except VcsError as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()

    click.echo(success(f"commit {commit_hash}"))
    click.echo(info(f"Message: {message}"))
    if parent:
        click.echo(info(f"Parent: {parent[:7]}"))
    else:
        click.echo(info("(root commit)"))
