"""Add command - stage files for commit."""

import click
from pathlib import Path
from minivcs.core.repository import Repository
from minivcs.core.errors import VcsError
from minivcs.cli.output import success, error, info


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Stage files for the next commit. The staging area is emptied by every
    commit, so each commit contains exactly the files added since the
    previous one.

    Examples:
        minivcs add file.txt
        minivcs add src/a.py src/b.py
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a minivcs repository"))
        raise click.Abort()

    added_files = []
    failed_files = []

    for path in paths:
        try:
            blob_hash = repo.stage(str(Path.cwd() / path))
            added_files.append((path, blob_hash))
        except (VcsError, OSError, ValueError) as e:
            failed_files.append((path, str(e)))

    if added_files:
        click.echo(success(f"Added {len(added_files)} file(s) to staging area"))
        for file, blob_hash in added_files:
            click.echo(info(f"  {file} ({blob_hash[:7]})"))

    if failed_files:
        click.echo(error(f"Failed to add {len(failed_files)} file(s):"))
        for file, reason in failed_files:
            click.echo(error(f"  {file}: {reason}"))
        raise click.Abort()
