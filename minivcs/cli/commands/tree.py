"""Tree command - show file structure before and after a commit."""

import click
from minivcs.core.repository import Repository
from minivcs.core.errors import VcsError
from minivcs.cli.output import error, warning, format_tree_change


@click.command('tree')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('commit', required=False)
def tree_cmd(no_color, commit):
    """
    Show the file structure before and after a commit (defaults to HEAD).

    Examples:
        minivcs tree
        minivcs tree 3f2a9c1
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a minivcs repository"))
        raise click.Abort()

    try:
        change = repo.tree_diff(commit)
    except VcsError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    if change is None:
        click.echo(warning("no commits yet"))
        return

    click.echo(format_tree_change(change, color=not no_color))
