"""Initialize a new minivcs repository."""

import click
from pathlib import Path
from minivcs.core.repository import Repository
from minivcs.core.errors import RepositoryAlreadyInitialized, VcsError
from minivcs.cli.output import success, error, info, warning


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new minivcs repository.

    Creates a .vcs directory holding the object store, HEAD and the
    staging index. Running it again on an existing repository changes
    nothing.

    Examples:
        minivcs init                # Initialize in current directory
        minivcs init my-project     # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()

    try:
        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))

        repo = Repository(str(repo_path))
        repo.init()
    except RepositoryAlreadyInitialized as e:
        click.echo(warning(str(e)))
        return
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"))
        raise click.Abort()
    except (VcsError, OSError) as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()

    click.echo(success(f"Initialized empty minivcs repository in {repo.vcs_dir}"))
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  minivcs add <file>"))
    click.echo(info("  minivcs commit -m 'message'"))
