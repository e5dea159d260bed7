"""Shared pytest fixtures for minivcs tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from minivcs.core.repository import Repository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def repo_with_commits(repo):
    """
    Repository with two commits.

    c1: a.txt = "hello"
    c2: a.txt = "hello\\nworld"

    The commit hashes are attached as repo.c1 / repo.c2.
    """
    write_and_stage(repo, 'a.txt', 'hello')
    repo.c1 = repo.commit('c1')

    write_and_stage(repo, 'a.txt', 'hello\nworld')
    repo.c2 = repo.commit('c2')

    return repo


def write_and_stage(repo, name, content):
    """
    Helper function to write a working-tree file and stage it.

    Args:
        repo: Repository instance
        name: Path relative to the work tree
        content: Text content

    Returns:
        str: Blob hash of the staged content
    """
    path = repo.work_tree / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return repo.stage(name)
