"""Integration tests for stage, commit, history and diff."""

import pytest
from minivcs.core.errors import CommitNotFound, ObjectNotFound
from minivcs.operations.diff import DiffSegment, UNCHANGED, ADDED
from tests.conftest import write_and_stage


def test_two_commit_scenario(repo_with_commits):
    """a.txt 'hello' -> 'hello\\nworld' across c1 and c2."""
    repo = repo_with_commits

    assert [c.message for c in repo.history()] == ['c2', 'c1']
    assert [c.hash for c in repo.history()] == [repo.c2, repo.c1]

    result = repo.diff(repo.c1, repo.c2)
    assert result.tree.modified == {'a.txt'}
    assert result.tree.added == set()
    assert result.tree.deleted == set()

    [file_diff] = result.files
    assert file_diff.path == 'a.txt'
    assert file_diff.segments == [
        DiffSegment(UNCHANGED, 'hello'),
        DiffSegment(ADDED, '\nworld'),
    ]


def test_deleted_file_scenario(repo):
    """A path missing from the next commit's staging is reported deleted."""
    write_and_stage(repo, 'a.txt', 'alpha')
    first = repo.commit('with a')

    write_and_stage(repo, 'b.txt', 'beta')
    second = repo.commit('only b')

    result = repo.diff(first, second)
    assert result.tree.deleted == {'a.txt'}
    assert result.tree.added == {'b.txt'}
    assert result.files == []

    assert repo.diff().tree == result.tree


def test_unstaged_path_is_deleted(repo):
    write_and_stage(repo, 'a.txt', 'alpha')
    first = repo.commit('with a')

    write_and_stage(repo, 'a.txt', 'alpha again')
    write_and_stage(repo, 'b.txt', 'beta')
    repo.unstage('a.txt')
    repo.commit('only b')

    assert repo.diff().tree.deleted == {'a.txt'}
    assert repo.diff().before.hash == first


def test_diff_defaults(repo_with_commits):
    repo = repo_with_commits

    head_diff = repo.diff()
    assert head_diff.after.hash == repo.c2
    assert head_diff.before.hash == repo.c1

    root_diff = repo.diff(repo.c1)
    assert root_diff.before is None
    assert root_diff.tree.added == {'a.txt'}
    assert root_diff.files == []


def test_diff_with_only_second_commit(repo_with_commits):
    """Test a lone second revision is compared against its parent."""
    repo = repo_with_commits

    result = repo.diff(None, repo.c1)
    assert result.before is None
    assert result.tree == repo.diff(repo.c1).tree

    assert repo.diff(commit_b=repo.c2).before.hash == repo.c1


def test_diff_without_commits(repo):
    assert repo.diff() is None
    assert repo.tree_diff() is None


def test_diff_unknown_commit(repo_with_commits):
    with pytest.raises(CommitNotFound):
        repo_with_commits.diff('0' * 40)
    with pytest.raises(CommitNotFound):
        repo_with_commits.diff(repo_with_commits.c1, 'deadbeef')
    with pytest.raises(CommitNotFound):
        repo_with_commits.tree_diff('0' * 40)


def test_diff_accepts_prefix_and_head(repo_with_commits):
    repo = repo_with_commits
    result = repo.diff(repo.c1[:8], 'HEAD')
    assert result.tree.modified == {'a.txt'}


def test_diff_missing_blob_raises(repo_with_commits):
    repo = repo_with_commits
    blob_hash = repo.get_commit(repo.c2).files[0].hash
    repo.objects.object_path(blob_hash).unlink()

    with pytest.raises(ObjectNotFound):
        repo.diff()


def test_tree_diff(repo):
    write_and_stage(repo, 'b.txt', 'b')
    write_and_stage(repo, 'a.txt', 'a')
    first = repo.commit('first')

    write_and_stage(repo, 'a.txt', 'a2')
    write_and_stage(repo, 'c.txt', 'c')
    repo.commit('second')

    change = repo.tree_diff()
    assert change.before == ['a.txt', 'b.txt']
    assert change.after == ['a.txt', 'c.txt']
    assert change.diff.added == {'c.txt'}
    assert change.diff.modified == {'a.txt'}
    assert change.diff.deleted == {'b.txt'}

    root = repo.tree_diff(first)
    assert root.parent is None
    assert root.before == []


def test_unchanged_restage_is_not_modified(repo):
    write_and_stage(repo, 'a.txt', 'same')
    repo.commit('first')
    write_and_stage(repo, 'a.txt', 'same')
    repo.commit('second')

    result = repo.diff()
    assert not result.tree
    assert result.files == []


def test_latin1_encoding_config(repo):
    repo.config.set('core', 'encoding', 'latin-1')
    (repo.work_tree / 'a.txt').write_bytes('caf\xe9\n'.encode('latin-1'))
    repo.stage('a.txt')
    repo.commit('first')
    (repo.work_tree / 'a.txt').write_bytes('caf\xe9\nbar\n'.encode('latin-1'))
    repo.stage('a.txt')
    repo.commit('second')

    [file_diff] = repo.diff().files
    assert file_diff.segments[0] == DiffSegment(UNCHANGED, 'caf\xe9\n')
