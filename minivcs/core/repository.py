"""Repository management for minivcs."""

import logging
import string
from pathlib import Path
from typing import Iterator, List, Optional

from .config import Config
from .errors import (CommitNotFound, NotARepository, NothingToCommit,
                     ObjectNotFound, RepositoryAlreadyInitialized, StorageUnavailable)
from .index import Index, IndexEntry
from .objects import Blob, Commit
from .refs import HeadRef
from .store import ObjectStore, atomic_write

logger = logging.getLogger(__name__)

REPO_DIR = '.vcs'
MIN_PREFIX = 4


class Repository:
    """
    Represents a minivcs repository.

    A repository handle owns all mutable state of one repository (the
    staging index, HEAD, configuration) so several handles can be used
    side by side in one process.

    There is no locking: concurrent use of the same repository from
    several processes is undefined behaviour.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.vcs_dir = self.work_tree / REPO_DIR
        self.objects_dir = self.vcs_dir / 'objects'
        self.head_file = self.vcs_dir / 'HEAD'
        self.index_file = self.vcs_dir / 'index'
        self.config_file = self.vcs_dir / 'config'

        self.objects = ObjectStore(self.objects_dir)
        self.index = Index(self.index_file)
        self.refs = HeadRef(self.head_file)

        # Lazy loading to avoid circular import
        self._config = None
        self._diff_engine = None

    @property
    def config(self) -> Config:
        """Get Config instance bound to this repository."""
        if self._config is None:
            self._config = Config(self.config_file)
        return self._config

    @property
    def diff_engine(self):
        """Get DiffEngine instance."""
        if self._diff_engine is None:
            from minivcs.operations.diff import DiffEngine
            self._diff_engine = DiffEngine(self)
        return self._diff_engine

    def exists(self) -> bool:
        return self.vcs_dir.is_dir()

    def _require(self) -> None:
        if not self.exists():
            raise NotARepository(self.work_tree)

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .vcs directory structure:
        .vcs/
        ├── objects/       # Object database, one file per hash
        ├── HEAD           # Latest commit hash (empty until first commit)
        ├── index          # Staging area, JSON list
        └── config         # Repository configuration

        Returns:
            Repository: self for method chaining

        Raises:
            RepositoryAlreadyInitialized: If the repository already exists
        """
        if self.vcs_dir.exists():
            raise RepositoryAlreadyInitialized(self.vcs_dir)

        try:
            self.vcs_dir.mkdir(parents=True)
            self.objects_dir.mkdir()
        except OSError as e:
            raise StorageUnavailable(f"Cannot create repository at {self.vcs_dir}: {e}") from e

        atomic_write(self.head_file, b'')
        self.index.clear()
        atomic_write(self.config_file, b'[core]\nrepositoryformatversion = 0\n')

        logger.debug("initialized repository in %s", self.vcs_dir)
        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / REPO_DIR).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    # Staging

    def _relative_path(self, file_path: Path) -> str:
        try:
            return file_path.relative_to(self.work_tree).as_posix()
        except ValueError:
            raise ValueError(f"Path is outside repository: {file_path}") from None

    def stage(self, filepath: str) -> str:
        """
        Stage a working-tree file for the next commit.

        Args:
            filepath: Path to file (absolute, or relative to the work tree)

        Returns:
            str: Hash of the staged content

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the path is not a file or lies outside the work tree
        """
        self._require()

        file_path = Path(filepath)
        if not file_path.is_absolute():
            file_path = self.work_tree / file_path
        file_path = file_path.resolve()

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        if not file_path.is_file():
            raise ValueError(f"Not a file: {filepath}")

        rel_path = self._relative_path(file_path)
        if rel_path.split('/')[0] == REPO_DIR:
            raise ValueError(f"Cannot stage repository internals: {filepath}")

        try:
            blob = Blob.from_file(str(file_path))
        except OSError as e:
            raise StorageUnavailable(f"Cannot read {filepath}: {e}") from e

        blob_hash = self.objects.put(blob.serialize())
        self.index.stage(rel_path, blob_hash)
        return blob_hash

    def unstage(self, filepath: str) -> bool:
        """
        Remove a path from the staging area.

        Returns:
            True if the path was staged
        """
        self._require()
        file_path = Path(filepath)
        if file_path.is_absolute():
            rel_path = self._relative_path(file_path.resolve())
        else:
            rel_path = file_path.as_posix()
        return self.index.unstage(rel_path)

    def staged(self) -> List[IndexEntry]:
        """Current staging area entries."""
        return self.index.load()

    # Commit graph

    def head_hash(self) -> Optional[str]:
        """Hash of the latest commit, or None before the first commit."""
        return self.refs.resolve_head()

    def get_commit(self, commit_hash: Optional[str]) -> Optional[Commit]:
        """
        Load a commit by hash.

        Returns:
            Commit, or None if nothing is stored under the hash or the
            object is not a commit record
        """
        if not commit_hash:
            return None

        try:
            data = self.objects.get(commit_hash)
        except ObjectNotFound:
            return None

        commit = Commit()
        try:
            commit.deserialize(data)
        except ValueError:
            return None

        commit._hash = commit_hash
        return commit

    def resolve(self, rev: str) -> str:
        """
        Resolve a revision to a full commit hash.

        Args:
            rev: 'HEAD', a full commit hash, or a unique prefix of at
                least four hex characters

        Returns:
            Full commit hash

        Raises:
            CommitNotFound: If rev does not name exactly one commit
        """
        if rev == 'HEAD':
            head = self.head_hash()
            if head is None:
                raise CommitNotFound(rev, 'no commits yet')
            return head

        rev = rev.lower()
        if len(rev) < MIN_PREFIX or any(c not in string.hexdigits for c in rev):
            raise CommitNotFound(rev, 'not a valid commit')

        candidates = [h for h in self.objects.find(rev) if self.get_commit(h) is not None]
        if not candidates:
            raise CommitNotFound(rev)
        if len(candidates) > 1:
            raise CommitNotFound(rev, f'ambiguous commit prefix ({len(candidates)} matches)')
        return candidates[0]

    def commit(self, message: str) -> str:
        """
        Record the staged files as a new commit.

        Stores the commit object, moves HEAD to it and clears the index,
        in that order.

        Args:
            message: Commit message

        Returns:
            str: Hash of the new commit

        Raises:
            NothingToCommit: If the staging area is empty (nothing is written)
        """
        self._require()

        entries = self.index.load()
        if not entries:
            raise NothingToCommit()

        parent = self.head_hash()
        commit = Commit.create(message=message, files=entries, parent=parent)
        commit_hash = self.objects.put(commit.serialize())

        self.refs.set_head(commit_hash)
        self.index.clear()

        logger.debug("committed %s (%d files, parent=%s)", commit_hash, len(entries), parent)
        return commit_hash

    def history(self) -> Iterator[Commit]:
        """
        Walk the commit chain from HEAD to the root.

        Lazy; every call starts again from the current HEAD. The walk stops
        at a commit without parent, at a parent that does not resolve, or
        at a hash already seen.

        Yields:
            Commit objects, newest first
        """
        seen = set()
        commit_hash = self.head_hash()

        while commit_hash and commit_hash not in seen:
            seen.add(commit_hash)
            commit = self.get_commit(commit_hash)
            if commit is None:
                logger.debug("history ends at unresolved commit %s", commit_hash)
                return
            yield commit
            commit_hash = commit.parent

    # Diffs

    def _load(self, rev: str) -> Commit:
        commit = self.get_commit(self.resolve(rev))
        if commit is None:
            raise CommitNotFound(rev)
        return commit

    def _target(self, rev: Optional[str]) -> Optional[Commit]:
        if rev is not None:
            return self._load(rev)
        return self.get_commit(self.head_hash())

    def diff(self, commit_a: Optional[str] = None, commit_b: Optional[str] = None):
        """
        Compare two commits at file and line level.

        - no arguments: HEAD against its parent
        - one of them: that commit against its parent
        - both: commit_a (before) against commit_b (after)

        Returns:
            CommitDiff, or None when no revision was named and there are
            no commits yet

        Raises:
            CommitNotFound: If a named revision does not resolve
            ObjectNotFound: If a modified file's blob is missing
        """
        if commit_a is not None and commit_b is not None:
            return self.diff_engine.diff_commits(self._load(commit_a), self._load(commit_b))

        after = self._target(commit_a if commit_a is not None else commit_b)
        if after is None:
            return None
        return self.diff_engine.diff_commits(self.get_commit(after.parent), after)

    def tree_diff(self, commit_hash: Optional[str] = None):
        """
        Describe the file structure of a commit against its parent.

        Args:
            commit_hash: Revision to describe (defaults to HEAD)

        Returns:
            TreeChange, or None when no revision was named and there are
            no commits yet
        """
        commit = self._target(commit_hash)
        if commit is None:
            return None
        return self.diff_engine.tree_change(commit, self.get_commit(commit.parent))

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
