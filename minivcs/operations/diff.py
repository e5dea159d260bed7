"""Diff engine for comparing snapshots and blob contents."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

logger = logging.getLogger(__name__)

UNCHANGED = 'unchanged'
ADDED = 'added'
REMOVED = 'removed'


@dataclass
class TreeDiff:
    """
    Set-level difference between two snapshots.

    Paths present in both snapshots with the same hash appear in none of
    the three sets.
    """
    added: Set[str] = field(default_factory=set)
    modified: Set[str] = field(default_factory=set)
    deleted: Set[str] = field(default_factory=set)

    def sorted_added(self) -> List[str]:
        return sorted(self.added)

    def sorted_modified(self) -> List[str]:
        return sorted(self.modified)

    def sorted_deleted(self) -> List[str]:
        return sorted(self.deleted)

    def summary(self) -> Dict[str, int]:
        """Counts per change kind."""
        return {
            'added': len(self.added),
            'deleted': len(self.deleted),
            'modified': len(self.modified),
        }

    def __bool__(self) -> bool:
        return bool(self.added or self.modified or self.deleted)


def _as_map(entries: Optional[Iterable]) -> Dict[str, str]:
    if entries is None:
        return {}
    return {e.path: e.hash for e in entries}


def diff_trees(before: Optional[Iterable], after: Iterable) -> TreeDiff:
    """
    Classify every path of two snapshots as added, modified or deleted.

    Args:
        before: Entries of the older snapshot, or None for a root commit
        after: Entries of the newer snapshot

    Returns:
        TreeDiff with unordered path sets
    """
    old_files = _as_map(before)
    new_files = _as_map(after)

    result = TreeDiff()
    for path in set(old_files) | set(new_files):
        old_hash = old_files.get(path)
        new_hash = new_files.get(path)

        if old_hash is None:
            result.added.add(path)
        elif new_hash is None:
            result.deleted.add(path)
        elif old_hash != new_hash:
            result.modified.add(path)

    return result


@dataclass
class DiffSegment:
    """A run of text that is unchanged, added or removed."""
    kind: str
    text: str

    @property
    def added(self) -> bool:
        return self.kind == ADDED

    @property
    def removed(self) -> bool:
        return self.kind == REMOVED


def _lcs_table(old: List[str], new: List[str]) -> List[List[int]]:
    # table[i][j] is the LCS length of old[i:] and new[j:]
    table = [[0] * (len(new) + 1) for _ in range(len(old) + 1)]
    for i in range(len(old) - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(len(new) - 1, -1, -1):
            if old[i] == new[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return table


def diff_lines(old_text: str, new_text: str) -> List[DiffSegment]:
    """
    Compute a line-level diff between two texts.

    Lines are aligned with a longest-common-subsequence table, comparing
    line content without its separator. Each line's trailing newline
    travels with it; when a matched line ends with a newline on only one
    side (the last line of a file without a final newline), that newline
    becomes its own added or removed piece. Adjacent segments of the same
    kind are merged and empty segments dropped, so::

        ''.join(s.text for s in segs if s.kind != ADDED) == old_text
        ''.join(s.text for s in segs if s.kind != REMOVED) == new_text

    Where several minimal alignments exist, removals come before additions.

    Shared leading and trailing lines are matched up front, so the table
    only spans the region that actually changed.

    Args:
        old_text: Previous content
        new_text: New content

    Returns:
        Ordered list of DiffSegment
    """
    old = old_text.split('\n')
    new = new_text.split('\n')
    n, m = len(old), len(new)

    def old_sep(i):
        return '\n' if i < n - 1 else ''

    def new_sep(j):
        return '\n' if j < m - 1 else ''

    # The common head stops before either side's last line, where the
    # separators may differ.
    start = 0
    while start < min(n, m) - 1 and old[start] == new[start]:
        start += 1
    end = 0
    while end < min(n, m) - start and old[n - 1 - end] == new[m - 1 - end]:
        end += 1

    pieces = [(UNCHANGED, old[k] + '\n') for k in range(start)]
    table = _lcs_table(old[start:n - end], new[start:m - end])

    i = j = start
    while i < n - end and j < m - end:
        if old[i] == new[j]:
            o_sep, n_sep = old_sep(i), new_sep(j)
            if o_sep == n_sep:
                pieces.append((UNCHANGED, old[i] + o_sep))
            else:
                pieces.append((UNCHANGED, old[i]))
                if o_sep:
                    pieces.append((REMOVED, o_sep))
                else:
                    pieces.append((ADDED, n_sep))
            i += 1
            j += 1
        elif table[i - start + 1][j - start] >= table[i - start][j - start + 1]:
            pieces.append((REMOVED, old[i] + old_sep(i)))
            i += 1
        else:
            pieces.append((ADDED, new[j] + new_sep(j)))
            j += 1

    for k in range(i, n - end):
        pieces.append((REMOVED, old[k] + old_sep(k)))
    for k in range(j, m - end):
        pieces.append((ADDED, new[k] + new_sep(k)))
    for k in range(n - end, n):
        pieces.append((UNCHANGED, old[k] + old_sep(k)))

    segments: List[DiffSegment] = []
    for kind, text in pieces:
        if not text:
            continue
        if segments and segments[-1].kind == kind:
            segments[-1].text += text
        else:
            segments.append(DiffSegment(kind, text))
    return segments


@dataclass
class FileDiff:
    """Line-level diff of one modified path."""
    path: str
    old_hash: str
    new_hash: str
    segments: List[DiffSegment]

    @property
    def has_changes(self) -> bool:
        return any(s.kind != UNCHANGED for s in self.segments)


@dataclass
class CommitDiff:
    """Everything that changed between two commits."""
    before: Optional[object]
    after: object
    tree: TreeDiff
    files: List[FileDiff] = field(default_factory=list)


@dataclass
class TreeChange:
    """File structure before and after a commit."""
    commit: object
    parent: Optional[object]
    before: List[str]
    after: List[str]
    diff: TreeDiff


class DiffEngine:
    """
    Engine for computing diffs between commits.

    Combines the tree differ with the line differ: every path the tree
    diff marks as modified gets its two blobs loaded and line-diffed.
    """

    def __init__(self, repo):
        """
        Initialize diff engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def _text(self, hash: str) -> str:
        data = self.repo.objects.get(hash)
        return data.decode(self.repo.config.encoding, errors='replace')

    def diff_blobs(self, path: str, old_hash: str, new_hash: str) -> FileDiff:
        """
        Line-diff two stored blobs.

        Raises:
            ObjectNotFound: If either blob is missing from the store
        """
        old_text = self._text(old_hash)
        new_text = self._text(new_hash)
        return FileDiff(path, old_hash, new_hash, diff_lines(old_text, new_text))

    def diff_commits(self, before, after) -> CommitDiff:
        """
        Compute diff between two commits.

        Args:
            before: Older Commit, or None for a root commit
            after: Newer Commit

        Returns:
            CommitDiff with the tree diff and one FileDiff per modified path
        """
        old_files = before.file_map if before is not None else {}
        new_files = after.file_map

        tree = diff_trees(before.files if before is not None else None, after.files)
        files = [
            self.diff_blobs(path, old_files[path], new_files[path])
            for path in tree.sorted_modified()
        ]
        logger.debug(
            "diff %s..%s: %s",
            before.hash[:7] if before is not None else 'root', after.hash[:7], tree.summary()
        )
        return CommitDiff(before=before, after=after, tree=tree, files=files)

    def tree_change(self, commit, parent=None) -> TreeChange:
        """
        Describe a commit's file structure against its parent.

        Args:
            commit: Commit to describe
            parent: Its parent Commit, or None for a root commit
        """
        before = sorted(e.path for e in parent.files) if parent is not None else []
        after = sorted(e.path for e in commit.files)
        diff = diff_trees(parent.files if parent is not None else None, commit.files)
        return TreeChange(commit=commit, parent=parent, before=before, after=after, diff=diff)
