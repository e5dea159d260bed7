"""minivcs - a minimal content-addressable version control core."""

__version__ = '0.1.0'

from minivcs.core.repository import Repository
from minivcs.core.objects import VcsObject, Blob, Commit
from minivcs.core.index import IndexEntry
from minivcs.operations.diff import TreeDiff, DiffSegment, diff_trees, diff_lines

__all__ = [
    'Repository',
    'VcsObject',
    'Blob',
    'Commit',
    'IndexEntry',
    'TreeDiff',
    'DiffSegment',
    'diff_trees',
    'diff_lines',
]
