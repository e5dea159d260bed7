"""Operations module for higher-level minivcs operations.

This module contains the diff logic:
- Tree (file-set) diffing
- Line diffing of modified files
- Commit-to-commit diff orchestration
"""

from minivcs.operations.diff import (DiffEngine, TreeDiff, DiffSegment, FileDiff, CommitDiff,
                                     TreeChange, diff_trees, diff_lines)

__all__ = [
    'DiffEngine', 'TreeDiff', 'DiffSegment', 'FileDiff', 'CommitDiff',
    'TreeChange', 'diff_trees', 'diff_lines',
]
