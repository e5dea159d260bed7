"""Core functionality for minivcs.

This module contains the core data structures:
- Stored objects (Blob, Commit)
- Object store
- Index/staging area
- HEAD management
- Configuration management
- Repository handle
- Hashing utilities

For diffing, see minivcs.operations
"""

from minivcs.core.errors import (VcsError, StorageUnavailable, ObjectNotFound, CommitNotFound,
                                 NothingToCommit, RepositoryAlreadyInitialized, NotARepository)
from minivcs.core.objects import VcsObject, Blob, Commit
from minivcs.core.store import ObjectStore
from minivcs.core.index import Index, IndexEntry
from minivcs.core.refs import HeadRef
from minivcs.core.config import Config, get_config
from minivcs.core.repository import Repository
from minivcs.core.hash import hash_object, is_hash

__all__ = [
    'VcsError',
    'StorageUnavailable',
    'ObjectNotFound',
    'CommitNotFound',
    'NothingToCommit',
    'RepositoryAlreadyInitialized',
    'NotARepository',
    'VcsObject',
    'Blob',
    'Commit',
    'ObjectStore',
    'Index',
    'IndexEntry',
    'HeadRef',
    'Config',
    'get_config',
    'Repository',
    'hash_object',
    'is_hash',
]
