"""Stored objects for minivcs."""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from .hash import hash_object
from .index import IndexEntry


class VcsObject(ABC):
    """Base class for all objects kept in the object store."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        The hash covers the serialized bytes only, exactly what the object
        store writes, so ``store.put(obj.serialize()) == obj.hash``.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


class Blob(VcsObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class Commit(VcsObject):
    """
    Represents a snapshot of the staged file set.

    A commit captures:
    - Timestamp (UTC)
    - Commit message
    - The staged files as an ordered list of (path, hash) entries
    - The parent commit hash, or None for the root commit

    The commit's own hash is never part of the serialized record; it is
    the storage key the record is written under.
    """

    FIELDS = ('timestamp', 'message', 'files', 'parent')

    def __init__(self):
        super().__init__()
        self.timestamp: datetime = datetime.fromtimestamp(0, timezone.utc)
        self.message: str = ''
        self.files: List[IndexEntry] = []
        self.parent: Optional[str] = None

    def to_dict(self) -> dict:
        """Return the logical fields in serialization order."""
        return {
            'timestamp': self.timestamp.isoformat(),
            'message': self.message,
            'files': [{'path': e.path, 'hash': e.hash} for e in self.files],
            'parent': self.parent,
        }

    def serialize(self) -> bytes:
        """
        Serialize commit to compact JSON.

        Keys are emitted in a fixed order with fixed separators so identical
        logical content always produces identical bytes.

        Returns:
            bytes: UTF-8 encoded JSON record
        """
        return json.dumps(
            self.to_dict(), separators=(',', ':'), ensure_ascii=False
        ).encode('utf-8')

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from JSON.

        Args:
            data: Serialized commit record

        Raises:
            ValueError: If the data is not a commit record
        """
        record = json.loads(data.decode('utf-8'))
        if not isinstance(record, dict) or any(f not in record for f in self.FIELDS):
            raise ValueError("Not a commit record")

        try:
            self.timestamp = datetime.fromisoformat(record['timestamp'])
            self.message = str(record['message'])
            self.files = [IndexEntry(path=f['path'], hash=f['hash']) for f in record['files']]
        except (TypeError, KeyError) as e:
            raise ValueError(f"Malformed commit record: {e}") from e

        self.parent = record['parent'] or None
        self._hash = None

    @classmethod
    def create(
        cls,
        message: str,
        files: List[IndexEntry],
        parent: Optional[str] = None,
        timestamp: Optional[datetime] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            message: Commit message
            files: Staged entries; copied so later index changes never leak in
            parent: Parent commit hash, None for a root commit
            timestamp: Commit time (defaults to now, UTC)

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.files = [IndexEntry(path=e.path, hash=e.hash) for e in files]
        commit.parent = parent
        commit.timestamp = timestamp or datetime.now(timezone.utc)
        return commit

    @property
    def file_map(self) -> dict:
        """Mapping of path to blob hash."""
        return {e.path: e.hash for e in self.files}

    def __repr__(self) -> str:
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
