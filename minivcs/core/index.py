"""Index (staging area) implementation."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .errors import StorageUnavailable
from .store import atomic_write

logger = logging.getLogger(__name__)


@dataclass
class IndexEntry:
    """A staged path and the hash of its content."""
    path: str
    hash: str

    def __repr__(self) -> str:
        return f"IndexEntry({self.hash[:7]} {self.path})"


class Index:
    """
    minivcs index (staging area) implementation.

    The index is the ordered list of files that will make up the next
    commit, unique by path. It lives in a single JSON file that is
    rewritten as a whole on every change, so a reader never sees a
    partially updated index.
    """

    def __init__(self, index_file: Path):
        """
        Initialize index.

        Args:
            index_file: Path to the JSON index file
        """
        self.index_file = Path(index_file)

    def load(self) -> List[IndexEntry]:
        """
        Read the staged entries.

        A missing or empty index file is an empty index.

        Returns:
            Entries in staging order

        Raises:
            StorageUnavailable: If the file cannot be read or is corrupt
        """
        try:
            raw = self.index_file.read_text(encoding='utf-8')
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageUnavailable(f"Cannot read index: {e}") from e

        if not raw.strip():
            return []

        try:
            return [IndexEntry(path=item['path'], hash=item['hash']) for item in json.loads(raw)]
        except (ValueError, TypeError, KeyError) as e:
            raise StorageUnavailable(f"Corrupt index file {self.index_file}: {e}") from e

    def write(self, entries: List[IndexEntry]) -> None:
        """
        Replace the whole index with entries.

        Args:
            entries: Entries to persist, in order
        """
        payload = json.dumps([{'path': e.path, 'hash': e.hash} for e in entries])
        atomic_write(self.index_file, payload.encode('utf-8'))

    def stage(self, path: str, hash: str) -> None:
        """
        Add or update the entry for path.

        An already staged path keeps its position and gets the new hash;
        a new path is appended.

        Args:
            path: Repository-relative path
            hash: Hash of the staged content
        """
        entries = self.load()
        for entry in entries:
            if entry.path == path:
                entry.hash = hash
                break
        else:
            entries.append(IndexEntry(path=path, hash=hash))

        self.write(entries)
        logger.debug("staged %s as %s", path, hash)

    def unstage(self, path: str) -> bool:
        """
        Remove the entry for path.

        Returns:
            True if the path was staged
        """
        entries = self.load()
        remaining = [e for e in entries if e.path != path]
        if len(remaining) == len(entries):
            return False

        self.write(remaining)
        logger.debug("unstaged %s", path)
        return True

    def clear(self) -> None:
        """Reset to an empty index."""
        self.write([])

    def __repr__(self) -> str:
        return f"Index(path={self.index_file})"
