"""Content-addressable object store."""

import logging
import os
import tempfile
from pathlib import Path
from typing import List

from .errors import ObjectNotFound, StorageUnavailable
from .hash import hash_object, is_hash

logger = logging.getLogger(__name__)


def atomic_write(path: Path, data: bytes) -> None:
    """
    Write bytes to path so readers see either the old file or the new one.

    The data goes to a temporary file in the same directory which is then
    renamed over the target.

    Raises:
        StorageUnavailable: On any I/O failure
    """
    try:
        fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix='.tmp-')
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
            os.replace(tmp_name, str(path))
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as e:
        raise StorageUnavailable(f"Cannot write {path}: {e}") from e


class ObjectStore:
    """
    Maps content hashes to immutable bytes.

    Blobs and serialized commits share one flat directory, one file per
    object named by its hash. Objects are never overwritten or deleted.
    """

    def __init__(self, objects_dir: Path):
        """
        Initialize object store.

        Args:
            objects_dir: Directory holding one file per object
        """
        self.objects_dir = Path(objects_dir)

    @staticmethod
    def hash(content: bytes) -> str:
        """Return the storage key for content."""
        return hash_object(content)

    def object_path(self, hash: str) -> Path:
        return self.objects_dir / hash

    def exists(self, hash: str) -> bool:
        """Check if an object is stored under hash."""
        return is_hash(hash) and self.object_path(hash).is_file()

    def put(self, content: bytes) -> str:
        """
        Store content under its hash.

        Writing content that is already present is a no-op.

        Args:
            content: Raw bytes

        Returns:
            str: 40-character SHA-1 hash

        Raises:
            StorageUnavailable: If the object cannot be written
        """
        hash = self.hash(content)
        path = self.object_path(hash)

        # Object already exists
        if path.exists():
            return hash

        atomic_write(path, content)
        logger.debug("wrote object %s (%d bytes)", hash, len(content))
        return hash

    def get(self, hash: str) -> bytes:
        """
        Read the content stored under hash.

        Raises:
            ObjectNotFound: If hash is not a full object hash or nothing
                is stored under it
            StorageUnavailable: On any other I/O failure
        """
        if not is_hash(hash):
            raise ObjectNotFound(hash)

        path = self.object_path(hash)
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            raise ObjectNotFound(hash) from None
        except OSError as e:
            raise StorageUnavailable(f"Cannot read object {hash}: {e}") from e

    def find(self, prefix: str) -> List[str]:
        """
        List stored hashes starting with prefix.

        Args:
            prefix: Leading hex characters of a hash

        Returns:
            Sorted list of matching hashes
        """
        try:
            return sorted(
                p.name for p in self.objects_dir.iterdir()
                if p.name.startswith(prefix) and is_hash(p.name) and p.is_file()
            )
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageUnavailable(f"Cannot list objects: {e}") from e

    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"
