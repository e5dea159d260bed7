"""Head pointer management for minivcs."""

import logging
from pathlib import Path
from typing import Optional

from .errors import StorageUnavailable
from .store import atomic_write

logger = logging.getLogger(__name__)


class HeadRef:
    """
    Manages the HEAD file.

    HEAD holds the hash of the most recent commit as plain text, or is
    empty when no commits exist yet. There are no branches or symbolic
    references.
    """

    def __init__(self, head_file: Path):
        """
        Initialize head reference.

        Args:
            head_file: Path to the HEAD file
        """
        self.head_file = Path(head_file)

    def resolve_head(self) -> Optional[str]:
        """
        Return the current head commit hash.

        Returns:
            Commit hash or None if there are no commits (or no HEAD file)
        """
        try:
            content = self.head_file.read_text(encoding='utf-8').strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageUnavailable(f"Cannot read HEAD: {e}") from e

        return content or None

    def set_head(self, commit_hash: str) -> None:
        """
        Point HEAD at commit_hash.

        The caller is responsible for having stored the commit first.
        """
        atomic_write(self.head_file, (commit_hash + '\n').encode('utf-8'))
        logger.debug("HEAD -> %s", commit_hash)

    def __repr__(self) -> str:
        return f"HeadRef(head={self.resolve_head()})"
