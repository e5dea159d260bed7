"""Exception types raised by the minivcs core."""


class VcsError(Exception):
    """Base class for all minivcs errors."""


class StorageUnavailable(VcsError):
    """Raised when the repository's on-disk state cannot be read or written.

    Wraps the underlying ``OSError``, which is kept as ``__cause__``.
    """


class ObjectNotFound(VcsError):
    """Raised when no content is stored under a hash.

    Attributes:
        hash: The hash that failed to resolve.
    """

    def __init__(self, hash: str):
        self.hash = hash
        super().__init__(f"Object {hash} not found")


class CommitNotFound(VcsError):
    """Raised when a caller-named commit does not resolve.

    Attributes:
        rev: The revision string as given by the caller.
    """

    def __init__(self, rev: str, reason: str = 'commit not found'):
        self.rev = rev
        super().__init__(f"{reason}: {rev}")


class NothingToCommit(VcsError):
    """Raised by commit when the staging index is empty. Nothing is written."""

    def __init__(self):
        super().__init__("nothing to commit (staging area is empty)")


class RepositoryAlreadyInitialized(VcsError):
    """Raised by init when the repository directory already exists."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Repository already initialized at {path}")


class NotARepository(VcsError):
    """Raised when an operation runs against a directory with no repository."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Not a minivcs repository: {path}")
