"""Hash utilities for minivcs."""

import hashlib

HASH_LENGTH = 40
HEX_DIGITS = frozenset('0123456789abcdef')


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    This is the only addressing scheme used by the object store: blobs and
    serialized commits are both keyed by the digest of their raw bytes.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return hashlib.sha1(data).hexdigest()


def is_hash(value) -> bool:
    """Check that value looks like a full object hash (40 lowercase hex chars)."""
    return (isinstance(value, str) and len(value) == HASH_LENGTH
            and all(c in HEX_DIGITS for c in value))
