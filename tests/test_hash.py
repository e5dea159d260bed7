"""Hash utilities tests."""

import hashlib
import pytest
from minivcs.core.hash import hash_object, is_hash


def test_hash_object_empty():
    """Test hashing empty bytes."""
    result = hash_object(b'')
    assert result == 'da39a3ee5e6b4b0d3255bfef95601890afd80709'


def test_hash_object_is_plain_sha1():
    """Test the digest covers the raw bytes with no header."""
    assert hash_object(b'hello') == hashlib.sha1(b'hello').hexdigest()


def test_hash_object_deterministic():
    """Test hash consistency for same input."""
    data = b'hello world'
    assert hash_object(data) == hash_object(data)


def test_hash_object_different_data():
    """Test different data produces different hashes."""
    assert hash_object(b'hello') != hash_object(b'world')


def test_is_hash_accepts_digests():
    assert is_hash(hash_object(b'x'))


@pytest.mark.parametrize('value', [
    '', 'abc', '../index', 'A' * 40, 'g' * 40, '0' * 39, '0' * 41, None,
])
def test_is_hash_rejects(value):
    assert not is_hash(value)
