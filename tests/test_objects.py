"""Stored object tests."""

import json
import pytest
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from minivcs.core.objects import Blob, Commit
from minivcs.core.index import IndexEntry
from minivcs.core.hash import hash_object


FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_blob_creation():
    """Test blob creation with data."""
    blob = Blob(b'hello world')
    assert blob.data == b'hello world'
    assert blob.type == 'blob'


def test_blob_hash_is_content_hash():
    """Test blob hash equals the hash of its raw bytes."""
    blob = Blob(b'hello')
    assert blob.hash == hash_object(b'hello')


def test_blob_from_file():
    """Test blob creation from file."""
    with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        f.write('file content')
        temp_path = f.name
    
    try:
        blob = Blob.from_file(temp_path)
        assert blob.data == b'file content'
    finally:
        Path(temp_path).unlink()


def make_commit(message='msg', parent=None):
    files = [IndexEntry('a.txt', 'a' * 40), IndexEntry('b.txt', 'b' * 40)]
    return Commit.create(message=message, files=files, parent=parent, timestamp=FIXED_TIME)


def test_commit_create():
    """Test creating commit with create() method."""
    commit = make_commit(parent='c' * 40)
    assert commit.type == 'commit'
    assert commit.message == 'msg'
    assert commit.parent == 'c' * 40
    assert [e.path for e in commit.files] == ['a.txt', 'b.txt']
    assert commit.timestamp == FIXED_TIME


def test_commit_create_defaults_to_now():
    """Test timestamp defaults to the current UTC time."""
    commit = Commit.create(message='m', files=[])
    assert commit.timestamp.tzinfo is not None
    assert abs((datetime.now(timezone.utc) - commit.timestamp).total_seconds()) < 60


def test_commit_files_are_a_copy():
    """Test later changes to the staged list do not leak into the commit."""
    entries = [IndexEntry('a.txt', 'a' * 40)]
    commit = Commit.create(message='m', files=entries, timestamp=FIXED_TIME)
    entries[0].hash = 'f' * 40
    entries.append(IndexEntry('b.txt', 'b' * 40))
    assert commit.files == [IndexEntry('a.txt', 'a' * 40)]


def test_commit_serialize_format():
    """Test commit serializes to a JSON record of its logical fields."""
    record = json.loads(make_commit().serialize())
    assert list(record) == ['timestamp', 'message', 'files', 'parent']
    assert record['timestamp'] == '2024-01-02T03:04:05+00:00'
    assert record['files'] == [
        {'path': 'a.txt', 'hash': 'a' * 40},
        {'path': 'b.txt', 'hash': 'b' * 40},
    ]
    assert record['parent'] is None


def test_commit_hash_excludes_itself():
    """Test the hash is computed over the logical fields only."""
    commit = make_commit()
    data = commit.serialize()
    assert commit.hash == hash_object(data)
    assert commit.hash.encode() not in data
    assert b'"hash":"' + commit.hash.encode() not in data


def test_commit_hash_deterministic():
    """Test identical logical content gives identical hashes."""
    assert make_commit().hash == make_commit().hash


def test_commit_hash_depends_on_fields():
    """Test message and parent both feed the hash."""
    base = make_commit()
    assert make_commit(message='other').hash != base.hash
    assert make_commit(parent='c' * 40).hash != base.hash


def test_commit_roundtrip():
    """Test commit serialize/deserialize cycle keeps hash and fields."""
    original = make_commit(message='multi\nline ünïcode', parent='c' * 40)
    restored = Commit()
    restored.deserialize(original.serialize())

    assert restored.message == original.message
    assert restored.parent == original.parent
    assert restored.files == original.files
    assert restored.timestamp == original.timestamp
    assert restored.hash == original.hash


def test_commit_deserialize_rejects_blob_data():
    """Test non-commit bytes raise ValueError."""
    with pytest.raises(ValueError):
        Commit().deserialize(b'hello world')
    with pytest.raises(ValueError):
        Commit().deserialize(b'{"message": "no other fields"}')
    with pytest.raises(ValueError):
        Commit().deserialize(b'\xff\xfe')


def test_commit_file_map():
    """Test file_map maps paths to hashes."""
    assert make_commit().file_map == {'a.txt': 'a' * 40, 'b.txt': 'b' * 40}
