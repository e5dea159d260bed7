"""Unit tests for the object store."""

import os
import pytest
from minivcs.core.store import ObjectStore, atomic_write
from minivcs.core.errors import ObjectNotFound, StorageUnavailable
from minivcs.core.hash import hash_object


@pytest.fixture
def store(temp_dir):
    objects_dir = temp_dir / 'objects'
    objects_dir.mkdir()
    return ObjectStore(objects_dir)


def test_put_get_roundtrip(store):
    """get(put(c)) == c"""
    for content in [b'', b'hello', b'line1\nline2\n', bytes(range(256))]:
        assert store.get(store.put(content)) == content


def test_put_returns_content_hash(store):
    assert store.put(b'hello') == hash_object(b'hello')


def test_objects_stored_flat_by_hash(store):
    """Test one file per object named by its hash."""
    h = store.put(b'data')
    assert (store.objects_dir / h).read_bytes() == b'data'


def test_put_idempotent(store):
    """Test writing the same content twice stores one object."""
    first = store.put(b'same')
    mtime = os.stat(store.object_path(first)).st_mtime_ns
    second = store.put(b'same')

    assert first == second
    assert len(list(store.objects_dir.iterdir())) == 1
    assert os.stat(store.object_path(first)).st_mtime_ns == mtime


def test_put_leaves_no_temp_files(store):
    store.put(b'a')
    store.put(b'b')
    assert all(not p.name.startswith('.tmp-') for p in store.objects_dir.iterdir())


def test_get_missing_raises(store):
    with pytest.raises(ObjectNotFound) as excinfo:
        store.get('0' * 40)
    assert excinfo.value.hash == '0' * 40


def test_exists(store):
    h = store.put(b'x')
    assert store.exists(h)
    assert not store.exists('0' * 40)
    assert not store.exists('../' + h)


def test_get_rejects_non_hash_keys(store, temp_dir):
    (temp_dir / 'secret').write_bytes(b'outside')
    for key in ('../secret', 'secret', ''):
        with pytest.raises(ObjectNotFound):
            store.get(key)


def test_find_ignores_stray_files(store):
    h = store.put(b'x')
    (store.objects_dir / (h[:6] + '.bak')).write_bytes(b'x')
    assert store.find(h[:6]) == [h]


def test_find_prefix(store):
    h1 = store.put(b'one')
    h2 = store.put(b'two')
    assert store.find(h1[:6]) == [h1]
    assert store.find('') == sorted([h1, h2])
    assert store.find('zzzz') == []


def test_put_into_missing_directory_raises(temp_dir):
    store = ObjectStore(temp_dir / 'nope')
    with pytest.raises(StorageUnavailable):
        store.put(b'data')


def test_atomic_write_replaces_content(temp_dir):
    target = temp_dir / 'file'
    atomic_write(target, b'old')
    atomic_write(target, b'new')
    assert target.read_bytes() == b'new'
    assert [p.name for p in temp_dir.iterdir()] == ['file']
