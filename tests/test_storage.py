"""
Tests for the key-value stores.
Run: pytest tests/test_storage.py
"""

import json

import pytest

from filmshelf.storage import JsonFileStorage, MemoryStorage, StorageError


def test_memory_storage():
	storage = MemoryStorage({'a': '1'})
	assert storage.get_item('a') == '1'
	assert storage.get_item('b') is None
	storage.set_item('b', '2')
	assert storage.get_item('b') == '2'


def test_json_file_storage_creates_parent_dirs(tmp_path):
	path = tmp_path / 'nested' / 'dir' / 'store.json'
	storage = JsonFileStorage(str(path))
	assert storage.get_item('favorites') is None

	storage.set_item('favorites', '{"1": true}')
	storage.set_item('other', 'x')
	assert json.loads(path.read_text()) == {'favorites': '{"1": true}', 'other': 'x'}
	assert storage.get_item('favorites') == '{"1": true}'
	# No temp files left behind
	assert [p.name for p in path.parent.iterdir()] == ['store.json']


def test_json_file_storage_unreadable_file(tmp_path):
	path = tmp_path / 'store.json'
	path.write_text('garbage')
	storage = JsonFileStorage(str(path))
	with pytest.raises(StorageError):
		storage.get_item('favorites')

	# Writing replaces the unreadable document
	storage.set_item('favorites', '{}')
	assert storage.get_item('favorites') == '{}'


def test_json_file_storage_non_string_value(tmp_path):
	path = tmp_path / 'store.json'
	path.write_text(json.dumps({'favorites': {'1': True}}))
	assert JsonFileStorage(str(path)).get_item('favorites') is None


def test_json_file_storage_write_failure(tmp_path):
	blocker = tmp_path / 'blocker'
	blocker.write_text('a file, not a directory')
	storage = JsonFileStorage(str(blocker / 'store.json'))
	with pytest.raises(StorageError):
		storage.set_item('favorites', '{}')


def test_json_file_storage_failed_replace_leaves_no_temp_file(tmp_path):
	# The target path is a directory, so the final replace fails after the temp file is written
	(tmp_path / 'store.json').mkdir()
	storage = JsonFileStorage(str(tmp_path / 'store.json'))
	with pytest.raises(StorageError):
		storage.set_item('favorites', '{}')
	assert sorted(p.name for p in tmp_path.iterdir()) == ['store.json']


def test_json_file_storage_deeply_nested_file(tmp_path):
	path = tmp_path / 'store.json'
	path.write_text('[' * 200000)
	storage = JsonFileStorage(str(path))
	with pytest.raises(StorageError):
		storage.get_item('favorites')
