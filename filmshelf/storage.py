"""
Key-value blob storage.
Values are opaque strings stored under string keys, the way a device-local store keeps them.
"""

import json  # on-disk document format
import os  # atomic replace
import tempfile  # write to a sibling temp file first
from pathlib import Path  # filesystem paths
from typing import Dict, Optional, Protocol  # type annotations

from loguru import logger  # console logger

from .models import FilmshelfError


class StorageError(FilmshelfError):
	"""Raised when the store cannot be read or written."""


class KeyValueStorage(Protocol):
	def get_item(self, key: str) -> Optional[str]:
		...

	def set_item(self, key: str, value: str) -> None:
		...


class MemoryStorage:
	"""In-process store; contents vanish with the process."""

	def __init__(self, initial: Optional[Dict[str, str]] = None):
		self._items: Dict[str, str] = dict(initial or {})

	def get_item(self, key: str) -> Optional[str]:
		return self._items.get(key)

	def set_item(self, key: str, value: str) -> None:
		self._items[key] = value


class JsonFileStorage:
	"""
	Store backed by a single JSON file mapping key -> string value.
	Each write rewrites the whole file through a temp file and os.replace.
	"""

	def __init__(self, path: str):
		self.path = Path(path)

	def _read_all(self) -> Dict[str, str]:
		if not self.path.exists():
			return {}
		try:
			with open(self.path, 'r', encoding='utf-8') as f:
				data = json.load(f)
		except (OSError, ValueError, RecursionError) as e:
			raise StorageError(f"Cannot read storage file {self.path}: {e}") from e
		if not isinstance(data, dict):
			raise StorageError(f"Storage file {self.path} does not hold an object")
		return data

	def get_item(self, key: str) -> Optional[str]:
		value = self._read_all().get(key)
		return value if isinstance(value, str) else None

	def set_item(self, key: str, value: str) -> None:
		try:
			items = self._read_all()
		except StorageError:
			logger.warning(f"[Storage] Overwriting unreadable storage file {self.path}")
			items = {}
		items[key] = value

		try:
			self.path.parent.mkdir(parents=True, exist_ok=True)
			fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix='.tmp')
		except OSError as e:
			raise StorageError(f"Cannot write storage file {self.path}: {e}") from e

		try:
			with os.fdopen(fd, 'w', encoding='utf-8') as f:
				json.dump(items, f, indent=2)
			os.replace(tmp_name, self.path)
		except (OSError, TypeError, ValueError) as e:
			try:
				os.unlink(tmp_name)  # the temp file never outlives a failed write
			except OSError as cleanup_error:
				logger.warning(f"[Storage] Could not remove temp file {tmp_name}: {cleanup_error}")
			raise StorageError(f"Cannot write storage file {self.path}: {e}") from e
		logger.debug(f"[Storage] Wrote key '{key}' to {self.path}")
