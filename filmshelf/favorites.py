"""
Favorites persistence.
The favorites mapping is stored as one JSON object blob {"<movie id>": true|false} under a fixed key.
"""

import json  # blob format
from typing import Dict  # type annotations

from loguru import logger  # console logger

from .models import Favorites, FilmshelfError
from .storage import KeyValueStorage, StorageError

# Storage key of the favorites blob
FAVORITES_KEY = 'favorites'


class MalformedFavoritesError(FilmshelfError):
	"""Raised when a favorites blob cannot be decoded."""


def serialize_favorites(favorites: Favorites) -> str:
	"""Encode the mapping; JSON object keys are the ids as strings."""
	return json.dumps({str(movie_id): bool(flag) for movie_id, flag in favorites.items()})


def deserialize_favorites(blob: str) -> Favorites:
	"""
	Decode a blob into a mapping.
	The blob must be a JSON object; entries with a non-integer key or a non-boolean value are skipped.
	"""
	try:
		data = json.loads(blob)
	except (TypeError, ValueError, RecursionError) as e:
		raise MalformedFavoritesError(f"Favorites blob is not valid JSON: {e}") from e
	if not isinstance(data, dict):
		raise MalformedFavoritesError(f"Favorites blob must be an object, got {type(data).__name__}")

	favorites: Dict[int, bool] = {}
	for key, flag in data.items():
		try:
			movie_id = int(key)
		except ValueError:
			logger.warning(f"[Favorites] Skipping entry with non-numeric id: {key!r}")
			continue
		if not isinstance(flag, bool):
			logger.warning(f"[Favorites] Skipping entry {key!r} with non-boolean value: {flag!r}")
			continue
		favorites[movie_id] = flag
	return favorites


class FavoritesRepository:
	"""
	Reads and writes the favorites snapshot through a key-value store.
	The reducer only ever calls load() once and persist_snapshot() after each change.
	"""

	def __init__(self, storage: KeyValueStorage, key: str = FAVORITES_KEY):
		self.storage = storage
		self.key = key

	def load(self) -> Favorites:
		"""Return the stored mapping, or an empty one if it is absent, unreadable or malformed."""
		try:
			blob = self.storage.get_item(self.key)
		except StorageError as e:
			logger.warning(f"[Favorites] Could not read favorites, starting empty: {e}")
			return {}
		if not blob:
			logger.debug("[Favorites] No saved favorites")
			return {}
		try:
			favorites = deserialize_favorites(blob)
		except MalformedFavoritesError as e:
			logger.warning(f"[Favorites] Ignoring malformed favorites: {e}")
			return {}
		logger.info(f"[Favorites] Loaded {sum(1 for flag in favorites.values() if flag)} favorites")
		return favorites

	def persist_snapshot(self, favorites: Favorites) -> None:
		"""Overwrite the stored blob with the full mapping. Raises StorageError on failure."""
		self.storage.set_item(self.key, serialize_favorites(favorites))
		logger.debug(f"[Favorites] Persisted {len(favorites)} entries")
