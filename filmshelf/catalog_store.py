"""
Catalog store.
Owns the movie collection fetched at startup and the filter values derived from it.
"""

from typing import List, Optional  # type annotations

from loguru import logger  # console logger

from .filters import derive_available_filters  # distinct years/directors
from .models import AvailableFilters, CatalogStatus, Movie
from .movie_client import MovieClient, MovieClientError

# Message shown to the user when the collection cannot be fetched
FETCH_ERROR_MESSAGE = 'Failed to fetch movies'


class CatalogStore:
	"""
	Loads the collection once through a MovieClient and keeps it read-only afterwards.
	A failed load leaves the collection empty and exposes a user-facing error message.
	"""

	def __init__(self, client: MovieClient):
		self.client = client
		self._movies: List[Movie] = []
		self._available_filters = AvailableFilters()
		self._status = CatalogStatus.IDLE
		self._error: Optional[str] = None

	@property
	def movies(self) -> List[Movie]:
		return list(self._movies)

	@property
	def available_filters(self) -> AvailableFilters:
		return self._available_filters

	@property
	def status(self) -> CatalogStatus:
		return self._status

	@property
	def error(self) -> Optional[str]:
		return self._error

	@property
	def is_loading(self) -> bool:
		return self._status == CatalogStatus.LOADING

	def load(self) -> List[Movie]:
		"""Fetch the full collection and derive the available filters. Not retried on failure."""
		self._status = CatalogStatus.LOADING
		self._error = None
		logger.info("[Catalog] Loading movies...")

		try:
			movies = self.client.fetch_movies()
		except MovieClientError as e:
			logger.error(f"[Catalog] {FETCH_ERROR_MESSAGE}: {e}")
			self._movies = []
			self._available_filters = AvailableFilters()
			self._status = CatalogStatus.ERROR
			self._error = FETCH_ERROR_MESSAGE
			return []
		except Exception:
			logger.exception("[Catalog] Unexpected error while loading movies")
			self._movies = []
			self._available_filters = AvailableFilters()
			self._status = CatalogStatus.ERROR
			self._error = FETCH_ERROR_MESSAGE
			raise

		self._movies = list(movies)
		self._available_filters = derive_available_filters(self._movies)
		self._status = CatalogStatus.READY
		logger.info(
			f"[Catalog] Loaded {len(self._movies)} movies | {len(self._available_filters.years)} years, "
			f"{len(self._available_filters.directors)} directors"
		)
		return self.movies

	def get_movie(self, movie_id: int) -> Optional[Movie]:
		"""Return a movie from the loaded collection, asking the service when it is not there."""
		for movie in self._movies:
			if movie.id == movie_id:
				return movie
		try:
			return self.client.fetch_movie_by_id(movie_id)
		except MovieClientError as e:
			logger.warning(f"[Catalog] Movie {movie_id} not available: {e}")
			return None
