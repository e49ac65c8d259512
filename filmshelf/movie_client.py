"""
HTTP client for the remote movie service.
The service is a plain resource: GET <base> lists every movie, GET <base>/<id> returns one.
"""

from typing import Any, List, Optional  # type annotations

# HTTP client library
import requests  # make web requests to the movie service

from loguru import logger  # console logger

from .data_loader import DataLoader  # raw record -> Movie
from .models import FilmshelfError, Movie  # core data classes


class MovieClientError(FilmshelfError):
	"""Raised when the movie service cannot be reached or returns something unusable."""


class MovieClient:
	"""
	Fetches movies from the remote service.
	Every failure (network, HTTP status, payload shape) surfaces as MovieClientError.
	"""

	def __init__(
		self,
		base_url: str = 'http://localhost:3001/movies',  # collection endpoint
		timeout: float = 10.0,  # seconds per request
		session: Optional[Any] = None,  # requests.Session or anything with .get()
	):
		self.base_url = base_url.rstrip('/')  # avoid double slashes when joining ids
		self.timeout = timeout
		self.session = session or requests.Session()
		self.loader = DataLoader()  # shared record parser

	def _get_json(self, url: str) -> Any:
		"""GET a URL and decode its JSON body."""
		logger.debug(f"[Client] GET {url}")
		try:
			resp = self.session.get(url, timeout=self.timeout)
			resp.raise_for_status()  # raise error if server responded with an error code
			return resp.json()  # parse JSON returned by the service
		except requests.RequestException as e:  # network/HTTP errors
			logger.error(f"[Client] Request to {url} failed: {e}")
			raise MovieClientError(f"Request to {url} failed: {e}") from e
		except (ValueError, RecursionError) as e:  # body is not JSON
			logger.error(f"[Client] Invalid JSON from {url}: {e}")
			raise MovieClientError(f"Invalid JSON from {url}") from e

	def fetch_movies(self) -> List[Movie]:
		"""Fetch the full collection, in the order the service returns it."""
		payload = self._get_json(self.base_url)
		if not isinstance(payload, list):
			raise MovieClientError(f"Expected a list of movies, got {type(payload).__name__}")
		movies = self.loader.parse_movies(payload)  # malformed records are skipped
		logger.info(f"[Client] Fetched {len(movies)} movies")
		return movies

	def fetch_movie_by_id(self, movie_id: int) -> Movie:
		"""Fetch a single movie by id."""
		payload = self._get_json(f"{self.base_url}/{movie_id}")
		try:
			return self.loader.parse_movie(payload)
		except (TypeError, ValueError) as e:
			raise MovieClientError(f"Invalid movie record for id {movie_id}: {e}") from e
