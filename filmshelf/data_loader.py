"""
Data loading and parsing module.
Turns raw movie records (from the remote service or a JSON catalog file) into Movie objects.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON documents
from typing import Any, Dict, List  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles parsing of raw movie records and loading of catalog files.
	"""

	# Fields every movie record must carry
	REQUIRED_FIELDS = ('id', 'title', 'director', 'year', 'rating')

	def load_movies_from_json(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a JSON catalog file.
		Accepts either a plain list of records or a json-server style document {"movies": [...]}.
		Records that cannot be parsed are skipped with a warning.
		"""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie catalog file not found: {filepath}")

		logger.info(f"[Loader] Loading movies from {filepath}...")  # log action

		with open(filepath, 'r', encoding='utf-8') as f:
			document = json.load(f)  # whole catalog fits in memory

		records = document.get('movies', []) if isinstance(document, dict) else document
		if not isinstance(records, list):
			raise ValueError(f"Movie catalog must be a list of records: {filepath}")

		movies = self.parse_movies(records)
		logger.info(f"[Loader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def parse_movies(self, records: List[Any]) -> List[Movie]:
		"""Parse a list of raw records, skipping the ones that are not valid movies."""
		movies = []  # accumulator for parsed Movie objects
		for position, record in enumerate(records):  # keep position for diagnostics
			try:
				movies.append(self.parse_movie(record))
			except (TypeError, ValueError) as e:
				logger.warning(f"[Loader] Skipping invalid movie record at position {position}: {e}")
				continue
		return movies

	def parse_movie(self, data: Dict[str, Any]) -> Movie:
		"""
		Convert a raw dictionary into a Movie.
		Raises ValueError when a required field is missing or has the wrong shape.
		"""
		if not isinstance(data, dict):
			raise ValueError(f"expected an object, got {type(data).__name__}")

		missing = [name for name in self.REQUIRED_FIELDS if data.get(name) is None]
		if missing:
			raise ValueError(f"missing fields {missing}")

		return Movie(
			id=self.parse_id(data['id']),
			title=str(data['title']).strip(),
			director=str(data['director']).strip(),
			poster=str(data.get('poster') or ''),  # posters are optional for filtering
			year=int(data['year']),
			rating=float(data['rating']),
		)

	@staticmethod
	def parse_id(raw: Any) -> int:
		"""Accept an integer id or its decimal string form (json-server may send ids as strings)."""
		if isinstance(raw, bool):  # bool is an int subclass
			raise ValueError(f"invalid id {raw!r}")
		if isinstance(raw, int):
			return raw
		if isinstance(raw, str) and raw.strip().isdigit():
			return int(raw.strip())
		raise ValueError(f"invalid id {raw!r}")

	def get_all_years(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all distinct release years, as strings."""
		return sorted({str(movie.year) for movie in movies})

	def get_all_directors(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all unique director names in the dataset."""
		directors = set()  # unique directors
		for movie in movies:  # iterate
			directors.add(movie.director)
		return sorted(directors)  # sorted output
