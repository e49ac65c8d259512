"""
Filtering module.
Applies the user's year, director and rating selection to the movie collection.
"""

from typing import Dict, List, Sequence  # type annotations

from loguru import logger  # console logger

from .data_loader import DataLoader  # distinct years/directors
from .models import RATING_BUCKETS, AvailableFilters, FilterPredicate, Movie


def selected_options(options: Dict[str, bool]) -> List[str]:
	"""Return the option keys whose value is True, in mapping order."""
	return [value for value, selected in options.items() if selected]


def rating_threshold(label: str) -> float:
	"""Numeric minimum rating of a bucket label: "8+" -> 8.0."""
	if label not in RATING_BUCKETS:
		raise ValueError(f"Unknown rating bucket: {label}")
	return float(label.rstrip('+'))


def matches_predicate(movie: Movie, predicate: FilterPredicate) -> bool:
	"""
	True when the movie satisfies every category of the predicate.
	Years and directors match any selected value; ratings match if at least one selected threshold is reached.
	"""
	years = selected_options(predicate.years)
	if years and str(movie.year) not in years:
		return False

	directors = selected_options(predicate.directors)
	if directors and movie.director not in directors:
		return False

	thresholds = [rating_threshold(label) for label in selected_options(predicate.ratings)]
	if thresholds and not any(movie.rating >= t for t in thresholds):
		return False

	return True


def apply_filters(movies: Sequence[Movie], predicate: FilterPredicate) -> List[Movie]:
	"""Single pass over the collection; keeps the collection's order."""
	result = [movie for movie in movies if matches_predicate(movie, predicate)]
	logger.debug(
		f"[Filters] Kept {len(result)} of {len(movies)} | years={selected_options(predicate.years)} "
		f"directors={selected_options(predicate.directors)} ratings={selected_options(predicate.ratings)}"
	)
	return result


def derive_available_filters(movies: Sequence[Movie]) -> AvailableFilters:
	"""Distinct years (as strings) and directors of the collection, each sorted ascending."""
	loader = DataLoader()
	return AvailableFilters(years=loader.get_all_years(movies), directors=loader.get_all_directors(movies))
