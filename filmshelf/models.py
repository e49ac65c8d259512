"""
Data models for Filmshelf.
Defines the core data structures shared by the catalog, the filters and the view reducer.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Enum gives named, comparable outcome values
from enum import Enum  # status and outcome labels
# Import typing helpers for precise and self-documenting types
from typing import Dict, List, Tuple  # mappings, lists and fixed tuples


# Rating buckets offered by the filter panel, in display order
RATING_BUCKETS: Tuple[str, ...] = ('7+', '8+', '9+')

# Filter categories accepted by FilterPredicate.toggle
FILTER_CATEGORIES: Tuple[str, ...] = ('years', 'directors', 'ratings')


class FilmshelfError(Exception):
	"""Base class for every recoverable error raised by Filmshelf."""


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie as served by the remote movie service.
	Instances are immutable once fetched; the catalog owns them and everything else reads by reference.
	"""
	id: int  # unique identifier, stable across the session
	title: str  # human-readable title
	director: str  # director's name as served (not normalized, used as a filter value)
	poster: str  # URI of the poster image
	year: int  # release year as a number (e.g., 1999)
	rating: float  # average rating on a 0-10 scale


@dataclass(frozen=True)
class AvailableFilters:
	"""
	Distinct filter values present in the loaded collection.
	Both lists are sorted ascending lexicographically (years are strings).
	"""
	years: List[str] = field(default_factory=list)  # e.g. ["1994", "2010"]
	directors: List[str] = field(default_factory=list)  # e.g. ["Christopher Nolan"]


def _default_ratings() -> Dict[str, bool]:
	return {label: False for label in RATING_BUCKETS}


@dataclass
class FilterPredicate:
	"""
	The user's current filter selection.
	Each mapping holds option -> selected; an option that is absent or False is not selected.
	A category with nothing selected does not restrict the view.
	"""
	years: Dict[str, bool] = field(default_factory=dict)  # year string -> selected
	directors: Dict[str, bool] = field(default_factory=dict)  # director -> selected
	ratings: Dict[str, bool] = field(default_factory=_default_ratings)  # bucket label -> selected

	def toggle(self, category: str, value: str) -> 'FilterPredicate':
		"""Flip one option of a category and return a new predicate."""
		if category not in FILTER_CATEGORIES:
			raise ValueError(f"Unknown filter category: {category}")
		options = dict(getattr(self, category))  # copy so the receiver stays untouched
		options[value] = not options.get(value, False)
		return FilterPredicate(
			years=options if category == 'years' else dict(self.years),
			directors=options if category == 'directors' else dict(self.directors),
			ratings=options if category == 'ratings' else dict(self.ratings),
		)

	@classmethod
	def reset(cls) -> 'FilterPredicate':
		"""Return the default predicate: nothing selected."""
		return cls()

	def is_empty(self) -> bool:
		"""True when no option in any category is selected."""
		return not any(
			selected
			for options in (self.years, self.directors, self.ratings)
			for selected in options.values()
		)

	def copy(self) -> 'FilterPredicate':
		return FilterPredicate(years=dict(self.years), directors=dict(self.directors), ratings=dict(self.ratings))


class CatalogStatus(str, Enum):
	"""Lifecycle of the catalog load."""
	IDLE = 'idle'
	LOADING = 'loading'
	READY = 'ready'
	ERROR = 'error'


class ShowFavoritesOutcome(str, Enum):
	"""Result of toggling the favorites-only view."""
	SHOWING_FAVORITES = 'showing_favorites'  # view switched to favorites only
	SHOWING_ALL = 'showing_all'  # view restored to the full collection
	NO_FAVORITES = 'no_favorites'  # nothing to show; view untouched


# Favorites mapping: movie id -> favorite flag (absent means False)
Favorites = Dict[int, bool]
