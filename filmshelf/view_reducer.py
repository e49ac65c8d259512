"""
View reducer.
Reconciles the movie collection, the active filter selection and the favorites into the list the user sees.

The state lives in one ViewState value. The module-level functions are pure: they take a state and
return a new one. ViewReducer holds the current state and performs the side effects (persistence, logging).
"""

from dataclasses import dataclass, field, replace  # immutable state records
from typing import Dict, Optional, Sequence, Tuple  # type annotations

from loguru import logger  # console logger

from .favorites import FavoritesRepository  # persist snapshot
from .filters import apply_filters  # single-pass filtering
from .models import Favorites, FilterPredicate, Movie, ShowFavoritesOutcome
from .storage import StorageError


@dataclass(frozen=True)
class ViewState:
	"""Everything the movie list is derived from, plus the list itself."""
	collection: Tuple[Movie, ...] = ()  # authoritative collection, fetch order
	predicate: FilterPredicate = field(default_factory=FilterPredicate)  # active filter selection
	favorites: Dict[int, bool] = field(default_factory=dict)  # sparse: absent means not a favorite
	filtered_movies: Tuple[Movie, ...] = ()  # what is displayed; always a subsequence of collection


def initial_state() -> ViewState:
	return ViewState()


def with_collection(state: ViewState, collection: Sequence[Movie]) -> ViewState:
	"""Show the whole collection unfiltered and reset the filter selection."""
	movies = tuple(collection)
	return replace(state, collection=movies, predicate=FilterPredicate.reset(), filtered_movies=movies)


def with_favorites(state: ViewState, favorites: Favorites) -> ViewState:
	return replace(state, favorites=dict(favorites))


def filter_view(state: ViewState, predicate: FilterPredicate) -> ViewState:
	"""Replace the filter selection and recompute the displayed list from the full collection."""
	return replace(
		state,
		predicate=predicate.copy(),
		filtered_movies=tuple(apply_filters(state.collection, predicate)),
	)


def flip_favorite(state: ViewState, movie_id: int) -> ViewState:
	favorites = dict(state.favorites)
	favorites[movie_id] = not favorites.get(movie_id, False)
	return replace(state, favorites=favorites)


def _is_showing_only_favorites(state: ViewState) -> bool:
	# Decided from what is displayed, not from a stored mode flag
	return len(state.filtered_movies) < len(state.collection) and all(
		state.favorites.get(movie.id, False) for movie in state.filtered_movies
	)


def show_only_favorites(state: ViewState) -> Tuple[ViewState, ShowFavoritesOutcome]:
	"""
	Toggle between the favorites-only list and the full collection.

	- Displaying a strict subset made only of favorites: restore the full, unfiltered collection.
	- Otherwise, if any movie of the collection is a favorite: display the favorites, keeping
	  the filter selection in place but not applying it.
	- Otherwise nothing changes and NO_FAVORITES is returned.
	"""
	if _is_showing_only_favorites(state):
		return replace(state, filtered_movies=state.collection), ShowFavoritesOutcome.SHOWING_ALL

	favorite_movies = tuple(movie for movie in state.collection if state.favorites.get(movie.id, False))
	if favorite_movies:
		return replace(state, filtered_movies=favorite_movies), ShowFavoritesOutcome.SHOWING_FAVORITES

	return state, ShowFavoritesOutcome.NO_FAVORITES


class ViewReducer:
	"""
	Holds the current ViewState and applies user actions to it.
	Favorites are written through to the repository after every toggle; the in-memory mapping stays authoritative.
	"""

	def __init__(self, repository: FavoritesRepository):
		self.repository = repository
		self._state = initial_state()
		self.last_persist_error: Optional[str] = None  # message of the last failed write, if any

	@property
	def state(self) -> ViewState:
		return self._state

	@property
	def filtered_movies(self) -> Tuple[Movie, ...]:
		return self._state.filtered_movies

	@property
	def favorites(self) -> Favorites:
		return dict(self._state.favorites)

	@property
	def predicate(self) -> FilterPredicate:
		return self._state.predicate.copy()

	def initialize(self, collection: Sequence[Movie]) -> None:
		self._state = with_collection(self._state, collection)
		logger.info(f"[Reducer] Initialized with {len(self._state.collection)} movies")

	def load_favorites(self) -> Favorites:
		"""Replace the in-memory favorites with the persisted ones (empty when missing or malformed)."""
		self._state = with_favorites(self._state, self.repository.load())
		return self.favorites

	def apply_filters(self, predicate: FilterPredicate) -> Tuple[Movie, ...]:
		self._state = filter_view(self._state, predicate)
		logger.info(f"[Reducer] Showing {len(self._state.filtered_movies)} of {len(self._state.collection)} movies")
		return self._state.filtered_movies

	def is_favorite(self, movie_id: int) -> bool:
		return self._state.favorites.get(movie_id, False)

	def favorite_movies(self) -> Tuple[Movie, ...]:
		"""Favorites present in the collection, in collection order."""
		return tuple(movie for movie in self._state.collection if self.is_favorite(movie.id))

	def toggle_favorite(self, movie_id: int) -> bool:
		"""
		Flip one movie's favorite flag and persist the whole mapping.
		A failed write is logged and kept in last_persist_error; the flip is never rolled back.
		Returns the new flag.
		"""
		self._state = flip_favorite(self._state, movie_id)
		flag = self.is_favorite(movie_id)
		logger.debug(f"[Reducer] Movie {movie_id} favorite={flag}")

		try:
			self.repository.persist_snapshot(self._state.favorites)
			self.last_persist_error = None
		except StorageError as e:
			self.last_persist_error = str(e)
			logger.error(f"[Reducer] Failed to save favorites: {e}")
		return flag

	def toggle_show_only_favorites(self) -> ShowFavoritesOutcome:
		self._state, outcome = show_only_favorites(self._state)
		if outcome is ShowFavoritesOutcome.NO_FAVORITES:
			logger.warning("[Reducer] No favorites to show")
		else:
			logger.info(f"[Reducer] {outcome.value}: {len(self._state.filtered_movies)} movies")
		return outcome
