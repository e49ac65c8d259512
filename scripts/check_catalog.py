"""
Check that the movie service answers and show what the filter panel will offer.

This script:
1) Fetches the collection from FILMSHELF_API_URL
2) Derives the available years and directors
3) Loads the saved favorites and reports which of them are in the collection

Usage:
    python -m scripts.check_catalog
"""

import sys  # exit status

from loguru import logger  # console logging

from filmshelf.catalog_store import CatalogStore  # collection + filters
from filmshelf.config import configure_logging, get_settings  # env-backed settings
from filmshelf.favorites import FavoritesRepository  # saved favorites
from filmshelf.movie_client import MovieClient  # HTTP fetch collaborator
from filmshelf.storage import JsonFileStorage  # device-local blob store
from filmshelf.view_reducer import ViewReducer  # favorites lookups


def main() -> int:
	settings = get_settings()
	configure_logging(settings.log_level)

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Filmshelf Catalog Check")
	logger.info("=" * 60)

	# 1) Fetch
	logger.info(f"[1/3] Fetching movies from {settings.api_url}...")
	catalog = CatalogStore(MovieClient(settings.api_url, timeout=settings.request_timeout))
	movies = catalog.load()
	if catalog.error:
		logger.error(f"[FAIL] {catalog.error}")
		return 1
	logger.info(f"[OK] Fetched {len(movies)} movies")

	# 2) Filters
	logger.info("[2/3] Available filters")
	logger.info(f"  Years     : {', '.join(catalog.available_filters.years)}")
	logger.info(f"  Directors : {', '.join(catalog.available_filters.directors)}")

	# 3) Favorites
	logger.info(f"[3/3] Loading favorites from {settings.storage_path}...")
	reducer = ViewReducer(FavoritesRepository(JsonFileStorage(settings.storage_path), settings.favorites_key))
	reducer.load_favorites()
	reducer.initialize(movies)
	for movie in reducer.favorite_movies():
		logger.info(f"  ❤ {movie.title} ({movie.year})")
	logger.info(f"[OK] {len(reducer.favorite_movies())} favorites in the collection")

	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())
