"""
Configuration for Filmshelf.
Settings come from environment variables prefixed with FILMSHELF_ (or a local .env file).
"""

import sys  # stderr sink for the logger
from functools import lru_cache  # build settings once per process

from loguru import logger  # console logger
from pydantic_settings import BaseSettings, SettingsConfigDict  # env-backed settings


class Settings(BaseSettings):
	"""Application settings loaded from environment."""

	model_config = SettingsConfigDict(env_prefix='FILMSHELF_', env_file='.env', extra='ignore')

	# Remote movie service (collection endpoint; a movie lives at <api_url>/<id>)
	api_url: str = 'http://localhost:3001/movies'
	request_timeout: float = 10.0  # seconds per HTTP request

	# Local blob store holding the favorites mapping
	storage_path: str = '.filmshelf/storage.json'
	favorites_key: str = 'favorites'

	# Catalog file served by the development API
	catalog_path: str = 'data/movies.json'

	log_level: str = 'INFO'


@lru_cache
def get_settings() -> Settings:
	"""Return the process-wide settings instance."""
	return Settings()


def configure_logging(level: str = 'INFO') -> None:
	"""Replace loguru's default sink with a single stderr sink at the given level."""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())
	logger.debug(f"[Config] Logging configured at level {level.upper()}")
