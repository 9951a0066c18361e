"""
Configuration for the Movie Catalog.
Settings come from environment variables prefixed with MOVIE_CATALOG_
(e.g. MOVIE_CATALOG_DATA_PATH, MOVIE_CATALOG_LOG_LEVEL).
"""

import sys  # stderr sink for loguru
from functools import lru_cache  # build settings once per process
from pathlib import Path  # filesystem paths

from loguru import logger  # console logger
from pydantic_settings import BaseSettings, SettingsConfigDict  # env-backed settings

# Repository root (one level above this package)
ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
	"""Application settings with environment variable support"""

	model_config = SettingsConfigDict(env_prefix='MOVIE_CATALOG_')

	app_name: str = 'Movie Catalog API'
	app_version: str = '1.0.0'
	data_path: Path = ROOT / 'data' / 'movies.json'  # JSON array of movie records
	log_level: str = 'INFO'


@lru_cache()
def get_settings() -> Settings:
	return Settings()


def configure_logging(level: str = 'INFO') -> None:
	"""Replace loguru's default sink with a single stderr sink at `level`."""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())
