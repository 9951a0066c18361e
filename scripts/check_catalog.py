"""
Check that a catalog file loads.

This script:
1) Loads movies from data/movies.json (or the path given on the command line)
2) Reports the record count, distinct genres and year range
3) Exits non-zero when the catalog came back empty

Usage:
    python -m scripts.check_catalog [path/to/movies.json]

The API degrades to an empty catalog on a bad file; run this before
deploying a new data file to catch that early.
"""

import sys  # command-line arguments and exit code
from typing import List, Optional  # type hints

from loguru import logger  # console logging

from movie_catalog.config import get_settings  # default data path
from movie_catalog.data_loader import DataLoader  # data ingestion
from movie_catalog.search_engine import SearchEngine  # distinct genre listing


def main(argv: Optional[List[str]] = None) -> int:
	args = sys.argv[1:] if argv is None else argv
	data_path = args[0] if args else str(get_settings().data_path)  # input dataset

	logger.info("=" * 60)
	logger.info("Check Movie Catalog")
	logger.info("=" * 60)

	# 1) Load data
	logger.info(f"[Check] Loading movies from {data_path}...")
	loader = DataLoader()  # loader instance
	movies = loader.load_movies_from_json(data_path)  # empty list on any failure
	if not movies:
		logger.error("[Check] Catalog is empty or invalid; see the loader error above")
		return 1

	# 2) Report
	genres = SearchEngine(movies).list_distinct_genres()
	first_year, last_year = loader.get_year_range(movies)
	logger.info(f"[Check] {len(movies)} movies, {len(genres)} distinct genres, years {first_year}-{last_year}")
	for genre in genres:
		logger.info(f"[Check]   {genre}")

	logger.info("[Check] Catalog OK.")
	return 0


if __name__ == '__main__':
	sys.exit(main())  # invoke checker
