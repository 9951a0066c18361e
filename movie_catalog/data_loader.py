"""
Data loading module.
Loads the movie catalog from a JSON array and converts it into typed records.

A broken source never crashes the service: any problem is logged and the
loader hands back an empty (still queryable) catalog instead.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read the JSON document
from typing import Any, Dict, List, Sequence, Set, Tuple  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


class CatalogLoadError(ValueError):
	"""The catalog source is missing or malformed."""


class DataLoader:
	"""
	Handles loading and validation of movie data.
	"""

	# Source key -> (Movie field, accepted JSON types), in Movie field order
	FIELDS: Tuple[Tuple[str, str, Tuple[type, ...]], ...] = (
		('id', 'id', (int,)),
		('movieName', 'movie_name', (str,)),
		('director', 'director', (str,)),
		('year', 'year', (int,)),
		('genre', 'genre', (str,)),
		('description', 'description', (str,)),
		('duration', 'duration', (int,)),
		('imdbRating', 'imdb_rating', (int, float)),  # whole numbers are valid ratings
	)

	def load_movies_from_json(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a JSON file holding one array of movie objects.
		Returns a list of Movie objects in file order, or an empty list if the
		file is missing or any record is malformed.
		"""
		filepath = Path(filepath)  # normalize path
		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		try:
			if not filepath.exists():
				raise CatalogLoadError(f"Movie data file not found: {filepath}")
			with open(filepath, 'r', encoding='utf-8') as f:
				try:
					records = json.load(f)  # parse whole document
				# ValueError covers JSONDecodeError, UnicodeDecodeError and over-long int literals
				except (ValueError, RecursionError) as e:
					raise CatalogLoadError(f"Invalid JSON in {filepath}: {e}") from e
			movies = self._parse_records(records)  # validate and convert
		except (CatalogLoadError, OSError) as e:
			logger.error(f"[DataLoader] Failed to load movies, serving an empty catalog: {e}")
			return []

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def parse_records(self, records: Any) -> List[Movie]:
		"""
		Convert an already-decoded record sequence into Movie objects.
		Same degrade-to-empty policy as load_movies_from_json.
		"""
		try:
			movies = self._parse_records(records)
		except CatalogLoadError as e:
			logger.error(f"[DataLoader] Failed to parse movie records, serving an empty catalog: {e}")
			return []
		logger.info(f"[DataLoader] Successfully parsed {len(movies)} movies.")
		return movies

	def _parse_records(self, records: Any) -> List[Movie]:
		"""Validate the whole sequence; the first bad record rejects the source."""
		if not isinstance(records, list):
			raise CatalogLoadError(f"Expected a JSON array of movies, got {type(records).__name__}")

		movies: List[Movie] = []  # accumulator in source order
		seen_ids: Set[int] = set()  # ids must be unique across the source
		for position, data in enumerate(records):
			movie = self._parse_movie_data(data, position)  # convert dict -> Movie
			if movie.id in seen_ids:
				raise CatalogLoadError(f"Duplicate movie id {movie.id} at record {position}")
			seen_ids.add(movie.id)
			movies.append(movie)
		return movies

	def _parse_movie_data(self, data: Dict, position: int) -> Movie:
		"""
		Convert a raw dictionary (from file) into a strongly-typed Movie object.
		Every field is required; nothing is defaulted.
		"""
		if not isinstance(data, dict):
			raise CatalogLoadError(f"Record {position} is not an object")

		values: Dict[str, Any] = {}
		for key, field_name, accepted in self.FIELDS:
			if key not in data:
				raise CatalogLoadError(f"Record {position} is missing required field '{key}'")
			value = data[key]
			# bool is an int subclass in Python but never a valid number here
			if isinstance(value, bool) or not isinstance(value, accepted):
				raise CatalogLoadError(
					f"Record {position} field '{key}' has type {type(value).__name__}, "
					f"expected {' or '.join(t.__name__ for t in accepted)}"
				)
			values[field_name] = value

		if values['id'] <= 0:
			raise CatalogLoadError(f"Record {position} has non-positive id {values['id']}")
		if not values['movie_name'].strip():
			raise CatalogLoadError(f"Record {position} has an empty movieName")

		values['imdb_rating'] = float(values['imdb_rating'])  # widen whole-number ratings
		return Movie(**values)

	def get_year_range(self, movies: Sequence[Movie]) -> Tuple[int, int]:
		"""Return (earliest, latest) release year; (0, 0) for an empty dataset."""
		years = [movie.year for movie in movies]
		if not years:
			return (0, 0)
		return (min(years), max(years))
