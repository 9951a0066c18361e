"""
Search engine module.
Indexes the loaded catalog by id and answers listing, lookup, and filter queries.
"""

from typing import Dict, List, Optional, Sequence  # type annotations for clarity

# Import project modules for data structures and components
from .models import Movie, SearchQuery  # core data classes
from .query_parser import QueryParser  # criteria normalization

# Import loguru for console logging
from loguru import logger  # simple structured logger


class SearchEngine:
	"""
	Read-only query API over an in-memory movie catalog.

	Built once from the loader's output; nothing mutates the records or the id
	index afterwards, so one instance can serve any number of concurrent callers.
	"""
	def __init__(self, movies: Sequence[Movie]):
		# Keep load order; a tuple so the shared sequence cannot be mutated in place
		self.movies = tuple(movies)  # dataset in source order
		# Exact-id lookup table (the loader guarantees ids are unique)
		self._by_id: Dict[int, Movie] = {movie.id: movie for movie in self.movies}
		self.parser = QueryParser()  # criteria normalization
		logger.info(f"[Engine] Catalog ready with {len(self.movies)} movies")

	def __len__(self) -> int:
		return len(self.movies)

	def list_all(self) -> List[Movie]:
		"""Every movie in load order (a fresh list on each call)."""
		return list(self.movies)

	def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
		"""Exact lookup; absent, zero, and negative ids are never found."""
		if movie_id is None or movie_id <= 0:
			return None
		return self._by_id.get(movie_id)

	def parse_query(
		self,
		name: Optional[str] = None,
		movie_id: Optional[int] = None,
		genre: Optional[str] = None,
	) -> SearchQuery:
		"""Normalize raw criteria into a SearchQuery."""
		return self.parser.parse(name=name, movie_id=movie_id, genre=genre)  # delegate to parser

	def search(
		self,
		name: Optional[str] = None,
		movie_id: Optional[int] = None,
		genre: Optional[str] = None,
	) -> List[Movie]:
		"""
		Filter the catalog by every supplied criterion (AND semantics).
		- name / genre: case-insensitive substring of movie_name / genre
		- movie_id: exact id equality
		With no usable criterion at all, returns the whole catalog.
		"""
		parsed = self.parse_query(name, movie_id, genre)  # structured query
		logger.info(
			f"[Engine] Search | name={parsed.name!r} id={parsed.movie_id!r} genre={parsed.genre!r}"
		)

		if parsed.is_empty():
			logger.info("[Engine] No search criteria provided, returning the full catalog")
			return self.list_all()

		results = [movie for movie in self.movies if self._matches(movie, parsed)]  # stable filter
		logger.info(f"[Engine] Search complete | {len(results)} of {len(self.movies)} movies matched")
		return results

	def search_by_name(self, name: Optional[str]) -> List[Movie]:
		"""Case-insensitive name fragment search; blank input matches nothing."""
		needle = QueryParser.normalize_text(name)
		if needle is None:
			logger.warning("[Engine] Empty name provided for search, returning no results")
			return []

		needle = needle.lower()
		results = [movie for movie in self.movies if needle in movie.movie_name.lower()]
		logger.info(f"[Engine] Found {len(results)} movies with names containing '{needle}'")
		return results

	def search_by_genre(self, genre: Optional[str]) -> List[Movie]:
		"""Case-insensitive genre fragment search; blank input matches nothing."""
		needle = QueryParser.normalize_text(genre)
		if needle is None:
			logger.warning("[Engine] Empty genre provided for search, returning no results")
			return []

		needle = needle.lower()
		results = [movie for movie in self.movies if needle in movie.genre.lower()]
		logger.info(f"[Engine] Found {len(results)} movies in genre '{needle}'")
		return results

	def list_distinct_genres(self) -> List[str]:
		"""Unique genre labels (exact string distinctness), sorted ascending."""
		return sorted({movie.genre for movie in self.movies})

	def _matches(self, movie: Movie, parsed: SearchQuery) -> bool:
		"""True when the movie satisfies every criterion present in the query."""
		# Exact id match
		if parsed.movie_id is not None and movie.id != parsed.movie_id:
			logger.debug(f"[Engine] Filtered out by id | movie={movie.movie_name} ({movie.id})")
			return False

		# Partial, case-insensitive name match
		if parsed.name is not None and parsed.name.lower() not in movie.movie_name.lower():
			logger.debug(f"[Engine] Filtered out by name | movie={movie.movie_name} ({movie.id})")
			return False

		# Partial, case-insensitive genre match
		if parsed.genre is not None and parsed.genre.lower() not in movie.genre.lower():
			logger.debug(
				f"[Engine] Filtered out by genre | movie={movie.movie_name} ({movie.id}) | genre={movie.genre}"
			)
			return False

		return True
