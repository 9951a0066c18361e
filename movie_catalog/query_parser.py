"""
Query parsing module.
Turns raw, optional search criteria into a normalized SearchQuery.
"""

from typing import Optional  # type annotations

from loguru import logger  # console logging

from .models import SearchQuery  # structured query representation


class QueryParser:
	"""
	Normalizes search criteria before any matching happens.
	Text criteria are trimmed and blank text counts as "not provided";
	ids pass through untouched.
	"""

	def parse(
		self,
		name: Optional[str] = None,
		movie_id: Optional[int] = None,
		genre: Optional[str] = None,
	) -> SearchQuery:
		"""Main entry: produce a SearchQuery from raw criteria."""
		parsed = SearchQuery(
			name=self.normalize_text(name),
			movie_id=movie_id,
			genre=self.normalize_text(genre),
		)
		logger.debug(
			f"[Parser] Raw name={name!r} id={movie_id!r} genre={genre!r} -> "
			f"name={parsed.name!r} id={parsed.movie_id!r} genre={parsed.genre!r}"
		)
		return parsed

	@staticmethod
	def normalize_text(text: Optional[str]) -> Optional[str]:
		"""Trim whitespace; None or blank input becomes None."""
		if text is None:
			return None
		stripped = text.strip()
		return stripped or None
