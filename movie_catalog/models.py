"""
Data models for the Movie Catalog.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, __eq__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Optional  # optional values


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie in the catalog.
	Frozen: records are shared by every caller and never change after load.
	"""
	id: int  # unique, strictly positive identifier
	movie_name: str  # display title (never empty)
	director: str  # director's name as stored in the source
	year: int  # release year (e.g., 1994)
	genre: str  # free-form genre label, possibly compound (e.g., "Action/Crime")
	description: str  # short synopsis
	duration: int  # running time in minutes
	imdb_rating: float  # rating as stored in the source


@dataclass(frozen=True)
class SearchQuery:
	"""
	The normalized criteria of a catalog search.
	Text criteria are already trimmed; blank text is stored as None.
	"""
	name: Optional[str] = None  # movie name fragment
	movie_id: Optional[int] = None  # exact id
	genre: Optional[str] = None  # genre fragment

	def is_empty(self) -> bool:
		"""True when no criterion was supplied."""
		return self.name is None and self.movie_id is None and self.genre is None
