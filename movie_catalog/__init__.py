"""
Movie Catalog: an in-memory movie catalog with id lookup and
case-insensitive multi-criteria search.
"""

from .data_loader import CatalogLoadError, DataLoader
from .models import Movie, SearchQuery
from .search_engine import SearchEngine

__all__ = ['CatalogLoadError', 'DataLoader', 'Movie', 'SearchEngine', 'SearchQuery']
