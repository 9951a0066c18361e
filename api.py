"""
FastAPI server exposing the movie catalog.
Endpoints:
- GET /health: basic health check
- GET /movies: every movie plus the list of genres
- GET /movies/search?name=...&id=...&genre=...: multi-criteria search
- GET /movies/{movie_id}: a single movie
- GET /genres: distinct genre labels

Startup loads the catalog once from the configured JSON file.
A missing or malformed file yields an empty (but working) catalog.
"""

# Import standard libraries for timing
import time  # measure startup and request latencies
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration, data loading and search
from movie_catalog.config import configure_logging, get_settings  # env-backed settings
from movie_catalog.data_loader import DataLoader  # loads and validates movies
from movie_catalog.models import Movie  # core record type
from movie_catalog.search_engine import SearchEngine  # catalog index and search

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

settings = get_settings()  # resolved once at import

# Instantiate the FastAPI application with metadata
app = FastAPI(title=settings.app_name, version=settings.app_version)  # web app

# Globals that hold the search engine instance and measured startup time
ENGINE: Optional[SearchEngine] = None  # will point to the initialized engine
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: int  # unique id
	movie_name: str  # human-readable title
	director: str  # director name
	year: int  # release year
	genre: str  # genre label
	description: str  # synopsis
	duration: int  # minutes
	imdb_rating: float  # rating


# Pydantic model for the full listing payload
class MoviesResponse(BaseModel):
	movies: List[MovieOut]  # catalog in load order
	all_genres: List[str]  # distinct genres for filter widgets


# Pydantic model for the search response payload
class SearchResponse(BaseModel):
	name: Optional[str] = None  # echoed name criterion
	id: Optional[int] = None  # echoed id criterion
	genre: Optional[str] = None  # echoed genre criterion
	count: int  # number of matches
	message: str  # human-readable summary
	elapsed_ms: float  # server-side search time in ms
	results: List[MovieOut]  # matches in load order
	all_genres: List[str]  # distinct genres for filter widgets


def to_movie_out(movie: Movie) -> MovieOut:
	"""Convert a catalog record into its response schema."""
	return MovieOut(
		id=movie.id,
		movie_name=movie.movie_name,
		director=movie.director,
		year=movie.year,
		genre=movie.genre,
		description=movie.description,
		duration=movie.duration,
		imdb_rating=movie.imdb_rating,
	)


# FastAPI startup hook to load the catalog once
@app.on_event("startup")
async def startup_event():
	"""Load the catalog and build the search engine."""
	global ENGINE, STARTUP_TIME_S  # refer to module-level globals
	configure_logging(settings.log_level)  # single stderr sink at the configured level
	start = time.time()  # start timer for startup latency

	logger.info(f"[API] Startup: loading movies from {settings.data_path}...")  # log intent
	loader = DataLoader()  # create loader instance
	movies = loader.load_movies_from_json(str(settings.data_path))  # empty list on failure
	if not movies:
		logger.warning("[API] Catalog is empty; queries will return no movies")
	ENGINE = SearchEngine(movies)  # create engine

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(movies)} movies.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"movie_count": len(ENGINE) if ENGINE is not None else 0,  # catalog size
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/movies", response_model=MoviesResponse)
async def list_movies():
	"""Return the whole catalog in load order."""
	if ENGINE is None:
		logger.warning("[API] Listing requested but engine not initialized")
		return MoviesResponse(movies=[], all_genres=[])
	logger.info("[API] Fetching movies")
	return MoviesResponse(
		movies=[to_movie_out(m) for m in ENGINE.list_all()],
		all_genres=ENGINE.list_distinct_genres(),
	)


# Declared before /movies/{movie_id} so "search" is not parsed as an id
@app.get("/movies/search", response_model=SearchResponse)
async def search_movies(
	name: Optional[str] = Query(None, description="Case-insensitive movie name fragment"),
	movie_id: Optional[int] = Query(None, alias="id", description="Exact movie id"),
	genre: Optional[str] = Query(None, description="Case-insensitive genre fragment"),
):
	"""Search the catalog; every supplied criterion must match."""
	logger.info(f"[API] /movies/search name='{name}' id='{movie_id}' genre='{genre}'")

	if movie_id is not None and movie_id <= 0:
		logger.warning(f"[API] Invalid movie id provided: {movie_id}")
		raise HTTPException(status_code=400, detail="Invalid movie id. Please provide a positive number.")

	if ENGINE is None:  # engine must be ready to serve
		logger.warning("[API] Search requested but engine not initialized")
		return SearchResponse(
			name=name, id=movie_id, genre=genre, count=0,
			message="Catalog is not ready.", elapsed_ms=0.0, results=[], all_genres=[],
		)

	start = time.time()  # start timer
	results = ENGINE.search(name=name, movie_id=movie_id, genre=genre)  # run search
	elapsed_ms = (time.time() - start) * 1000  # compute ms

	if results:
		message = f"Found {len(results)} movies matching your search."
	else:
		message = "No movies found matching your search. Try different criteria."
	logger.info(f"[API] /movies/search served {len(results)} results in {elapsed_ms:.2f} ms")

	return SearchResponse(
		name=name,
		id=movie_id,
		genre=genre,
		count=len(results),
		message=message,
		elapsed_ms=round(elapsed_ms, 2),
		results=[to_movie_out(m) for m in results],
		all_genres=ENGINE.list_distinct_genres(),
	)


@app.get("/movies/{movie_id}", response_model=MovieOut)
async def get_movie(movie_id: int):
	"""Return one movie by id, or 404."""
	logger.info(f"[API] Fetching details for movie ID: {movie_id}")
	movie = ENGINE.get_by_id(movie_id) if ENGINE is not None else None
	if movie is None:
		logger.warning(f"[API] Movie with ID {movie_id} not found")
		raise HTTPException(status_code=404, detail=f"Movie with ID {movie_id} was not found.")
	return to_movie_out(movie)


@app.get("/genres", response_model=List[str])
async def list_genres():
	"""Return the distinct genre labels, sorted."""
	if ENGINE is None:
		return []
	return ENGINE.list_distinct_genres()
