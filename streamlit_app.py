"""
Streamlit UI for the Movie Catalog.
Calls the local FastAPI server at http://localhost:8000 to fetch results,
or runs locally by loading the catalog file like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Dataclass conversion for rendering local results like API payloads
from dataclasses import asdict  # Movie -> dict
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from movie_catalog.config import get_settings  # configured data path
from movie_catalog.data_loader import DataLoader  # load movies from file
from movie_catalog.search_engine import SearchEngine  # catalog lookup and search

# Default URL where the FastAPI server is expected to run locally
DEFAULT_API_URL = "http://localhost:8000"  # default API base URL
ANY_GENRE = "(any)"  # select box entry meaning "no genre filter"

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Catalog", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Catalog")  # friendly header

# Cache the local engine so we only load the catalog once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> SearchEngine:
	"""Create a local SearchEngine from the configured catalog file."""
	loader = DataLoader()  # create loader
	movies = loader.load_movies_from_json(str(get_settings().data_path))  # empty list on failure
	return SearchEngine(movies)

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", DEFAULT_API_URL)  # where the API lives
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[SearchEngine] = None  # placeholder
if use_local or not api_available:
	local_engine = init_local_engine()  # load catalog once
	st.sidebar.success(f"Local engine ready with {len(local_engine)} movies.")  # success note

# Genre choices for the filter widget
if local_engine is not None:
	genres = local_engine.list_distinct_genres()
else:
	try:
		genres = requests.get(f"{api_url}/genres", timeout=10).json()
	except requests.RequestException:
		genres = []

# Search form: each field is optional, all supplied fields must match
col1, col2, col3 = st.columns([3, 1, 2])  # grid for the three criteria
with col1:
	name = st.text_input("Movie name", placeholder="e.g., prison")
with col2:
	movie_id = st.number_input("ID", min_value=0, value=0, step=1, help="0 means any id")
with col3:
	genre_choice = st.selectbox("Genre", [ANY_GENRE] + genres)
search_btn = st.button("Search", type="primary")  # triggers a search
st.caption("Leave every field empty to list the whole catalog.")  # helpful note

if search_btn:
	genre = None if genre_choice == ANY_GENRE else genre_choice
	movie_id = int(movie_id) or None  # 0 in the widget means "no id"
	with st.spinner("Searching..."):
		try:
			if local_engine is not None:
				# Local mode: run the search inside this process
				results = [asdict(m) for m in local_engine.search(name=name, movie_id=movie_id, genre=genre)]
			else:
				# API mode: call the server and let it perform the search
				params = {"name": name or None, "id": movie_id, "genre": genre}
				resp = requests.get(f"{api_url}/movies/search", params=params, timeout=30)
				if resp.status_code == 400:
					# Invalid criteria: show the server's explanation instead of a generic failure
					st.error(resp.json().get("detail", "Invalid search parameters."))
					st.stop()
				resp.raise_for_status()  # raise error if server responded with an error code
				results = resp.json().get("results", [])

			if not results:
				st.warning("No movies found matching your search. Try different criteria.")
			else:
				st.success(f"Found {len(results)} movies matching your search.")
			st.divider()  # visual separator

			# Render each movie as a details row
			for i, movie in enumerate(results, start=1):
				st.subheader(f"{i}. {movie['movie_name']} ({movie['year']})")  # title + year
				st.caption(f"ID {movie['id']} | {movie['genre']} | {movie['duration']} min | Rating {movie['imdb_rating']}")
				st.write(f"Director: {movie['director']}")  # director
				st.write(movie['description'])  # synopsis
				st.divider()  # separator

		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
