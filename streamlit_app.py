"""
Streamlit UI for Filmshelf.
Lists the movies served by the movie service, with a filter panel in the sidebar,
a heart toggle per movie and a button that switches to favorites only.

Run service:  uvicorn api:app --port 3001 --reload
Run UI:       streamlit run streamlit_app.py
"""

# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives

from loguru import logger  # console logger

# Core components: catalog, view reducer and their collaborators
from filmshelf.catalog_store import CatalogStore  # loads the collection once
from filmshelf.config import configure_logging, get_settings  # env-backed settings
from filmshelf.favorites import FavoritesRepository  # favorites persistence
from filmshelf.models import RATING_BUCKETS, FilterPredicate, ShowFavoritesOutcome
from filmshelf.movie_client import MovieClient  # HTTP fetch collaborator
from filmshelf.storage import JsonFileStorage  # device-local blob store
from filmshelf.view_reducer import ViewReducer  # filters + favorites state

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Filmshelf", layout="wide")  # wide layout

# Main page title
st.title("🎬 Filmshelf")  # friendly header


def init_session():
	"""Load the catalog and the saved favorites once per browser session."""
	settings = get_settings()  # read env configuration
	configure_logging(settings.log_level)
	client = MovieClient(settings.api_url, timeout=settings.request_timeout)
	catalog = CatalogStore(client)
	reducer = ViewReducer(FavoritesRepository(JsonFileStorage(settings.storage_path), settings.favorites_key))

	# Favorites and movies load independently of each other
	reducer.load_favorites()
	with st.spinner("Loading movies..."):
		reducer.initialize(catalog.load())

	st.session_state.catalog = catalog
	st.session_state.reducer = reducer
	logger.info("[UI] Session initialized")


if 'reducer' not in st.session_state:
	init_session()

catalog: CatalogStore = st.session_state.catalog
reducer: ViewReducer = st.session_state.reducer

# A failed fetch replaces the whole page with the error message
if catalog.error:
	st.error(catalog.error)
	if st.button("Retry"):
		reducer.initialize(catalog.load())  # loads are never retried on their own
		st.rerun()
	st.stop()


def on_show_favorites():
	"""Toggle the favorites-only list; remember when there was nothing to show."""
	outcome = reducer.toggle_show_only_favorites()
	st.session_state.no_favorites = outcome is ShowFavoritesOutcome.NO_FAVORITES


def on_reset_filters():
	"""Clear every filter widget and show the full collection again."""
	for key in ('filter_years', 'filter_directors'):
		st.session_state[key] = []
	for label in RATING_BUCKETS:
		st.session_state[f"filter_rating_{label}"] = False
	reducer.apply_filters(FilterPredicate.reset())


# Sidebar contains the filter panel
filters = catalog.available_filters
with st.sidebar:
	st.header("Filter Movies")  # section label
	with st.form("filters"):
		years = st.multiselect("Years", filters.years, key="filter_years")
		directors = st.multiselect("Directors", filters.directors, key="filter_directors")
		st.caption("Rating")
		ratings = {label: st.checkbox(label, key=f"filter_rating_{label}") for label in RATING_BUCKETS}
		apply_btn = st.form_submit_button("Apply Filters", type="primary")
	st.button("Reset", on_click=on_reset_filters)

if apply_btn:
	reducer.apply_filters(FilterPredicate(
		years={year: True for year in years},
		directors={director: True for director in directors},
		ratings=ratings,
	))

# Favorites-only toggle sits above the list
st.button("❤️ Favorites", on_click=on_show_favorites)
if st.session_state.pop('no_favorites', False):
	st.error("No favorites yet")  # nothing to show, list unchanged

st.caption(f"Showing {len(reducer.filtered_movies)} of {len(catalog.movies)} movies")
st.divider()  # visual separator

# Render each movie as an image + details row
for movie in reducer.filtered_movies:
	c1, c2, c3 = st.columns([1, 4, 1])  # poster, details, heart
	with c1:
		if movie.poster:
			st.image(movie.poster, width=80)  # poster
	with c2:
		st.subheader(movie.title)  # title
		st.write(f"Director: {movie.director}")
		st.write(f"Year: {movie.year}")
		st.write(f"Rating: {movie.rating}")
	with c3:
		heart = "❤️" if reducer.is_favorite(movie.id) else "🤍"
		st.button(heart, key=f"fav_{movie.id}", on_click=reducer.toggle_favorite, args=(movie.id,))
	st.divider()  # separator
