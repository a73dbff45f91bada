"""
Streamlit main app for the Movie Catalog.

Run: streamlit run movie_catalog/ui/app.py --server.port 8501
"""

import streamlit as st

from movie_catalog.ui.components.movie_card import render_movie_card
from movie_catalog.ui.utils.api_client import get_movies_page, health_check
from movie_catalog.ui.utils.session_state import init_session_state, select_movie

st.set_page_config(
    page_title="Movie Catalog",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

st.title("🎬 Movie Catalog")
st.markdown("Browse the catalog, search by name, id or genre, and read reviews.")

try:
    health = health_check()
    if health.get("status") == "healthy":
        st.success(f"API connected ({health.get('movies', 0)} movies)")
    else:
        st.warning(f"Catalog not loaded: {health.get('load_error')}")
except Exception as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn movie_catalog.api.main:app --host 0.0.0.0 --port 8000")
    st.stop()

if st.button("🔍 Search Movies"):
    st.switch_page("pages/1_search.py")

st.divider()


def open_details(movie_id: int) -> None:
    select_movie(movie_id)
    st.switch_page("pages/2_movie_details.py")


try:
    page = get_movies_page()
    for movie in page.get("movies", []):
        render_movie_card(movie, on_select=open_details)
except Exception as e:
    st.error(f"Failed to load movies: {e}")
