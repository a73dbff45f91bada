"""
Movie details page - one movie with its reviews.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_catalog.ui.components.movie_card import render_review
from movie_catalog.ui.utils.api_client import get_movie_details_page
from movie_catalog.ui.utils.session_state import get_selected_movie_id, init_session_state

init_session_state()

movie_id = get_selected_movie_id()
if not movie_id:
    st.warning("Pick a movie from the catalog first.")
    if st.button("Back to catalog"):
        st.switch_page("app.py")
    st.stop()

try:
    page = get_movie_details_page(movie_id)
except Exception as e:
    st.error(f"Failed to load movie: {e}")
    st.stop()

if page["view"] == "error":
    st.title(page.get("title") or "Movie Not Found")
    st.warning(page.get("message"))
    st.stop()

movie = page["movie"]
st.title(f"🎬 {movie['movieName']}")
st.caption(f"{movie['year']} | {movie['genre']} | {movie['duration']} min | Directed by {movie['director']}")
st.metric("Rating", f"{movie['imdbRating']:.1f}")
st.write(movie["description"])

st.divider()
st.subheader("Reviews")
reviews = page.get("reviews", [])
if reviews:
    for review in reviews:
        render_review(review)
else:
    st.info("No reviews yet for this movie.")
