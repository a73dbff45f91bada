"""
Search page - filter the catalog by name, id and genre.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_catalog.ui.components.movie_card import render_movie_card
from movie_catalog.ui.utils.api_client import search_movies_page
from movie_catalog.ui.utils.session_state import init_session_state, select_movie

init_session_state()

st.title("🔍 Search Movies")

last = st.session_state["last_search"]
with st.form("search_form"):
    col1, col2, col3 = st.columns(3)
    with col1:
        name = st.text_input("Name", value=last["name"])
    with col2:
        movie_id = st.number_input("ID (0 = any)", min_value=0, step=1, value=last["movie_id"])
    with col3:
        genre = st.text_input("Genre", value=last["genre"])
    submitted = st.form_submit_button("Search")

if not submitted:
    st.stop()

st.session_state["last_search"] = {"name": name, "movie_id": int(movie_id), "genre": genre}


def open_details(selected_id: int) -> None:
    select_movie(selected_id)
    st.switch_page("pages/2_movie_details.py")


try:
    page = search_movies_page(name=name, movie_id=int(movie_id) or None, genre=genre)
except Exception as e:
    st.error(f"Search failed: {e}")
    st.stop()

if page.get("title"):
    st.subheader(page["title"])
if page.get("message"):
    st.info(page["message"])

for movie in page.get("movies", []):
    render_movie_card(movie, on_select=open_details)
