"""
Session state helpers for Streamlit.
"""

import streamlit as st


def get_selected_movie_id() -> int | None:
    """Get the movie chosen for the details page."""
    return st.session_state.get("selected_movie_id")


def select_movie(movie_id: int) -> None:
    """Remember the movie to show on the details page."""
    st.session_state["selected_movie_id"] = movie_id


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "selected_movie_id" not in st.session_state:
        st.session_state["selected_movie_id"] = None
    if "last_search" not in st.session_state:
        st.session_state["last_search"] = {"name": "", "movie_id": 0, "genre": ""}
