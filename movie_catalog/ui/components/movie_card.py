"""
Movie display card component.
"""

import streamlit as st


def render_movie_card(movie: dict, on_select: callable = None) -> None:
    """
    Render a movie card with an optional details button.

    Args:
        movie: Movie payload as returned by the API (dataset field names)
        on_select: Callback(movie_id) when the user opens the details page
    """
    with st.container():
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"**{movie['movieName']}** ({movie['year']})")
            st.caption(" | ".join([movie["genre"], movie["director"], f"{movie['duration']} min"]))
            st.caption(f"Rating: {movie['imdbRating']:.1f}")
        with col2:
            if on_select and st.button("Details", key=f"details_{movie['id']}"):
                on_select(movie["id"])
        st.divider()


def render_review(review: dict) -> None:
    """Render a single review."""
    st.markdown(f"**{review['reviewer']}** - {review['rating']:.1f} ★")
    st.write(review["comment"])
