"""Streamlit UI for the movie catalog."""
