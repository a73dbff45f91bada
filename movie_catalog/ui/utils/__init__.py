"""
Streamlit UI helpers: API client and session state.
"""
