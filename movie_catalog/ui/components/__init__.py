"""
Streamlit UI components.
"""
