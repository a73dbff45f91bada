"""
Movie Catalog Service Application Package.

This package contains the catalog store, the query façade, the HTTP API,
the Streamlit UI and shared utilities.
"""

__version__ = "1.0.0"
