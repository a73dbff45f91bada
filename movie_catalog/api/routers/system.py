"""
System API endpoints (health).
"""

from fastapi import APIRouter, Request

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(request: Request):
    """Health check: catalog load outcome and dataset sizes."""
    store = request.app.state.catalog_store
    review_provider = request.app.state.review_provider
    load_result = store.load_result
    return {
        "status": "healthy" if load_result.ok else "degraded",
        "movies": len(store),
        "reviews": len(review_provider),
        "catalog_loaded": load_result.ok,
        "load_error": load_result.error,
    }
