"""Quick check that the API loads the catalog and answers a search."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fastapi.testclient import TestClient
from movie_catalog.api.main import app

client = TestClient(app)
r = client.get("/api/health")
print("Health status:", r.status_code)
print("Response:", r.json())

r = client.get("/api/movies/search", params={"name": "prison"})
print("Search status:", r.status_code)
print("Response:", r.json())
