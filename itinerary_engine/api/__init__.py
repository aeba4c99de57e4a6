"""api/: stateless FastAPI adapter over the engine (see api/server.py)."""
