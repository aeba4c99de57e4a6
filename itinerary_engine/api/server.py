"""
api/server.py
-------------
FastAPI application entry point.

Run dev server:
    uvicorn itinerary_engine.api.server:app --reload --port 8000

Endpoints:
    GET  /v1/health
    POST /v1/itinerary/calendar
    POST /v1/events/create
    POST /v1/events/edit
    POST /v1/events/move
    POST /v1/events/delete
    POST /v1/notes/encode
    POST /v1/notes/decode
    POST /v1/notes/add-link

The adapter is stateless: every request carries the snapshot it acts on.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itinerary_engine import __version__, config
from itinerary_engine.api.routes import events, health, itinerary, notes

logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Itinerary Engine API",
    version=__version__,
    description=(
        "Trip day resolution (city segments, hotel stays) and event scheduling "
        "over caller-supplied itinerary snapshots."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# Allow the web/mobile frontend (any origin during development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.API_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router,    prefix="/v1",           tags=["Health"])
app.include_router(itinerary.router, prefix="/v1/itinerary", tags=["Itinerary"])
app.include_router(events.router,    prefix="/v1/events",    tags=["Events"])
app.include_router(notes.router,     prefix="/v1/notes",     tags=["Notes"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("itinerary_engine.api.server:app", host="0.0.0.0", port=8000, reload=True)
