"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cartelera.api.routes import health, movies, venues
from cartelera.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="Cartelera API",
    description="Showtime extraction for the Cineteca Nacional venues",
    version="0.1.0",
)

# Configure CORS, the frontend calls from its own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

# Include routers
app.include_router(health.router)
app.include_router(venues.router, prefix="/api", tags=["venues"])
app.include_router(movies.router, prefix="/api", tags=["movies"])
