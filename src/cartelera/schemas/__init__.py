"""Pydantic schemas for API requests and responses."""

from cartelera.schemas.movie import (
    DebugInfo,
    ExtractionResponse,
    MovieResponse,
    MovieWithUpcoming,
    UpcomingResponse,
    UpcomingShowtime,
    VenueResponse,
    VenueSummary,
)

__all__ = [
    "DebugInfo",
    "ExtractionResponse",
    "MovieResponse",
    "MovieWithUpcoming",
    "UpcomingResponse",
    "UpcomingShowtime",
    "VenueResponse",
    "VenueSummary",
]
