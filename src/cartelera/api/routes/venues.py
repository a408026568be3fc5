"""Venue API endpoints."""

from fastapi import APIRouter

from cartelera.schemas import VenueResponse
from cartelera.scrapers.cineteca import CINETECA_VENUES

router = APIRouter()


@router.get("/venues", response_model=list[VenueResponse])
async def get_venues() -> list[VenueResponse]:
    """
    Get the venues covered by the listing scraper.

    Returns:
        Venues in the order their movies appear in fetch-movies responses
    """
    return [VenueResponse(id=venue.id, name=venue.name) for venue in CINETECA_VENUES]
