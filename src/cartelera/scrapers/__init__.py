"""Listing scrapers and the venues they cover."""

from cartelera.scrapers.base import BaseScraper
from cartelera.scrapers.cineteca import CINETECA_VENUES, CinetecaScraper
from cartelera.scrapers.models import MovieRecord, VenueConfig, VenueResult

__all__ = [
    "BaseScraper",
    "CINETECA_VENUES",
    "CinetecaScraper",
    "MovieRecord",
    "VenueConfig",
    "VenueResult",
]
