"""Shared test fixtures."""

from collections.abc import Callable, Mapping

import pytest
from fastapi import FastAPI

from cartelera.api.routes import health, movies, venues
from cartelera.scrapers.base import BaseScraper
from cartelera.scrapers.models import MovieRecord, VenueConfig, VenueResult
from cartelera.services.aggregator import MovieAggregator

NACIONAL = VenueConfig(id="003", name="Cineteca Nacional")
CENART = VenueConfig(id="002", name="Cineteca CENART")


class StubScraper(BaseScraper):
    """Scraper returning canned movies or raising canned errors per venue id."""

    def __init__(self, outcomes: Mapping[str, list[MovieRecord] | Exception]) -> None:
        self.outcomes = outcomes
        self.calls: list[tuple[str, str]] = []

    def build_url(self, venue: VenueConfig, date: str) -> str:
        return f"https://listing.test/cartelera.php?cinemaId={venue.id}&dia={date}"

    async def scrape_venue(self, venue: VenueConfig, date: str) -> VenueResult:
        self.calls.append((venue.id, date))
        outcome = self.outcomes.get(venue.id, [])
        if isinstance(outcome, Exception):
            raise outcome
        return VenueResult(
            venue=venue,
            url=self.build_url(venue, date),
            movies=list(outcome),
            containers_found=len(outcome) + 1,
        )


@pytest.fixture
def make_aggregator() -> Callable[..., MovieAggregator]:
    """Build an aggregator over both venues backed by a StubScraper, without backoff."""

    def factory(
        outcomes: Mapping[str, list[MovieRecord] | Exception], failure_backoff: float = 0
    ) -> MovieAggregator:
        return MovieAggregator(
            venues=(NACIONAL, CENART),
            scraper=StubScraper(outcomes),
            failure_backoff=failure_backoff,
        )

    return factory


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without middleware, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(venues.router, prefix="/api")
    app.include_router(movies.router, prefix="/api")
    return app
