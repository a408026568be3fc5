"""Multi-venue aggregation of listing scrapes."""

import asyncio
import logging
import re
from collections.abc import Sequence
from dataclasses import asdict
from datetime import datetime, timezone

from cartelera.config import settings
from cartelera.schemas import DebugInfo, ExtractionResponse, MovieResponse, VenueSummary
from cartelera.scrapers.base import BaseScraper
from cartelera.scrapers.cineteca import CINETECA_VENUES, CinetecaScraper
from cartelera.scrapers.models import VenueConfig, VenueResult

logger = logging.getLogger(__name__)

DATE_REQUIRED_ERROR = "Date parameter is required"
DATE_FORMAT_ERROR = "Date must be in YYYY-MM-DD format"

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class MovieAggregator:
    """
    Runs the listing scraper over a fixed list of venues.

    Venues are scraped one after another, never in parallel, to keep the load
    on the listing site low. A venue that fails contributes no movies and an
    error message; after a failure the aggregator pauses briefly before moving
    on to the next venue.
    """

    def __init__(
        self,
        venues: Sequence[VenueConfig] = CINETECA_VENUES,
        scraper: BaseScraper | None = None,
        failure_backoff: float | None = None,
    ) -> None:
        """
        Initialize the aggregator.

        Args:
            venues: Venues to scrape, in output order
            scraper: Scraper used for every venue (defaults to CinetecaScraper)
            failure_backoff: Seconds to wait after a failed venue
                (uses settings if not provided)
        """
        self.venues = tuple(venues)
        self.scraper = scraper or CinetecaScraper()
        self.failure_backoff = (
            settings.failure_backoff_seconds if failure_backoff is None else failure_backoff
        )

    async def run(self, date: str | None) -> ExtractionResponse:
        """
        Scrape every venue for a date and combine the results.

        Never raises for upstream problems; they are reported in the response.

        Args:
            date: ISO date string (YYYY-MM-DD)

        Returns:
            Flattened movies in venue order plus per-venue diagnostics
        """
        if not date:
            return self._input_error(DATE_REQUIRED_ERROR)
        if not ISO_DATE_PATTERN.fullmatch(date):
            return self._input_error(DATE_FORMAT_ERROR)

        results: list[VenueResult] = []
        for venue in self.venues:
            results.append(await self._scrape_venue(venue, date))

        movies = [
            MovieResponse.model_validate(asdict(movie))
            for result in results
            for movie in result.movies
        ]
        logger.info(f"Successfully parsed {len(movies)} movies across {len(results)} cinemas")

        return ExtractionResponse(
            movies=movies,
            debug=DebugInfo(
                timestamp=datetime.now(timezone.utc),
                date=date,
                total_found=len(movies),
                cinemas=[self._summarize(result) for result in results],
            ),
        )

    async def _scrape_venue(self, venue: VenueConfig, date: str) -> VenueResult:
        """Scrape one venue, turning any failure into an error result."""
        try:
            return await self.scraper.scrape_venue(venue, date)
        except Exception as e:
            error_message = str(e) or type(e).__name__
            logger.error(f"Error fetching movies for {venue.name}: {error_message}", exc_info=True)

            # Be kind to the remote server if it is rate limiting us
            await asyncio.sleep(self.failure_backoff)

            return VenueResult(
                venue=venue,
                url=self.scraper.build_url(venue, date),
                error=error_message,
            )

    @staticmethod
    def _summarize(result: VenueResult) -> VenueSummary:
        return VenueSummary(
            cinema_id=result.venue.id,
            location=result.venue.name,
            total_found=len(result.movies),
            containers_found=result.containers_found,
            url=result.url,
            error=result.error,
        )

    @staticmethod
    def _input_error(message: str) -> ExtractionResponse:
        logger.warning(f"Rejected fetch-movies request: {message}")
        return ExtractionResponse(
            movies=[],
            error=message,
            debug=DebugInfo(timestamp=datetime.now(timezone.utc)),
        )
