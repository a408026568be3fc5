"""Base scraper interface for venue listing scrapers."""

from abc import ABC, abstractmethod

from cartelera.scrapers.models import VenueConfig, VenueResult


class BaseScraper(ABC):
    """
    Abstract base class for listing scrapers.

    A scraper handles a single venue per call. Batching, failure isolation
    and backoff between venues belong to the aggregator.
    """

    @abstractmethod
    def build_url(self, venue: VenueConfig, date: str) -> str:
        """
        Build the listing URL for a venue and day.

        Args:
            venue: Venue to scrape
            date: ISO date string (YYYY-MM-DD)

        Returns:
            URL of the listing page
        """
        pass

    @abstractmethod
    async def scrape_venue(self, venue: VenueConfig, date: str) -> VenueResult:
        """
        Fetch and extract every movie listed for a venue on a date.

        Args:
            venue: Venue to scrape
            date: ISO date string (YYYY-MM-DD)

        Returns:
            Venue result with the extracted movies

        Raises:
            ScraperError: When the page cannot be fetched or parsed. Problems
            with individual movie blocks are logged and skipped instead.
        """
        pass
