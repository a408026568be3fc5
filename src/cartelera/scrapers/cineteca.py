"""Cineteca Nacional listing scraper using BeautifulSoup HTML parsing."""

import logging

from cartelera.scrapers.base import BaseScraper
from cartelera.scrapers.document import parse_document
from cartelera.scrapers.extractor import extract_movies
from cartelera.scrapers.fetcher import build_listing_url, fetch_listing
from cartelera.scrapers.locator import locate_containers
from cartelera.scrapers.models import VenueConfig, VenueResult

logger = logging.getLogger(__name__)

CINETECA_VENUES: tuple[VenueConfig, ...] = (
    VenueConfig(id="003", name="Cineteca Nacional"),
    VenueConfig(id="002", name="Cineteca CENART"),
)


class CinetecaScraper(BaseScraper):
    """
    Scraper for the Cineteca Nacional venues.

    Each venue has a ``cartelera.php`` page per day, rendered server side with
    Bootstrap columns, one column per film. The column classes change from time
    to time, so cards are found through several selector patterns plus a scan
    for the bold uppercase title paragraph.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url

    def build_url(self, venue: VenueConfig, date: str) -> str:
        return build_listing_url(venue.id, date, self.base_url)

    async def scrape_venue(self, venue: VenueConfig, date: str) -> VenueResult:
        """Fetch one venue's listing page and extract its movies."""
        url = self.build_url(venue, date)
        logger.info(f"Fetching movies for {venue.name} on {date} from {url}")

        html = await fetch_listing(url)
        logger.info(f"Received HTML for {venue.name}, length: {len(html)}")

        result = self._parse_html(html, venue)
        result.url = url
        return result

    def _parse_html(self, html: str, venue: VenueConfig) -> VenueResult:
        """Parse a listing page into a VenueResult (url left empty)."""
        tree = parse_document(html)
        containers = locate_containers(tree)
        logger.info(f"Found {len(containers)} potential movie containers for {venue.name}")

        movies = extract_movies(containers, venue.name)
        logger.info(f"{venue.name}: parsed {len(movies)} movies")

        return VenueResult(
            venue=venue,
            url="",
            movies=movies,
            containers_found=len(containers),
        )
