"""HTTP fetching of venue listing pages."""

import logging

import httpx

from cartelera.config import settings
from cartelera.scrapers.errors import ListingFetchError, ListingHttpError

logger = logging.getLogger(__name__)

LISTING_PATH = "/cartelera.php"


def build_listing_url(venue_id: str, date: str, base_url: str | None = None) -> str:
    """
    Build the listing URL for one venue and day.

    Args:
        venue_id: Opaque cinemaId used by the listing site (e.g. "003")
        date: ISO date string (YYYY-MM-DD)
        base_url: Site root, defaults to settings.listing_base_url

    Returns:
        Full listing URL
    """
    base = (base_url or settings.listing_base_url).rstrip("/")
    return f"{base}{LISTING_PATH}?cinemaId={venue_id}&dia={date}"


def browser_headers() -> dict[str, str]:
    """Headers of a desktop browser; the site serves stripped markup otherwise."""
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": settings.accept_language,
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }


async def fetch_listing(url: str) -> str:
    """
    Fetch a listing page.

    A new client is opened for every call; nothing is pooled between requests.

    Raises:
        ListingFetchError: On connection, timeout or protocol failures
        ListingHttpError: On a non-2xx response
    """
    try:
        async with httpx.AsyncClient(
            timeout=settings.scrape_timeout, follow_redirects=True
        ) as client:
            response = await client.get(url, headers=browser_headers())
    except httpx.RequestError as e:
        raise ListingFetchError(f"Request to {url} failed: {e!r}") from e

    if not response.is_success:
        raise ListingHttpError(response.status_code)

    html = response.text
    logger.debug(f"Received {len(html)} characters from {url}")
    return html
