"""Exceptions raised while fetching and parsing listing pages."""


class ScraperError(Exception):
    """Base class for venue-level scraping failures."""


class ListingFetchError(ScraperError):
    """The listing page could not be fetched (connection, timeout, DNS)."""


class ListingHttpError(ScraperError):
    """The listing site answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class ListingParseError(ScraperError):
    """The listing markup could not be parsed into a document tree."""
