"""Data models for scrapers."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VenueConfig:
    """A single cinema location scraped independently."""

    id: str  # cinemaId query parameter on the listing site
    name: str  # Display label, used as MovieRecord.location


@dataclass
class MovieRecord:
    """
    One film listing extracted from a venue page.

    ``showtimes`` and ``ticket_links`` are parallel lists in document order;
    a showtime without a booking link gets the ``"#"`` placeholder.
    """

    title: str
    location: str
    showtimes: list[str] = field(default_factory=list)  # "HH:MM" tokens
    ticket_links: list[str] = field(default_factory=list)
    image: str = ""
    room: str = ""
    director: str = ""
    year: str = ""
    duration: str = ""  # e.g. "95 mins"

    def __post_init__(self) -> None:
        """Validate the record invariants."""
        if not self.title:
            raise ValueError("title must not be empty")
        if len(self.showtimes) != len(self.ticket_links):
            raise ValueError("showtimes and ticket_links must have the same length")


@dataclass
class VenueResult:
    """Outcome of one venue's extraction pass."""

    venue: VenueConfig
    url: str
    movies: list[MovieRecord] = field(default_factory=list)
    containers_found: int = 0
    error: str | None = None
