"""Pydantic schemas for extracted movie data."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys, as the frontend expects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MovieResponse(CamelModel):
    """One film listing at one venue."""

    title: str
    showtimes: list[str]
    ticket_links: list[str]
    image: str = ""
    room: str = ""
    director: str = ""
    year: str = ""
    duration: str = ""
    location: str


class VenueSummary(CamelModel):
    """Per-venue diagnostics returned in the debug payload."""

    cinema_id: str
    location: str
    total_found: int
    containers_found: int
    url: str
    error: str | None = None


class DebugInfo(CamelModel):
    """Diagnostics used to spot upstream markup drift."""

    timestamp: datetime
    date: str | None = None
    total_found: int = 0
    url: str | None = None  # Request URL, set when the request itself is rejected or fails
    cinemas: list[VenueSummary] = Field(default_factory=list)


class ExtractionResponse(CamelModel):
    """Response of the fetch-movies endpoint."""

    movies: list[MovieResponse] = Field(default_factory=list)
    debug: DebugInfo
    error: str | None = None


class UpcomingShowtime(CamelModel):
    """A showtime starting within the upcoming window."""

    time: str
    ticket_link: str


class MovieWithUpcoming(MovieResponse):
    """Movie listing with the showtimes starting soon."""

    upcoming_showtimes: list[UpcomingShowtime] = Field(default_factory=list)


class UpcomingResponse(CamelModel):
    """Response of the upcoming movies endpoint."""

    movies: list[MovieWithUpcoming] = Field(default_factory=list)
    upcoming_count: int = 0
    date: str | None = None
    now: str | None = None  # "HH:MM" reference time
    debug: DebugInfo
    error: str | None = None


class VenueResponse(CamelModel):
    """Venue response schema."""

    id: str
    name: str
