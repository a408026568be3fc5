"""Partition showtimes into those starting soon and the rest."""

import re
from datetime import datetime, time
from zoneinfo import ZoneInfo

from cartelera.config import settings
from cartelera.schemas import MovieResponse, MovieWithUpcoming, UpcomingShowtime

CLOCK_PATTERN = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)
WINDOW_PATTERN = re.compile(r"\d+", re.ASCII)

MAX_WINDOW_MINUTES = 1440


def local_now(tz_name: str | None = None) -> datetime:
    """Current wall-clock time at the venues."""
    return datetime.now(ZoneInfo(tz_name or settings.local_timezone))


def parse_clock(value: str) -> time:
    """
    Parse an "HH:MM" string into a time.

    Raises:
        ValueError: If the value is not a valid 24-hour clock time
    """
    match = CLOCK_PATTERN.fullmatch(value.strip())
    if not match:
        raise ValueError(f"Invalid time {value!r}, expected HH:MM")
    return time(int(match.group(1)), int(match.group(2)))


def parse_window(value: str | None) -> int:
    """
    Parse a window length in minutes, defaulting to the configured window.

    Raises:
        ValueError: If the value is not a whole number between 0 and 1440
    """
    if value is None or not value.strip():
        return settings.upcoming_window_minutes
    value = value.strip()
    if not WINDOW_PATTERN.fullmatch(value) or int(value) > MAX_WINDOW_MINUTES:
        raise ValueError(
            f"Invalid window {value!r}, expected minutes between 0 and {MAX_WINDOW_MINUTES}"
        )
    return int(value)


def minutes_until(showtime: str, now: time) -> int | None:
    """
    Minutes from now until a showtime on the same day.

    Listing tokens are not range-checked, so "24:15" counts as 15 minutes past
    midnight at the end of the day. Returns None for unreadable tokens.
    """
    match = CLOCK_PATTERN.fullmatch(showtime)
    if not match:
        return None
    show_minutes = int(match.group(1)) * 60 + int(match.group(2))
    return show_minutes - (now.hour * 60 + now.minute)


def find_upcoming(
    movie: MovieResponse, now: time, window_minutes: int | None = None
) -> MovieWithUpcoming:
    """
    Attach the showtimes starting within the window to a movie.

    A showtime qualifies when it starts between now and now + window
    (both ends inclusive). Past showtimes never qualify.
    """
    window = settings.upcoming_window_minutes if window_minutes is None else window_minutes

    upcoming: list[UpcomingShowtime] = []
    for index, showtime in enumerate(movie.showtimes):
        delta = minutes_until(showtime, now)
        if delta is None or not 0 <= delta <= window:
            continue
        ticket_link = movie.ticket_links[index] if index < len(movie.ticket_links) else "#"
        upcoming.append(UpcomingShowtime(time=showtime, ticket_link=ticket_link or "#"))

    return MovieWithUpcoming(**movie.model_dump(), upcoming_showtimes=upcoming)


def sort_by_upcoming(
    movies: list[MovieResponse], now: time, window_minutes: int | None = None
) -> list[MovieWithUpcoming]:
    """
    Annotate movies with upcoming showtimes, those starting soon first.

    The sort is stable, so movies keep their venue order within each group.
    """
    annotated = [find_upcoming(movie, now, window_minutes) for movie in movies]
    return sorted(annotated, key=lambda m: not m.upcoming_showtimes)
