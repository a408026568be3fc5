"""Field extraction for a single movie block on a listing page."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from cartelera.scrapers.document import HtmlNode
from cartelera.scrapers.locator import TITLE_SELECTOR
from cartelera.scrapers.models import MovieRecord
from cartelera.utils.text import clean_text, find_room_label

logger = logging.getLogger(__name__)

IMAGE_SELECTOR = "img.img-fluid"
INFO_SELECTOR = "div.small"
# Anchors and badge pills, scanned together so document order is kept
TIME_ELEMENT_SELECTOR = "a, span.badge, span.badge-pill, span.badge-secondary"

# Purely syntactic: "24:00" passes, "9:5" does not
TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}", re.ASCII)

DIRECTOR_PATTERN = re.compile(r"Dir\.:\s*([^,]+)")
YEAR_PATTERN = re.compile(r"(\d{4})", re.ASCII)
DURATION_PATTERN = re.compile(r"(\d+)\s*mins", re.ASCII)

TICKET_PLACEHOLDER = "#"


@dataclass
class FilmInfo:
    """Optional credits parsed from the free-text info line."""

    director: str = ""
    year: str = ""
    duration: str = ""


def is_time_token(text: str) -> bool:
    """Return True if text is exactly an ``H:MM`` or ``HH:MM`` token."""
    return TIME_PATTERN.fullmatch(text) is not None


def parse_info(info: str) -> FilmInfo:
    """
    Parse director, year and duration from an info line.

    Each field is matched independently, so a missing director does not
    prevent the year or duration from being read.

    Example:
        "Dir.: Jane Doe, 2019, Dur.: 95 mins"
            → FilmInfo(director="Jane Doe", year="2019", duration="95 mins")
    """
    result = FilmInfo()

    dir_match = DIRECTOR_PATTERN.search(info)
    if dir_match:
        result.director = dir_match.group(1).strip()

    year_match = YEAR_PATTERN.search(info)
    if year_match:
        result.year = year_match.group(1)

    dur_match = DURATION_PATTERN.search(info)
    if dur_match:
        result.duration = f"{dur_match.group(1)} mins"

    return result


def extract_showtimes(container: HtmlNode) -> tuple[list[str], list[str]]:
    """
    Collect showtimes and their ticket links from a movie block.

    Anchors and badge spans are read first. Only when none of them holds a
    time does the block's plain text get split on newlines and pipes.

    Returns:
        Parallel lists of showtimes and ticket links
    """
    showtimes: list[str] = []
    ticket_links: list[str] = []

    for element in container.select_all(TIME_ELEMENT_SELECTOR):
        time_text = element.text().strip()
        if not is_time_token(time_text) or time_text in showtimes:
            continue

        ticket_url = TICKET_PLACEHOLDER
        if element.tag_name == "a":
            ticket_url = element.attribute("href") or TICKET_PLACEHOLDER

        showtimes.append(time_text)
        ticket_links.append(ticket_url)

    if showtimes:
        return showtimes, ticket_links

    # Some listings expose times as plain text separated by pipes or new lines
    for segment in re.split(r"\n|\|", container.text()):
        segment = segment.strip()
        if is_time_token(segment) and segment not in showtimes:
            showtimes.append(segment)
            ticket_links.append(TICKET_PLACEHOLDER)

    return showtimes, ticket_links


def extract_movie(container: HtmlNode, venue_name: str) -> MovieRecord | None:
    """
    Build a MovieRecord from one candidate block.

    Args:
        container: Candidate node returned by the locator
        venue_name: Display name stored as the record's location

    Returns:
        The record, or None when the block has no title
    """
    title_elem = container.first_match(TITLE_SELECTOR)
    title = clean_text(title_elem.text()) if title_elem else ""
    if not title:
        logger.debug(f"Skipping container: no title found for {venue_name}")
        return None

    img_elem = container.first_match(IMAGE_SELECTOR)
    image = img_elem.attribute("src") if img_elem else ""

    info_elem = container.first_match(INFO_SELECTOR)
    info = parse_info(info_elem.text().strip() if info_elem else "")

    showtimes, ticket_links = extract_showtimes(container)
    room = find_room_label(container.text())

    logger.debug(
        f"Parsed movie: {title!r}, {len(showtimes)} showtimes, "
        f"room: {room!r}, location: {venue_name}"
    )

    return MovieRecord(
        title=title,
        location=venue_name,
        showtimes=showtimes,
        ticket_links=ticket_links,
        image=image,
        room=room,
        director=info.director,
        year=info.year,
        duration=info.duration,
    )


def extract_movies(containers: Iterable[HtmlNode], venue_name: str) -> list[MovieRecord]:
    """Extract every recognizable movie, skipping blocks that fail to parse."""
    movies: list[MovieRecord] = []
    for container in containers:
        try:
            movie = extract_movie(container, venue_name)
        except Exception as e:
            logger.warning(f"Error parsing movie container for {venue_name}: {e}")
            continue
        if movie:
            movies.append(movie)
    return movies
