"""Movie listing API endpoints."""

import json
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, Request

from cartelera.schemas import DebugInfo, ExtractionResponse, UpcomingResponse
from cartelera.services.aggregator import MovieAggregator
from cartelera.services.upcoming import (
    local_now,
    parse_clock,
    parse_window,
    sort_by_upcoming,
)

logger = logging.getLogger(__name__)
router = APIRouter()

UNKNOWN_ERROR = "Unknown error occurred"


def get_aggregator() -> MovieAggregator:
    """Dependency providing a fresh aggregator per request."""
    return MovieAggregator()


async def read_date(request: Request) -> str | None:
    """
    Read the requested date from the JSON body, falling back to ``?date=``.

    A body that is not valid JSON is logged and ignored so GET requests and
    malformed POSTs still get a well-formed response.
    """
    date: str | None = None

    raw_body = await request.body()
    if raw_body:
        try:
            body = json.loads(raw_body)
        except ValueError as e:
            logger.warning(f"Request body could not be parsed as JSON: {e}")
        else:
            if isinstance(body, dict) and body.get("date"):
                date = str(body["date"])

    if not date:
        date = request.query_params.get("date")

    return date


def _request_failure(request: Request, error: Exception) -> DebugInfo:
    logger.error(f"Error fetching movies: {error}", exc_info=True)
    return DebugInfo(timestamp=datetime.now(timezone.utc), url=str(request.url))


@router.api_route("/fetch-movies", methods=["GET", "POST"], response_model=ExtractionResponse)
async def fetch_movies(
    request: Request,
    aggregator: MovieAggregator = Depends(get_aggregator),
) -> ExtractionResponse:
    """
    Scrape all venues for a date.

    Always answers 200: callers must check ``error``, ``movies`` and the
    per-venue errors in ``debug.cinemas``.
    """
    try:
        date = await read_date(request)
        response = await aggregator.run(date)
        if response.error:
            response.debug.url = str(request.url)
        return response
    except Exception as e:
        debug = _request_failure(request, e)
        return ExtractionResponse(movies=[], error=str(e) or UNKNOWN_ERROR, debug=debug)


@router.get("/movies/upcoming", response_model=UpcomingResponse)
async def get_upcoming_movies(
    request: Request,
    date: str | None = Query(None, description="Date to fetch (YYYY-MM-DD), default today"),
    now: str | None = Query(None, description="Reference time (HH:MM), default current time"),
    window: str | None = Query(None, description="Window length in minutes (0-1440)"),
    aggregator: MovieAggregator = Depends(get_aggregator),
) -> UpcomingResponse:
    """
    Scrape all venues and flag the showtimes starting soon.

    Movies with a showtime inside the window come first. Date and time
    default to the current wall-clock time at the venues.
    """
    try:
        current = local_now()
        date = date or current.date().isoformat()

        try:
            reference = parse_clock(now) if now else current.time()
            window_minutes = parse_window(window)
        except ValueError as e:
            return UpcomingResponse(
                date=date,
                error=str(e),
                debug=DebugInfo(
                    timestamp=datetime.now(timezone.utc), date=date, url=str(request.url)
                ),
            )

        result = await aggregator.run(date)
        movies = sort_by_upcoming(result.movies, reference, window_minutes)
        upcoming_count = sum(1 for m in movies if m.upcoming_showtimes)

        logger.info(f"{upcoming_count} movies starting within the window on {date}")

        return UpcomingResponse(
            movies=movies,
            upcoming_count=upcoming_count,
            date=date,
            now=reference.strftime("%H:%M"),
            debug=result.debug,
            error=result.error,
        )
    except Exception as e:
        debug = _request_failure(request, e)
        return UpcomingResponse(error=str(e) or UNKNOWN_ERROR, debug=debug)
