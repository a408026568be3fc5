"""Tests for the movie listing API endpoints."""

from collections.abc import Callable
from unittest.mock import AsyncMock

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cartelera.api.routes.movies import get_aggregator
from cartelera.scrapers.errors import ListingFetchError
from cartelera.scrapers.models import MovieRecord
from cartelera.services.aggregator import MovieAggregator

DATE = "2026-10-17"

MakeAggregator = Callable[..., MovieAggregator]

ROMA = MovieRecord(
    title="Roma",
    location="Cineteca Nacional",
    showtimes=["16:00", "19:30"],
    ticket_links=["https://t.test/1", "#"],
    room="Sala 3A",
    director="Alfonso Cuarón",
    year="2018",
    duration="135 mins",
)
PARAMO = MovieRecord(
    title="Pedro Páramo",
    location="Cineteca CENART",
    showtimes=["21:00"],
    ticket_links=["#"],
)


def client_for(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def test_post_returns_movies_with_camel_case_keys(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    test_app.dependency_overrides[get_aggregator] = lambda: make_aggregator({"003": [ROMA]})
    try:
        async with client_for(test_app) as client:
            response = await client.post("/api/fetch-movies", json={"date": DATE})
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["error"] is None
    assert data["movies"] == [
        {
            "title": "Roma",
            "showtimes": ["16:00", "19:30"],
            "ticketLinks": ["https://t.test/1", "#"],
            "image": "",
            "room": "Sala 3A",
            "director": "Alfonso Cuarón",
            "year": "2018",
            "duration": "135 mins",
            "location": "Cineteca Nacional",
        }
    ]
    assert data["debug"]["date"] == DATE
    assert data["debug"]["totalFound"] == 1
    assert [c["cinemaId"] for c in data["debug"]["cinemas"]] == ["003", "002"]
    assert set(data["debug"]["cinemas"][0]) == {
        "cinemaId",
        "location",
        "totalFound",
        "containersFound",
        "url",
        "error",
    }


async def test_get_reads_date_from_query(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    aggregator = make_aggregator({"002": [PARAMO]})
    test_app.dependency_overrides[get_aggregator] = lambda: aggregator
    try:
        async with client_for(test_app) as client:
            response = await client.get("/api/fetch-movies", params={"date": DATE})
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    assert [m["title"] for m in response.json()["movies"]] == ["Pedro Páramo"]
    assert aggregator.scraper.calls == [("003", DATE), ("002", DATE)]


async def test_invalid_json_body_falls_back_to_query(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    test_app.dependency_overrides[get_aggregator] = lambda: make_aggregator({"003": [ROMA]})
    try:
        async with client_for(test_app) as client:
            response = await client.post(
                "/api/fetch-movies",
                params={"date": DATE},
                content=b"not json",
                headers={"Content-Type": "application/json"},
            )
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json()["debug"]["date"] == DATE


async def test_missing_date_returns_success_status_with_error(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    test_app.dependency_overrides[get_aggregator] = lambda: make_aggregator({})
    try:
        async with client_for(test_app) as client:
            response = await client.post("/api/fetch-movies", json={})
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["movies"] == []
    assert data["error"] == "Date parameter is required"
    assert "timestamp" in data["debug"]


async def test_venue_failure_is_reported_per_venue(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    test_app.dependency_overrides[get_aggregator] = lambda: make_aggregator({
        "003": ListingFetchError("Connection refused"),
        "002": [PARAMO],
    })
    try:
        async with client_for(test_app) as client:
            response = await client.post("/api/fetch-movies", json={"date": DATE})
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert [m["title"] for m in data["movies"]] == ["Pedro Páramo"]
    assert data["error"] is None
    assert data["debug"]["cinemas"][0]["error"] == "Connection refused"
    assert data["debug"]["cinemas"][1]["error"] is None


async def test_unexpected_error_returns_success_status(test_app: FastAPI) -> None:
    aggregator = AsyncMock()
    aggregator.run = AsyncMock(side_effect=RuntimeError("boom"))
    test_app.dependency_overrides[get_aggregator] = lambda: aggregator
    try:
        async with client_for(test_app) as client:
            response = await client.post("/api/fetch-movies", json={"date": DATE})
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["movies"] == []
    assert data["error"] == "boom"
    assert data["debug"]["url"] == "http://test/api/fetch-movies"


async def test_upcoming_orders_movies_starting_soon_first(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    test_app.dependency_overrides[get_aggregator] = lambda: make_aggregator({
        "003": [ROMA],
        "002": [PARAMO],
    })
    try:
        async with client_for(test_app) as client:
            response = await client.get(
                "/api/movies/upcoming", params={"date": DATE, "now": "20:15", "window": 60}
            )
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["upcomingCount"] == 1
    assert data["now"] == "20:15"
    assert data["date"] == DATE
    assert [m["title"] for m in data["movies"]] == ["Pedro Páramo", "Roma"]
    assert data["movies"][0]["upcomingShowtimes"] == [{"time": "21:00", "ticketLink": "#"}]
    assert data["movies"][1]["upcomingShowtimes"] == []


async def test_upcoming_rejects_invalid_time(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    aggregator = make_aggregator({})
    test_app.dependency_overrides[get_aggregator] = lambda: aggregator
    try:
        async with client_for(test_app) as client:
            response = await client.get(
                "/api/movies/upcoming", params={"date": DATE, "now": "quarter past"}
            )
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["movies"] == []
    assert "HH:MM" in data["error"]
    assert aggregator.scraper.calls == []


async def test_falsy_body_date_falls_back_to_query(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    aggregator = make_aggregator({"003": [ROMA]})
    test_app.dependency_overrides[get_aggregator] = lambda: aggregator
    try:
        async with client_for(test_app) as client:
            response = await client.post(
                "/api/fetch-movies", params={"date": DATE}, json={"date": False}
            )
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["error"] is None
    assert data["debug"]["date"] == DATE
    assert aggregator.scraper.calls == [("003", DATE), ("002", DATE)]


async def test_missing_date_reports_request_url(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    test_app.dependency_overrides[get_aggregator] = lambda: make_aggregator({})
    try:
        async with client_for(test_app) as client:
            response = await client.post("/api/fetch-movies", json={})
    finally:
        test_app.dependency_overrides.clear()

    data = response.json()
    assert data["error"] == "Date parameter is required"
    assert data["debug"]["url"] == "http://test/api/fetch-movies"


async def test_malformed_date_reports_request_url(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    aggregator = make_aggregator({})
    test_app.dependency_overrides[get_aggregator] = lambda: aggregator
    try:
        async with client_for(test_app) as client:
            response = await client.get("/api/fetch-movies", params={"date": "17/10/2026"})
    finally:
        test_app.dependency_overrides.clear()

    data = response.json()
    assert data["error"] == "Date must be in YYYY-MM-DD format"
    assert data["debug"]["url"].startswith("http://test/api/fetch-movies?date=")
    assert aggregator.scraper.calls == []


async def test_upcoming_rejects_invalid_window(
    test_app: FastAPI, make_aggregator: MakeAggregator
) -> None:
    aggregator = make_aggregator({})
    test_app.dependency_overrides[get_aggregator] = lambda: aggregator
    try:
        async with client_for(test_app) as client:
            for window in ("abc", "-5", "1441"):
                response = await client.get(
                    "/api/movies/upcoming",
                    params={"date": DATE, "now": "20:15", "window": window},
                )
                assert response.status_code == 200
                data = response.json()
                assert data["movies"] == []
                assert "Invalid window" in data["error"]
    finally:
        test_app.dependency_overrides.clear()

    assert aggregator.scraper.calls == []
