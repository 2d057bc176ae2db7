"""Shared fixtures: a fake TMDB API behind httpx.MockTransport."""
from __future__ import annotations

from typing import Any

import httpx
import pytest

from core.tmdb_client import TMDBClient
from tools.catalog import build_registry
from tools.dispatcher import Dispatcher

NOT_FOUND = {
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
    "success": False,
}


class FakeTMDB:
    """Records every request and answers from a path -> (status, body) table.

    Paths are registered without the /3 API version prefix.  Unregistered
    paths answer with TMDB's 404 envelope.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, tuple[int, Any]] = {}

    def respond(self, path: str, body: Any, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/3")
        status, body = self.routes.get(path, (404, NOT_FOUND))
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def tmdb() -> FakeTMDB:
    return FakeTMDB()


@pytest.fixture
def client(tmdb: FakeTMDB) -> TMDBClient:
    return TMDBClient("test-token", transport=httpx.MockTransport(tmdb.handler))


@pytest.fixture
def dispatcher(client: TMDBClient) -> Dispatcher:
    return Dispatcher(build_registry(), client)


# -----------------------------------------------------------------------------
# Upstream document builders
# -----------------------------------------------------------------------------
def movie(i: int, **overrides: Any) -> dict[str, Any]:
    doc = {
        "id": 1000 + i,
        "title": f"Movie {i}",
        "original_title": f"Original Movie {i}",
        "release_date": "2010-07-16",
        "overview": f"Overview {i}",
        "poster_path": f"/poster{i}.jpg",
        "backdrop_path": None,
        "vote_average": 8.4,
        "vote_count": 35000,
        "popularity": 90.5,
        "adult": False,
        "video": False,
        "genre_ids": [28, 878],
        "original_language": "en",
    }
    doc.update(overrides)
    return doc


def tv_show(i: int, **overrides: Any) -> dict[str, Any]:
    doc = {
        "id": 2000 + i,
        "name": f"Show {i}",
        "original_name": f"Original Show {i}",
        "first_air_date": "2008-01-20",
        "overview": f"Overview {i}",
        "poster_path": f"/tv{i}.jpg",
        "backdrop_path": f"/tvback{i}.jpg",
        "vote_average": 8.9,
        "vote_count": 14000,
        "popularity": 300.1,
        "origin_country": ["US"],
        "original_language": "en",
    }
    doc.update(overrides)
    return doc


def page_of(results: list[dict[str, Any]], page: int = 1, total_pages: int = 5) -> dict[str, Any]:
    return {
        "page": page,
        "results": results,
        "total_pages": total_pages,
        "total_results": total_pages * 20,
    }


def cast_member(i: int) -> dict[str, Any]:
    return {
        "id": 3000 + i,
        "name": f"Actor {i}",
        "character": f"Character {i}",
        "order": i,
        "profile_path": f"/actor{i}.jpg" if i % 2 == 0 else None,
        "known_for_department": "Acting",
    }


def crew_member(i: int, job: str, department: str = "Directing") -> dict[str, Any]:
    return {"id": 4000 + i, "name": f"Crew {i}", "job": job, "department": department}
