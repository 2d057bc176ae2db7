# =============================================================================
# core/projections.py  -  Reshape TMDB documents into compact tool results
# =============================================================================
#
# CONTEXT BUDGET DISCIPLINE:
#   A raw TMDB movie document carries dozens of fields the agent never
#   reasons about (adult flags, video flags, genre id arrays, raw image
#   paths...).  Every tool instead returns a fixed allow-list of fields,
#   with image paths turned into ready-to-use URLs, cast lists capped at 20
#   and crew lists cut down to the creative leads.
#
# HOW IT IS ORGANISED:
#   - pick() copies an allow-list of fields out of one document.  Entries are
#     either a plain field name (copied verbatim, None when absent) or a
#     Derived(name, fn) that computes the value from the whole document.
#   - A handful of projector classes (Details, SearchResults, Discover,
#     Recommendations, Credits, Trending) cover all thirteen tools.  The
#     per-tool differences live in the field tables below, not in code.
#
# Projectors never mutate the upstream document.  Collections the TMDB
# contract guarantees (results, cast, crew) are indexed directly, so a
# drifted payload fails loudly and the dispatcher reports it as a
# ProjectionError.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from core.schemas import ToolArguments

logger = logging.getLogger(__name__)

Document = dict[str, Any]

IMAGE_BASE_URL = "https://image.tmdb.org/t/p/"
POSTER_SIZE = "w500"
BACKDROP_SIZE = "original"
PROFILE_SIZE = "w185"
PROFILE_DETAIL_SIZE = "h632"

CAST_LIMIT = 20
MOVIE_CREW_JOBS = frozenset(
    {"Director", "Producer", "Writer", "Screenplay", "Story", "Executive Producer"}
)
TV_CREW_JOBS = MOVIE_CREW_JOBS | {"Creator"}


def image_url(path: Optional[str], size: str) -> Optional[str]:
    """'/abc.jpg' + 'w500' -> 'https://image.tmdb.org/t/p/w500/abc.jpg'; no path -> None."""
    if not path:
        return None
    return f"{IMAGE_BASE_URL}{size}{path}"


@dataclass(frozen=True)
class Derived:
    name: str
    compute: Callable[[Document], Any]


Field = Union[str, Derived]


def image(field: str, size: str) -> Derived:
    return Derived(field, lambda doc: image_url(doc.get(field), size))


def pick(doc: Document, fields: tuple[Field, ...]) -> Document:
    out: Document = {}
    for field in fields:
        if isinstance(field, Derived):
            out[field.name] = field.compute(doc)
        else:
            out[field] = doc.get(field)
    return out


def _known_for(doc: Document) -> Optional[list[Document]]:
    items = doc.get("known_for")
    if items is None:
        return None
    return [
        {
            "id": item.get("id"),
            "title": item.get("title") or item.get("name"),
            "media_type": item.get("media_type"),
            "vote_average": item.get("vote_average"),
        }
        for item in items
    ]


# =============================================================================
# Field tables
# =============================================================================
POSTER = image("poster_path", POSTER_SIZE)
BACKDROP = image("backdrop_path", BACKDROP_SIZE)
PROFILE = image("profile_path", PROFILE_SIZE)

MOVIE_SEARCH_FIELDS: tuple[Field, ...] = (
    "id", "title", "original_title", "release_date", "overview",
    "vote_average", "vote_count", "popularity", POSTER, BACKDROP,
)

MOVIE_LIST_FIELDS: tuple[Field, ...] = (
    "id", "title", "release_date", "overview",
    "vote_average", "vote_count", "popularity", POSTER,
)

MOVIE_DETAIL_FIELDS: tuple[Field, ...] = (
    "id", "title", "original_title", "tagline", "overview", "release_date",
    "runtime", "status", "budget", "revenue", "vote_average", "vote_count",
    "popularity", "genres", "production_companies", "production_countries",
    "spoken_languages", POSTER, BACKDROP,
)

TV_SEARCH_FIELDS: tuple[Field, ...] = (
    "id", "name", "original_name", "first_air_date", "overview",
    "vote_average", "vote_count", "popularity", "origin_country", POSTER, BACKDROP,
)

TV_LIST_FIELDS: tuple[Field, ...] = (
    "id", "name", "first_air_date", "overview",
    "vote_average", "vote_count", "popularity", POSTER,
)

TV_DETAIL_FIELDS: tuple[Field, ...] = (
    "id", "name", "original_name", "tagline", "overview", "first_air_date",
    "last_air_date", "status", "type", "number_of_seasons", "number_of_episodes",
    "episode_run_time", "in_production", "vote_average", "vote_count",
    "popularity", "genres", "created_by", "networks", "origin_country",
    "languages", "homepage", POSTER, BACKDROP,
)

PERSON_SEARCH_FIELDS: tuple[Field, ...] = (
    "id", "name", "known_for_department", "popularity", PROFILE,
    Derived("known_for", _known_for),
)

PERSON_DETAIL_FIELDS: tuple[Field, ...] = (
    "id", "name", "biography", "birthday", "deathday", "place_of_birth",
    "also_known_as", "known_for_department", "popularity", "homepage", "imdb_id",
    image("profile_path", PROFILE_DETAIL_SIZE),
)

MOVIE_CAST_FIELDS: tuple[Field, ...] = ("id", "name", "character", "order", PROFILE)
TV_CAST_FIELDS: tuple[Field, ...] = ("id", "name", "character", PROFILE)
CREW_FIELDS: tuple[Field, ...] = ("id", "name", "job", "department")

# Trending items are a tagged union keyed by "media_type".
TRENDING_COMMON_FIELDS: tuple[Field, ...] = ("id", "media_type", "popularity", "vote_average")
TRENDING_VARIANT_FIELDS: dict[str, tuple[Field, ...]] = {
    "movie": ("title", "release_date", "overview"),
    "tv": ("name", "first_air_date", "overview"),
    "person": ("name", "known_for_department"),
}


# =============================================================================
# Projectors
# =============================================================================
def page_envelope(
    doc: Document,
    items: list[Document],
    key: str = "results",
    head: Optional[Document] = None,
    filters: Optional[Document] = None,
) -> Document:
    out: Document = dict(head or {})
    out["page"] = doc.get("page")
    out["total_results"] = doc.get("total_results")
    out["total_pages"] = doc.get("total_pages")
    if filters is not None:
        out["filters_applied"] = filters
    out[key] = items
    return out


@dataclass(frozen=True)
class Details:
    fields: tuple[Field, ...]

    def __call__(self, doc: Document, arguments: ToolArguments) -> Document:
        return pick(doc, self.fields)


@dataclass(frozen=True)
class SearchResults:
    fields: tuple[Field, ...]

    def __call__(self, doc: Document, arguments: ToolArguments) -> Document:
        return page_envelope(doc, [pick(item, self.fields) for item in doc["results"]])


@dataclass(frozen=True)
class Recommendations:
    fields: tuple[Field, ...]
    id_field: str                       # "movie_id" -> echoed as based_on_movie_id

    def __call__(self, doc: Document, arguments: ToolArguments) -> Document:
        return page_envelope(
            doc,
            [pick(item, self.fields) for item in doc["results"]],
            key="recommendations",
            head={f"based_on_{self.id_field}": getattr(arguments, self.id_field)},
        )


@dataclass(frozen=True)
class Discover:
    """Paginated results plus an echo of the filters in effect; unset ones are left out."""

    fields: tuple[Field, ...]
    echo: tuple[tuple[str, str], ...]   # (key in filters_applied, argument field)

    def __call__(self, doc: Document, arguments: ToolArguments) -> Document:
        filters = {
            key: value
            for key, field in self.echo
            if (value := getattr(arguments, field)) is not None
        }
        return page_envelope(
            doc, [pick(item, self.fields) for item in doc["results"]], filters=filters
        )


@dataclass(frozen=True)
class Credits:
    """Top-billed cast (upstream order, capped) and crew filtered by job."""

    id_key: str                         # "movie_id" or "tv_id"
    cast_fields: tuple[Field, ...]
    crew_jobs: frozenset[str]

    def __call__(self, doc: Document, arguments: ToolArguments) -> Document:
        return {
            self.id_key: doc.get("id"),
            "cast": [pick(member, self.cast_fields) for member in doc["cast"][:CAST_LIMIT]],
            "crew": [
                pick(member, CREW_FIELDS)
                for member in doc["crew"]
                if member.get("job") in self.crew_jobs
            ],
        }


def trending_item(item: Document, requested_type: str) -> Document:
    """Project one trending item by its media_type tag.

    Items from /trending/movie etc. may omit the tag; the requested type
    stands in for it then.  An unrecognised tag gets only the common fields.
    """
    kind = item.get("media_type") or (requested_type if requested_type != "all" else None)
    out = pick(item, TRENDING_COMMON_FIELDS)
    out["media_type"] = kind

    variant = TRENDING_VARIANT_FIELDS.get(kind)
    if variant is None:
        logger.warning(f"Unrecognized trending media_type {kind!r} for item {item.get('id')!r}")
        return out
    out.update(pick(item, variant))
    return out


@dataclass(frozen=True)
class Trending:
    def __call__(self, doc: Document, arguments: ToolArguments) -> Document:
        media_type = arguments.media_type
        return page_envelope(
            doc,
            [trending_item(item, media_type) for item in doc["results"]],
            head={"media_type": media_type, "time_window": arguments.time_window},
        )
