"""Tests for core.schemas: argument validation and advertised input schemas."""
from __future__ import annotations

import pytest

from core.errors import ArgumentValidationError
from core.schemas import (
    DiscoverMoviesArguments,
    DiscoverTvShowsArguments,
    MovieIdArguments,
    SearchMoviesArguments,
    TrendingArguments,
    input_schema,
    validate_arguments,
)


def _fields(exc: ArgumentValidationError) -> list[str]:
    return [field for field, _ in exc.violations]


def test_defaults_apply_to_omitted_fields() -> None:
    args = validate_arguments("search_movies", SearchMoviesArguments, {"query": "Inception"})
    assert args.query == "Inception"
    assert args.page == 1


def test_missing_arguments_bag_uses_every_default() -> None:
    args = validate_arguments("get_trending", TrendingArguments, None)
    assert (args.media_type, args.time_window, args.page) == ("all", "week", 1)


def test_missing_required_field_fails() -> None:
    with pytest.raises(ArgumentValidationError) as exc_info:
        validate_arguments("search_movies", SearchMoviesArguments, {"page": 2})
    assert _fields(exc_info.value) == ["query"]
    assert "search_movies" in str(exc_info.value)


def test_empty_query_is_rejected() -> None:
    with pytest.raises(ArgumentValidationError) as exc_info:
        validate_arguments("search_movies", SearchMoviesArguments, {"query": ""})
    assert _fields(exc_info.value) == ["query"]


def test_explicit_null_is_not_replaced_by_default() -> None:
    with pytest.raises(ArgumentValidationError) as exc_info:
        validate_arguments("search_movies", SearchMoviesArguments, {"query": "x", "page": None})
    field, reason = exc_info.value.violations[0]
    assert field == "page"
    assert "must not be null" in reason


def test_explicit_null_optional_filter_is_rejected() -> None:
    with pytest.raises(ArgumentValidationError) as exc_info:
        validate_arguments("discover_movies", DiscoverMoviesArguments, {"min_rating": None})
    assert _fields(exc_info.value) == ["min_rating"]


@pytest.mark.parametrize("rating", [0, 0.0, 7, 7.5, 10])
def test_rating_bounds_are_inclusive(rating: float) -> None:
    args = validate_arguments("discover_movies", DiscoverMoviesArguments, {"min_rating": rating})
    assert args.min_rating == rating
    assert 0 <= args.min_rating <= 10


@pytest.mark.parametrize("rating", [-0.1, 10.01, 11])
def test_rating_outside_bounds_fails(rating: float) -> None:
    with pytest.raises(ArgumentValidationError) as exc_info:
        validate_arguments("discover_tv_shows", DiscoverTvShowsArguments, {"max_rating": rating})
    assert _fields(exc_info.value) == ["max_rating"]


def test_every_violation_is_reported_at_once() -> None:
    with pytest.raises(ArgumentValidationError) as exc_info:
        validate_arguments(
            "discover_movies",
            DiscoverMoviesArguments,
            {"min_rating": 11, "max_rating": -1, "page": 0, "sort_by": "best"},
        )
    assert sorted(_fields(exc_info.value)) == ["max_rating", "min_rating", "page", "sort_by"]


@pytest.mark.parametrize("value", ["2", True, 1.5])
def test_page_requires_a_real_integer(value: object) -> None:
    with pytest.raises(ArgumentValidationError):
        validate_arguments("search_movies", SearchMoviesArguments, {"query": "x", "page": value})


@pytest.mark.parametrize("movie_id", [0, -5])
def test_ids_must_be_positive(movie_id: int) -> None:
    with pytest.raises(ArgumentValidationError):
        validate_arguments("get_movie_details", MovieIdArguments, {"movie_id": movie_id})


def test_enums_match_exactly() -> None:
    with pytest.raises(ArgumentValidationError) as exc_info:
        validate_arguments("get_trending", TrendingArguments, {"media_type": "Movie", "time_window": "month"})
    assert sorted(_fields(exc_info.value)) == ["media_type", "time_window"]


def test_tv_sort_order_differs_from_movie_sort_order() -> None:
    validate_arguments("discover_tv_shows", DiscoverTvShowsArguments, {"sort_by": "first_air_date.desc"})
    with pytest.raises(ArgumentValidationError):
        validate_arguments("discover_movies", DiscoverMoviesArguments, {"sort_by": "first_air_date.desc"})


def test_unknown_keys_are_ignored() -> None:
    args = validate_arguments("get_movie_details", MovieIdArguments, {"movie_id": 550, "language": "fr"})
    assert args.movie_id == 550
    assert not hasattr(args, "language")


def test_non_mapping_arguments_fail() -> None:
    with pytest.raises(ArgumentValidationError) as exc_info:
        validate_arguments("get_movie_details", MovieIdArguments, ["movie_id", 550])
    assert _fields(exc_info.value) == ["arguments"]


def test_optional_filters_read_as_none_when_omitted() -> None:
    args = validate_arguments("discover_movies", DiscoverMoviesArguments, {})
    assert args.with_genres is None
    assert args.min_year is None
    assert args.sort_by == "popularity.desc"


def test_input_schema_declares_required_fields_and_bounds() -> None:
    schema = input_schema(DiscoverMoviesArguments)
    assert schema["type"] == "object"
    assert "required" not in schema
    assert schema["properties"]["min_rating"]["maximum"] == 10
    assert schema["properties"]["min_rating"]["minimum"] == 0
    assert schema["properties"]["page"]["default"] == 1
    assert "release_date.asc" in schema["properties"]["sort_by"]["enum"]

    assert input_schema(SearchMoviesArguments)["required"] == ["query"]
