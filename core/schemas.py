# =============================================================================
# core/schemas.py  -  Argument schemas for every tool (the Validator)
# =============================================================================
#
# Each tool declares its accepted arguments as a pydantic model.  The same
# model serves two purposes:
#
#   1. DISCOVERY:  model_json_schema() is the tool's inputSchema in the
#      catalog, so the agent sees field types, bounds, defaults and enums.
#   2. VALIDATION: validate_arguments() turns the caller's untyped argument
#      bag into a typed, defaulted model instance, or raises
#      ArgumentValidationError listing every violated field.
#
# VALIDATION RULES (shared by every model via ToolArguments):
#   - strict types: "2" is not a page number, true is not an integer
#   - unknown keys are ignored
#   - an explicit null is rejected; defaults apply only to OMITTED fields
#   - numeric bounds are inclusive where declared (ratings are [0, 10])
#   - enumerations are Literal types, matched exactly and case-sensitively
#
# Optional filters are annotated with their real type and default to None,
# so the advertised JSON schema never invites a null.
# =============================================================================

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.errors import ArgumentValidationError

MovieSort = Literal[
    "popularity.desc",
    "popularity.asc",
    "vote_average.desc",
    "vote_average.asc",
    "release_date.desc",
    "release_date.asc",
]

TvSort = Literal[
    "popularity.desc",
    "popularity.asc",
    "vote_average.desc",
    "vote_average.asc",
    "first_air_date.desc",
    "first_air_date.asc",
]

MOVIE_GENRES = (
    "28=Action, 12=Adventure, 16=Animation, 35=Comedy, 80=Crime, 99=Documentary, "
    "18=Drama, 10751=Family, 14=Fantasy, 36=History, 27=Horror, 10402=Music, "
    "9648=Mystery, 10749=Romance, 878=Science Fiction, 10770=TV Movie, "
    "53=Thriller, 10752=War, 37=Western"
)

TV_GENRES = (
    "10759=Action & Adventure, 16=Animation, 35=Comedy, 80=Crime, 99=Documentary, "
    "18=Drama, 10751=Family, 10762=Kids, 9648=Mystery, 10763=News, 10764=Reality, "
    "10765=Sci-Fi & Fantasy, 10766=Soap, 10767=Talk, 10768=War & Politics, 37=Western"
)


class ToolArguments(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value


# -----------------------------------------------------------------------------
# Building blocks
# -----------------------------------------------------------------------------
class PagedArguments(ToolArguments):
    page: int = Field(default=1, gt=0, description="Page number for paginated results (default: 1)")


class SearchMoviesArguments(PagedArguments):
    query: str = Field(min_length=1, description="Movie title to search for")


class SearchTvShowsArguments(PagedArguments):
    query: str = Field(min_length=1, description="TV show name to search for")


class SearchPeopleArguments(PagedArguments):
    query: str = Field(min_length=1, description="Person name to search for")


class MovieIdArguments(ToolArguments):
    movie_id: int = Field(gt=0, description="TMDB movie ID")


class TvIdArguments(ToolArguments):
    tv_id: int = Field(gt=0, description="TMDB TV show ID")


class PersonIdArguments(ToolArguments):
    person_id: int = Field(gt=0, description="TMDB person ID")


class MovieRecommendationsArguments(PagedArguments):
    movie_id: int = Field(gt=0, description="TMDB movie ID to base recommendations on")


class TvRecommendationsArguments(PagedArguments):
    tv_id: int = Field(gt=0, description="TMDB TV show ID to base recommendations on")


# -----------------------------------------------------------------------------
# Filtered discovery
# -----------------------------------------------------------------------------
class DiscoverMoviesArguments(PagedArguments):
    with_genres: str = Field(default=None, description=f"Genre IDs comma-separated ({MOVIE_GENRES})")
    min_year: int = Field(
        default=None, gt=0,
        description="Minimum release year (e.g., 2020 for movies from 2020 onwards)",
    )
    max_year: int = Field(
        default=None, gt=0,
        description="Maximum release year (e.g., 2023 for movies up to 2023)",
    )
    min_rating: float = Field(default=None, ge=0, le=10, description="Minimum vote average (0-10)")
    max_rating: float = Field(default=None, ge=0, le=10, description="Maximum vote average (0-10)")
    min_vote_count: int = Field(
        default=None, gt=0,
        description="Minimum number of votes (helps filter reliable ratings)",
    )
    sort_by: MovieSort = Field(default="popularity.desc", description="Sort order for results")


class DiscoverTvShowsArguments(PagedArguments):
    with_genres: str = Field(default=None, description=f"Genre IDs comma-separated ({TV_GENRES})")
    with_original_language: str = Field(
        default=None,
        description=(
            "Filter by original language using ISO 639-1 codes. Single language "
            "(e.g., 'ja') or comma-separated for multiple (e.g., 'ja,ko,zh')"
        ),
    )
    year: int = Field(default=None, description="First air date year filter (e.g., 2024)")
    min_rating: float = Field(default=None, ge=0, le=10, description="Minimum vote average (0-10)")
    max_rating: float = Field(default=None, ge=0, le=10, description="Maximum vote average (0-10)")
    sort_by: TvSort = Field(default="popularity.desc", description="Sort order for results")


class TrendingArguments(PagedArguments):
    media_type: Literal["all", "movie", "tv", "person"] = Field(
        default="all", description="Type of content: all, movie, tv, or person"
    )
    time_window: Literal["day", "week"] = Field(
        default="week", description="Time period: day (24 hours) or week (7 days)"
    )


# -----------------------------------------------------------------------------
# Validation entry point
# -----------------------------------------------------------------------------
def input_schema(model: type[ToolArguments]) -> dict[str, Any]:
    """JSON schema advertised in the tool catalog."""
    return model.model_json_schema()


def _location(error: Mapping[str, Any]) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "arguments"


def validate_arguments(tool_name: str, model: type[ToolArguments], arguments: Any) -> ToolArguments:
    """Validate an untyped argument bag against ``model``.

    All-or-nothing: either every field is valid and a model instance comes
    back, or ArgumentValidationError is raised naming every violation.
    A missing bag (None) is treated as an empty one so tools whose fields
    all have defaults can be called without arguments.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ArgumentValidationError(
            tool_name, [("arguments", f"expected an object, got {type(arguments).__name__}")]
        )
    try:
        return model.model_validate(dict(arguments))
    except ValidationError as exc:
        violations = [(_location(err), err["msg"]) for err in exc.errors()]
        raise ArgumentValidationError(tool_name, violations) from None
