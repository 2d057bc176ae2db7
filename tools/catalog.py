# =============================================================================
# tools/catalog.py  -  The thirteen TMDB tools, declared as data
# =============================================================================
#
# Every tool is one ToolDescriptor row.  Movies, TV shows and people share
# the same handful of shapes (search, details, discover, recommendations,
# credits), so the differences are only in:
#   - the argument model         (core/schemas.py)
#   - the TMDB path and query    (below)
#   - the field tables           (core/projections.py)
#
# TOOL NAMING CONVENTIONS:
#   - search_*   -> free-text lookup, paginated
#   - get_*      -> read one resource (or a list derived from one)
#   - discover_* -> filtered browse, paginated, echoes the filters used
#   All tools are read-only and idempotent.
#
# The descriptions matter: the agent reads them to decide WHEN to call each
# tool, so they say what comes back, not how it is fetched.
# =============================================================================

from core import projections as p
from core import schemas as s
from core.models import QueryParam
from tools.registry import ToolDescriptor, ToolRegistry

SEARCH_QUERY = (QueryParam("query", "query"), QueryParam("page", "page"))
PAGE_QUERY = (QueryParam("page", "page"),)


# =============================================================================
# Movies
# =============================================================================
MOVIE_TOOLS = (
    ToolDescriptor(
        name="search_movies",
        description=(
            "Search for movies by title. Returns matching movies with basic "
            "information such as title, release date, overview, and rating."
        ),
        arguments=s.SearchMoviesArguments,
        path="/search/movie",
        query=SEARCH_QUERY,
        project=p.SearchResults(p.MOVIE_SEARCH_FIELDS),
    ),
    ToolDescriptor(
        name="get_movie_details",
        description=(
            "Get detailed information about one movie by its TMDB ID: budget, "
            "revenue, runtime, genres, production companies, languages, and more."
        ),
        arguments=s.MovieIdArguments,
        path="/movie/{movie_id}",
        project=p.Details(p.MOVIE_DETAIL_FIELDS),
    ),
    ToolDescriptor(
        name="discover_movies",
        description=(
            "Discover movies with filters for genre, release year range, rating, "
            "vote count, and sort order. Use it for requests like 'sci-fi movies "
            "from 2020 onwards rated above 7' or 'classic action movies before 2000'."
        ),
        arguments=s.DiscoverMoviesArguments,
        path="/discover/movie",
        query=(
            QueryParam("with_genres", "with_genres"),
            QueryParam("min_year", "primary_release_date.gte", lambda year: f"{year}-01-01"),
            QueryParam("max_year", "primary_release_date.lte", lambda year: f"{year}-12-31"),
            QueryParam("min_rating", "vote_average.gte"),
            QueryParam("max_rating", "vote_average.lte"),
            QueryParam("min_vote_count", "vote_count.gte"),
            QueryParam("sort_by", "sort_by"),
            QueryParam("page", "page"),
        ),
        project=p.Discover(
            p.MOVIE_LIST_FIELDS,
            echo=(
                ("genres", "with_genres"),
                ("min_year", "min_year"),
                ("max_year", "max_year"),
                ("min_rating", "min_rating"),
                ("max_rating", "max_rating"),
                ("min_vote_count", "min_vote_count"),
                ("sort_by", "sort_by"),
            ),
        ),
    ),
    ToolDescriptor(
        name="get_recommendations",
        description=(
            "Get movie recommendations based on one movie: titles that users who "
            "liked it also enjoyed. Good for 'if you liked X, try Y' suggestions."
        ),
        arguments=s.MovieRecommendationsArguments,
        path="/movie/{movie_id}/recommendations",
        query=PAGE_QUERY,
        project=p.Recommendations(p.MOVIE_LIST_FIELDS, id_field="movie_id"),
    ),
    ToolDescriptor(
        name="get_trending",
        description=(
            "Get daily or weekly trending movies, TV shows, or people, i.e. what "
            "is currently popular on TMDB based on user activity."
        ),
        arguments=s.TrendingArguments,
        path="/trending/{media_type}/{time_window}",
        query=PAGE_QUERY,
        project=p.Trending(),
    ),
    ToolDescriptor(
        name="get_movie_credits",
        description=(
            "Get cast and crew for one movie: the top 20 billed actors with their "
            "characters, and key crew (directors, writers, producers) with their jobs."
        ),
        arguments=s.MovieIdArguments,
        path="/movie/{movie_id}/credits",
        project=p.Credits("movie_id", p.MOVIE_CAST_FIELDS, p.MOVIE_CREW_JOBS),
    ),
)


# =============================================================================
# TV shows
# =============================================================================
TV_TOOLS = (
    ToolDescriptor(
        name="search_tv_shows",
        description=(
            "Search for TV shows by name. Returns matching shows with basic "
            "information such as name, first air date, overview, and rating."
        ),
        arguments=s.SearchTvShowsArguments,
        path="/search/tv",
        query=SEARCH_QUERY,
        project=p.SearchResults(p.TV_SEARCH_FIELDS),
    ),
    ToolDescriptor(
        name="get_tv_details",
        description=(
            "Get detailed information about one TV show by its TMDB ID: number of "
            "seasons and episodes, networks, creators, status, and more."
        ),
        arguments=s.TvIdArguments,
        path="/tv/{tv_id}",
        project=p.Details(p.TV_DETAIL_FIELDS),
    ),
    ToolDescriptor(
        name="discover_tv_shows",
        description=(
            "Discover TV shows with filters for genre, original language, first air "
            "year, rating, and sort order. Use it for requests like 'Korean dramas "
            "from 2023 rated above 7' or 'Japanese anime shows'."
        ),
        arguments=s.DiscoverTvShowsArguments,
        path="/discover/tv",
        query=(
            QueryParam("with_genres", "with_genres"),
            QueryParam("with_original_language", "with_original_language"),
            QueryParam("year", "first_air_date_year"),
            QueryParam("min_rating", "vote_average.gte"),
            QueryParam("max_rating", "vote_average.lte"),
            QueryParam("sort_by", "sort_by"),
            QueryParam("page", "page"),
        ),
        project=p.Discover(
            p.TV_LIST_FIELDS,
            echo=(
                ("genres", "with_genres"),
                ("original_language", "with_original_language"),
                ("year", "year"),
                ("min_rating", "min_rating"),
                ("max_rating", "max_rating"),
                ("sort_by", "sort_by"),
            ),
        ),
    ),
    ToolDescriptor(
        name="get_tv_recommendations",
        description=(
            "Get TV show recommendations based on one show: series that users who "
            "liked it also enjoyed."
        ),
        arguments=s.TvRecommendationsArguments,
        path="/tv/{tv_id}/recommendations",
        query=PAGE_QUERY,
        project=p.Recommendations(p.TV_LIST_FIELDS, id_field="tv_id"),
    ),
    ToolDescriptor(
        name="get_tv_credits",
        description=(
            "Get cast and crew for one TV show: the top 20 billed actors with their "
            "characters, and key crew (creators, directors, writers, producers)."
        ),
        arguments=s.TvIdArguments,
        path="/tv/{tv_id}/credits",
        project=p.Credits("tv_id", p.TV_CAST_FIELDS, p.TV_CREW_JOBS),
    ),
)


# =============================================================================
# People
# =============================================================================
PEOPLE_TOOLS = (
    ToolDescriptor(
        name="search_people",
        description=(
            "Search for people (actors, directors, producers, crew) by name. Returns "
            "profile photo, department they are known for, and their best-known titles."
        ),
        arguments=s.SearchPeopleArguments,
        path="/search/person",
        query=SEARCH_QUERY,
        project=p.SearchResults(p.PERSON_SEARCH_FIELDS),
    ),
    ToolDescriptor(
        name="get_person_details",
        description=(
            "Get biographical information about one person by TMDB ID: biography, "
            "birth and death dates, place of birth, IMDb ID, homepage, and more."
        ),
        arguments=s.PersonIdArguments,
        path="/person/{person_id}",
        project=p.Details(p.PERSON_DETAIL_FIELDS),
    ),
)

ALL_TOOLS = MOVIE_TOOLS + TV_TOOLS + PEOPLE_TOOLS


def build_registry() -> ToolRegistry:
    return ToolRegistry(ALL_TOOLS)
