# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every request-scoped value that
# flows through a tool call:
#
#   arguments (dict)  ->  validated model  ->  UpstreamRequest
#                     ->  TMDB JSON        ->  projected dict  ->  CallResult
#
# Everything here is immutable.  Nothing is shared between concurrent
# calls except the catalog, which is itself read-only after startup.
# =============================================================================

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Optional


# -----------------------------------------------------------------------------
# QueryParam - one entry of a tool's "argument field -> TMDB query key" table
# -----------------------------------------------------------------------------
# Most entries are a straight rename (min_rating -> vote_average.gte).  A few
# need a value rewrite too, e.g. discover_movies turns min_year=2020 into
# primary_release_date.gte=2020-01-01.  That is what ``transform`` is for.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class QueryParam:
    """Maps one validated argument onto one upstream query-string key."""

    field: str                                   # attribute on the validated model
    key: str                                     # TMDB query-string key
    transform: Optional[Callable[[Any], Any]] = None


# -----------------------------------------------------------------------------
# UpstreamRequest - exactly one GET against the TMDB API
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class UpstreamRequest:
    """A fully resolved TMDB request.

    ``params`` only contains keys whose argument was actually set; omitted
    optional filters never reach TMDB as empty strings.
    """

    path_template: str                 # "/movie/{movie_id}/credits"
    path: str                          # "/movie/27205/credits"
    params: dict[str, str] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# CallResult - what the caller gets back from a tool call
# -----------------------------------------------------------------------------
# Either success content OR an error message, never both.  The text is what
# ends up inside the single MCP text block.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CallResult:
    text: str
    is_error: bool = False

    @classmethod
    def success(cls, document: dict[str, Any]) -> "CallResult":
        return cls(text=json.dumps(document, indent=2, ensure_ascii=False))

    @classmethod
    def failure(cls, message: str) -> "CallResult":
        return cls(text=f"Error: {message}", is_error=True)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape of an MCP ``tools/call`` result."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }
