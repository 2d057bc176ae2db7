# =============================================================================
# core/errors.py  -  Error taxonomy for the TMDB tool server
# =============================================================================
#
# Every failure the server can experience is one of these classes.  The
# dispatcher (tools/dispatcher.py) catches all of them except
# ConfigurationError and turns them into an error-shaped tool result, so a
# single bad call never takes the process down.
#
#   ConfigurationError       fatal, startup only (missing token, bad transport)
#   ToolNotFoundError        caller named a tool that is not in the catalog
#   ArgumentValidationError  caller's arguments violate the tool's schema
#   UpstreamError            TMDB answered with a non-2xx status or not at all
#   ProjectionError          TMDB answered with a shape we did not expect
# =============================================================================

from typing import Optional


class TMDBServerError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TMDBServerError):
    """The process is not configured well enough to start serving."""


class ToolNotFoundError(TMDBServerError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name!r}")
        self.name = name


class ArgumentValidationError(TMDBServerError):
    """Arguments for a tool call failed schema validation.

    ``violations`` holds one ``(field, reason)`` pair per violated
    constraint, so the caller sees everything that is wrong at once
    instead of fixing one field per round-trip.
    """

    def __init__(self, tool_name: str, violations: list[tuple[str, str]]):
        self.tool_name = tool_name
        self.violations = violations
        details = "; ".join(f"{field}: {reason}" for field, reason in violations)
        super().__init__(f"Invalid arguments for tool '{tool_name}': {details}")


class UpstreamError(TMDBServerError):
    """The TMDB API returned an error envelope or could not be reached.

    ``status`` is the HTTP status code, or None when no response arrived
    (DNS failure, refused connection, timeout).  ``code`` is TMDB's own
    numeric ``status_code`` from the error envelope when one was present.
    """

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code


class ProjectionError(TMDBServerError):
    """An upstream document could not be reshaped into a tool result."""

    def __init__(self, tool_name: str, cause: Exception):
        super().__init__(
            f"Could not format response for tool '{tool_name}': "
            f"{type(cause).__name__}: {cause}"
        )
        self.tool_name = tool_name
        self.cause = cause
