# =============================================================================
# core/tmdb_client.py  -  The one place that talks to api.themoviedb.org
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   1. build_request() turns a validated argument model plus a tool's
#      declared path template and query table into an UpstreamRequest.
#   2. TMDBClient.get() issues exactly ONE authenticated GET for it and
#      returns the decoded JSON document, or raises UpstreamError.
#
# WHAT IT DELIBERATELY DOES NOT DO:
#   No retries, no caching, no timeout override beyond httpx's default.
#   Every tool call is a single fresh request; failures go back to the
#   agent, which decides whether to try again.
#
# TMDB ERROR ENVELOPE:
#   Non-2xx responses carry {"status_code": 34, "status_message": "...",
#   "success": false}.  status_message is what the agent gets to read.
# =============================================================================

import logging
from typing import Any, Iterable, Optional

import httpx

from core.errors import ConfigurationError, UpstreamError
from core.models import QueryParam, UpstreamRequest
from core.schemas import ToolArguments

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"


def stringify(value: Any) -> str:
    """Render a query value the way TMDB expects it.

    Whole-number floats lose their fractional part (7.0 -> "7") and
    booleans are lowercase, matching what a JavaScript client would send.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_request(
    path_template: str,
    arguments: ToolArguments,
    query: Iterable[QueryParam] = (),
) -> UpstreamRequest:
    """Resolve the path and query string for one tool call.

    Path placeholders are filled from the validated arguments
    ("/movie/{movie_id}" -> "/movie/550").  Query entries whose argument is
    unset (None) are dropped, so TMDB never sees an empty filter.
    """
    values = arguments.model_dump()
    path = path_template.format(**values)

    params: dict[str, str] = {}
    for param in query:
        value = values.get(param.field)
        if value is None:
            continue
        if param.transform is not None:
            value = param.transform(value)
        params[param.key] = stringify(value)

    return UpstreamRequest(path_template=path_template, path=path, params=params)


class TMDBClient:
    """Async TMDB v3 client authenticated with a v4 read-access token.

    Holds only immutable configuration, so one instance is safely shared by
    every concurrent tool call.  ``transport`` lets tests substitute an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not access_token:
            raise ConfigurationError("TMDB_ACCESS_TOKEN is required")
        self._access_token = access_token
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._access_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def get(self, request: UpstreamRequest) -> dict[str, Any]:
        """Perform the GET described by ``request``.

        Raises:
            UpstreamError: non-2xx status (message from the TMDB envelope),
                transport failure (status None), or a body that is not JSON.
        """
        url = f"{self.base_url}{request.path}"
        logger.debug(f"GET {url} params={request.params}")

        try:
            async with httpx.AsyncClient(headers=self.headers, transport=self._transport) as client:
                response = await client.get(url, params=request.params)
        except httpx.RequestError as e:
            raise UpstreamError(f"TMDB request failed: {type(e).__name__}: {e}") from e

        if not response.is_success:
            raise self._error_from_response(response)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"TMDB returned a non-JSON body for {request.path}",
                status=response.status_code,
            ) from e

    @staticmethod
    def _error_from_response(response: httpx.Response) -> UpstreamError:
        message = response.reason_phrase or f"HTTP {response.status_code}"
        code = None
        try:
            envelope = response.json()
        except ValueError:
            envelope = None
        if isinstance(envelope, dict):
            message = envelope.get("status_message") or message
            code = envelope.get("status_code")
        return UpstreamError(f"TMDB API Error: {message}", status=response.status_code, code=code)
