# =============================================================================
# tools/dispatcher.py  -  Route one tool call through validate -> call -> project
# =============================================================================
#
# HOW IT WORKS (the flow of a single call):
#   1. Received     tool name + untyped argument bag arrive from a transport
#   2. (lookup)     unknown name                 -> Failed (ToolNotFoundError)
#   3. Validating   core/schemas.py              -> Failed (ArgumentValidationError)
#   4. Calling      core/tmdb_client.py, one GET -> Failed (UpstreamError)
#   5. Projecting   core/projections.py          -> Failed (ProjectionError)
#   6. Completed    CallResult with the projected JSON
#
# THE ONE RULE:
#   dispatch() never raises.  Every failure, expected or not, comes back as
#   CallResult(is_error=True) with a readable message, so one bad call can
#   never crash the server or surface as a protocol-level fault.  The
#   try/except lives here, once, instead of inside every tool.
#
# The dispatcher is stateless between calls: it only holds the read-only
# registry and the client's immutable configuration, so any number of calls
# may be in flight at once without locking.
# =============================================================================

import logging
from typing import Any

from core.errors import ProjectionError, TMDBServerError, ToolNotFoundError
from core.models import CallResult
from core.schemas import validate_arguments
from core.tmdb_client import TMDBClient, build_request
from tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"

_PREVIEW_CHARS = 300


def _log_request(tool_name: Any, arguments: Any) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    if isinstance(arguments, dict):
        param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    else:
        param_str = repr(arguments)
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: Any, result: CallResult) -> CallResult:
    """Log a compact preview of the result in GREEN, then return it."""
    preview = " ".join(result.text.split())
    if len(preview) > _PREVIEW_CHARS:
        preview = preview[:_PREVIEW_CHARS] + "..."
    outcome = "error" if result.is_error else "response"
    logger.info(f"{_GREEN}  ← {tool_name} {outcome}: {preview}{_RESET}")
    return result


class Dispatcher:
    def __init__(self, registry: ToolRegistry, client: TMDBClient):
        self.registry = registry
        self.client = client

    def list_tools(self) -> list[dict[str, Any]]:
        return self.registry.catalog()

    async def dispatch(self, name: Any, arguments: Any = None) -> CallResult:
        """Run one tool call end to end.  Never raises (except cancellation)."""
        _log_request(name, arguments)
        try:
            document = await self._run(name, arguments)
        except ProjectionError as e:
            logger.error(f"{name}: {e}", exc_info=e.cause)
            return _log_response(name, CallResult.failure(str(e)))
        except TMDBServerError as e:
            logger.warning(f"{name} failed: {e}")
            return _log_response(name, CallResult.failure(str(e)))
        except Exception as e:
            logger.exception(f"Unexpected error in tool {name!r}")
            return _log_response(
                name, CallResult.failure(f"Internal error: {type(e).__name__}: {e}")
            )
        return _log_response(name, CallResult.success(document))

    async def _run(self, name: Any, arguments: Any) -> dict[str, Any]:
        descriptor = self.registry.resolve(name)
        if descriptor is None:
            raise ToolNotFoundError(str(name))

        validated = validate_arguments(descriptor.name, descriptor.arguments, arguments)
        request = build_request(descriptor.path, validated, descriptor.query)
        _log_status(f"GET {request.path} {request.params}")

        document = await self.client.get(request)

        try:
            return descriptor.project(document, validated)
        except Exception as e:
            raise ProjectionError(descriptor.name, e) from e
