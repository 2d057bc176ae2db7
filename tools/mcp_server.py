# =============================================================================
# tools/mcp_server.py  -  FastMCP server exposing the TMDB tool catalog
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Wraps the transport-agnostic Dispatcher in a FastMCP server.  Every
#   descriptor in the catalog becomes one FastMCP tool whose parameters are
#   the descriptor's JSON schema and whose run() simply hands the raw
#   arguments to the dispatcher.
#
# WHY NOT @mcp.tool() FUNCTIONS?
#   Thirteen tools share five shapes.  Writing thirteen decorated functions
#   would duplicate the validate -> call -> project pipeline thirteen times,
#   and FastMCP would validate arguments before our own schema rules (null
#   rejection, all-violations messages) ever ran.  DispatchedTool keeps one
#   code path for every tool.
#
# DELIVERY SURFACES:
#   a) stdio:  the MCP client spawns `python main.py` and speaks JSON-RPC
#              over stdin/stdout.
#   b) http:   streamable HTTP on one endpoint (/mcp, GET + POST), stateless
#              so every request gets its own transport session, plus a
#              GET /health liveness probe.
# =============================================================================

import logging
import sys
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr
from starlette.requests import Request
from starlette.responses import JSONResponse

from tools.dispatcher import Dispatcher
from tools.registry import ToolDescriptor

SERVER_NAME = "tmdb-mcp-server"
SERVER_VERSION = "0.1.0"
HTTP_PATH = "/mcp"

INSTRUCTIONS = (
    "Tools for The Movie Database (TMDB). Search or discover movies, TV shows and "
    "people to find their TMDB IDs, then fetch details, credits or recommendations "
    "by ID. Paginated tools return page/total_pages; request further pages explicitly."
)


# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because in stdio mode the MCP messages travel over
# STDOUT.  A single stray log line on stdout would corrupt the protocol
# stream and the client would drop the connection.
# =============================================================================
def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    # One INFO line per upstream request is noise next to the dispatcher's own logging
    logging.getLogger("httpx").setLevel(logging.WARNING)


# =============================================================================
# Tool adapter
# =============================================================================
class DispatchedTool(Tool):
    """A FastMCP tool whose execution is delegated to the Dispatcher."""

    _dispatcher: Dispatcher = PrivateAttr()

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, dispatcher: Dispatcher) -> "DispatchedTool":
        tool = cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.input_schema,
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        result = await self._dispatcher.dispatch(self.name, arguments)
        if result.is_error:
            # FastMCP turns ToolError into a normal result with isError=true
            raise ToolError(result.text)
        return ToolResult(content=[TextContent(type="text", text=result.text)])


def health_payload(transport: str = "streamable-http") -> dict[str, str]:
    return {
        "status": "ok",
        "server": SERVER_NAME,
        "version": SERVER_VERSION,
        "transport": transport,
    }


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
def create_server(dispatcher: Dispatcher) -> FastMCP:
    """Build a FastMCP server exposing every tool in the dispatcher's registry."""
    server = FastMCP(SERVER_NAME, version=SERVER_VERSION, instructions=INSTRUCTIONS)

    for descriptor in dispatcher.registry:
        server.add_tool(DispatchedTool.from_descriptor(descriptor, dispatcher))

    @server.custom_route("/health", methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        return JSONResponse(health_payload())

    return server


def run_server(server: FastMCP, transport: str = "stdio", host: str = "127.0.0.1", port: int = 3000) -> None:
    """Serve until the client disconnects (stdio) or the process is stopped (http)."""
    if transport == "http":
        logging.info(f"{SERVER_NAME} listening on http://{host}:{port}{HTTP_PATH}")
        server.run(
            transport="streamable-http",
            host=host,
            port=port,
            path=HTTP_PATH,
            stateless_http=True,
        )
    else:
        logging.info(f"{SERVER_NAME} running on stdio")
        server.run(transport="stdio")
