# =============================================================================
# main.py  -  Entry Point for the TMDB MCP Server
# =============================================================================
#
# HOW TO RUN:
#   TMDB_ACCESS_TOKEN=... python main.py                 # stdio (default)
#   TMDB_ACCESS_TOKEN=... python main.py --transport http --port 3000
#
# WHAT HAPPENS:
#   1. Loads .env into the environment (TMDB_ACCESS_TOKEN, MCP_TRANSPORT...)
#   2. Reads Settings; a missing token stops the process with exit code 1
#   3. Builds the tool catalog, the TMDB client and the dispatcher
#   4. Wraps them in a FastMCP server and serves on stdio or HTTP
#
# REGISTERING WITH AN MCP CLIENT (stdio):
#   {"command": "python", "args": ["/path/to/main.py"],
#    "env": {"TMDB_ACCESS_TOKEN": "<your TMDB read access token>"}}
# =============================================================================

import argparse
import logging
import sys

from dotenv import load_dotenv

from core.config import TRANSPORTS, Settings
from core.errors import ConfigurationError
from core.tmdb_client import TMDBClient
from tools.catalog import build_registry
from tools.dispatcher import Dispatcher
from tools.mcp_server import configure_logging, create_server, run_server


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TMDB tools over the Model Context Protocol")
    parser.add_argument("--transport", choices=TRANSPORTS, help="overrides MCP_TRANSPORT")
    parser.add_argument("--host", help="overrides HOST (http transport only)")
    parser.add_argument("--port", type=int, help="overrides PORT (http transport only)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    # Load environment variables from .env BEFORE reading settings.
    load_dotenv()
    args = parse_args(argv)

    try:
        settings = Settings.from_env()
        client = TMDBClient(settings.access_token, base_url=settings.base_url)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    dispatcher = Dispatcher(build_registry(), client)
    server = create_server(dispatcher)
    logging.info(f"Loaded {len(dispatcher.registry)} tools")

    run_server(
        server,
        transport=args.transport if args.transport is not None else settings.transport,
        host=args.host if args.host is not None else settings.host,
        port=args.port if args.port is not None else settings.port,
    )
    return 0


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
