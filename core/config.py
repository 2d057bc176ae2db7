# =============================================================================
# core/config.py  -  Process configuration read from the environment
# =============================================================================
#
# HOW CONFIGURATION ARRIVES:
#   main.py calls load_dotenv() first, so a local .env file and real
#   environment variables both end up in os.environ.  Settings.from_env()
#   then reads everything in one place.
#
#   TMDB_ACCESS_TOKEN   (required)  TMDB v4 "API Read Access Token"
#   TMDB_API_BASE_URL   default https://api.themoviedb.org/3
#   MCP_TRANSPORT       "stdio" (default) or "http"
#   HOST / PORT         HTTP listener address (http transport only)
#   LOG_LEVEL           default INFO
#
# A missing token is the one failure that must stop the process: the server
# would otherwise advertise thirteen tools that can never succeed.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.errors import ConfigurationError
from core.tmdb_client import DEFAULT_BASE_URL

TRANSPORTS = ("stdio", "http")


@dataclass(frozen=True)
class Settings:
    access_token: str
    base_url: str = DEFAULT_BASE_URL
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Raises:
            ConfigurationError: token missing, unknown transport, or a
                non-numeric PORT.
        """
        env = os.environ if environ is None else environ

        token = env.get("TMDB_ACCESS_TOKEN", "").strip()
        if not token:
            raise ConfigurationError("TMDB_ACCESS_TOKEN environment variable is required")

        transport = env.get("MCP_TRANSPORT", "stdio").strip().lower()
        if transport not in TRANSPORTS:
            raise ConfigurationError(
                f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}"
            )

        raw_port = env.get("PORT", "3000")
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigurationError(f"PORT must be an integer, got {raw_port!r}") from None

        return cls(
            access_token=token,
            base_url=env.get("TMDB_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            transport=transport,
            host=env.get("HOST", "127.0.0.1"),
            port=port,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
