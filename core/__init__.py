# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything the TMDB tools actually DO: argument
# schemas, the TMDB HTTP client, response projections, configuration and
# the error taxonomy.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any MCP transport.  Every
#   module here can be exercised from a plain test with a mocked HTTP
#   transport and no server running.
# =============================================================================
