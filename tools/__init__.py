# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP-facing layer.
#
#   catalog.py     the thirteen tools, declared as ToolDescriptor rows
#   registry.py    ToolDescriptor + the read-only ToolRegistry
#   dispatcher.py  name + arguments -> validate -> TMDB GET -> project
#   mcp_server.py  FastMCP server, stdio / streamable-HTTP delivery, /health
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP to TMDB themselves (core/tmdb_client.py does)
#   - They do NOT reshape documents field by field (core/projections.py does)
#   - They do NOT let an exception escape a tool call (the dispatcher
#     converts every failure into an error result)
# =============================================================================
