"""MCP server for expanded file bundles."""

from skillpack.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
