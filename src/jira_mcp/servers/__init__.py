"""MCP server layer: tool catalogue, dispatcher and transports."""

from .main import create_http_app, create_server, run_server

__all__ = ["create_http_app", "create_server", "run_server"]
