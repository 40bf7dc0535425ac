"""MCP server setup: tool binding, stdio and streamable HTTP transports."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Literal

import uvicorn
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from jira_mcp.jira import JiraConfig

from .dependencies import JiraClientProvider
from .jira import jira_tools
from .registry import ToolDispatcher, ToolRegistry

logger = logging.getLogger("jira-mcp.servers.main")

SERVER_NAME = "jira-mcp"
MCP_PATH = "/mcp"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Session-ID",
    "Access-Control-Max-Age": "3600",
}


class ToolCallError(Exception):
    """Carries the text of a failed tool result to the MCP server.

    The low-level server answers a handler exception with an ``isError``
    result whose text is ``str(exc)``.
    """


def build_dispatcher(
    config: JiraConfig | None = None,
    clients: JiraClientProvider | None = None,
) -> ToolDispatcher:
    """Load the Jira catalogue into a registry and wrap it in a dispatcher."""
    clients = clients or JiraClientProvider(config)
    registry = ToolRegistry(jira_tools)
    logger.debug(f"Registered {len(registry)} tools: {', '.join(registry.names)}")
    return ToolDispatcher(
        registry,
        clients,
        request_timeout=config.request_timeout if config else None,
    )


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Bind a dispatcher to a low-level MCP server."""
    server: Server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return dispatcher.registry.list_tools()

    # The dispatcher validates arguments itself so that failures read
    # "invalid argument: <field>"
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        result = await dispatcher.dispatch(name, arguments)
        if result.is_error:
            raise ToolCallError(result.text)
        return [TextContent(type="text", text=result.text)]

    return server


async def run_stdio(server: Server) -> None:
    """Serve MCP over stdin/stdout until the client closes the stream."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


class CORSMiddleware(BaseHTTPMiddleware):
    """Adds permissive CORS headers and answers preflight requests."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response


class StreamableHTTPEndpoint:
    """ASGI endpoint handing ``/mcp`` requests to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_http_app(server: Server) -> Starlette:
    """
    Build the HTTP host: stateless streamable MCP endpoint at ``/mcp`` plus ``/healthz``.

    Args:
        server: The MCP server to expose

    Returns:
        Starlette application; its lifespan runs the MCP session manager
    """
    session_manager = StreamableHTTPSessionManager(app=server, stateless=True)

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        async with session_manager.run():
            logger.info("MCP session manager started")
            try:
                yield
            finally:
                logger.info("MCP session manager shutting down")

    return Starlette(
        routes=[
            Route(MCP_PATH, endpoint=StreamableHTTPEndpoint(session_manager)),
            Route("/healthz", endpoint=health_check, methods=["GET"]),
        ],
        middleware=[Middleware(CORSMiddleware)],
        lifespan=lifespan,
    )


async def run_http(server: Server, port: int, host: str = "0.0.0.0") -> None:  # noqa: S104
    """Serve MCP over streamable HTTP with uvicorn."""
    config = uvicorn.Config(create_http_app(server), host=host, port=port, log_level="info")
    # serve() rather than run() to stay in the caller's event loop
    await uvicorn.Server(config).serve()


async def run_server(
    config: JiraConfig,
    transport: Literal["stdio", "http"] = "stdio",
    port: int = 8080,
    eager_client: bool = False,
) -> None:
    """
    Run the Jira MCP server with the specified transport.

    Args:
        config: Resolved Jira configuration
        transport: "stdio" or "http"
        port: Port of the HTTP transport
        eager_client: Build the Jira client now instead of on the first tool call
    """
    clients = JiraClientProvider(config)
    if eager_client:
        clients.get()

    server = create_server(build_dispatcher(config, clients))

    if transport == "http":
        logger.info(f"Serving MCP over HTTP at http://localhost:{port}{MCP_PATH}")
        await run_http(server, port)
    else:
        logger.info("Serving MCP over stdio")
        await run_stdio(server)
