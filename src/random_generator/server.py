"""MCP server exposing the random generator tools over stdio or streamable HTTP."""

import argparse
import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import anyio
import uvicorn
from hopeit.server.logger import engine_logger
from mcp import types
from mcp.server.lowlevel.server import NotificationOptions, Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Mount, Route
from starlette.types import Receive, Scope, Send

from random_generator.dispatcher import dispatch
from random_generator.models import ResponseEnvelope
from random_generator.settings import DEFAULT_MAX_BYTE_SIZE, GeneratorConfig, build_config
from random_generator.tools import to_mcp_tools

SERVER_NAME = "mcp-random-generator"
SERVER_VERSION = "1.0.0"
SERVER_INSTRUCTIONS = (
    "Generate cryptographically secure random bytes and random integers in an inclusive range."
)

HTTP_ENDPOINT = "/mcp"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = engine_logger()


class ToolCallError(RuntimeError):
    """Carries the text of a failure envelope out of a tool handler."""


def envelope_content(envelope: ResponseEnvelope) -> list[types.TextContent]:
    """
    Convert a response envelope into MCP tool result content.

    Failure envelopes are raised as ToolCallError: the low-level MCP server
    reports exceptions from tool handlers as results with `isError` set and the
    exception text as content.
    """
    if envelope.is_error:
        raise ToolCallError(envelope.text)
    return [types.TextContent(type="text", text=envelope.text)]


def create_server(config: GeneratorConfig) -> Server:
    """Build an MCP server bound to `config` for its whole lifetime."""
    server: Server = Server(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        instructions=SERVER_INSTRUCTIONS,
    )
    tools = to_mcp_tools(config.max_byte_size)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tools

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        return envelope_content(dispatch(name, arguments, config))

    return server


async def serve_stdio(server: Server) -> None:
    init_options = server.create_initialization_options(
        notification_options=NotificationOptions(tools_changed=False)
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, init_options)


def create_http_app(server: Server) -> Starlette:
    """Return a Starlette app serving `server` at HTTP_ENDPOINT, with a health check at `/`."""
    session_manager = StreamableHTTPSessionManager(server)

    @asynccontextmanager
    async def lifespan(_: Starlette) -> AsyncIterator[None]:
        async with session_manager.run():
            yield

    async def streamable_http_app(scope: Scope, receive: Receive, send: Send) -> None:
        await session_manager.handle_request(scope, receive, send)

    async def health(_: Request) -> PlainTextResponse:
        return PlainTextResponse(SERVER_NAME)

    return Starlette(
        routes=[
            Route("/", endpoint=health, methods=["GET"]),
            Mount(HTTP_ENDPOINT, app=streamable_http_app),
        ],
        lifespan=lifespan,
    )


def _max_size(value: str) -> GeneratorConfig:
    try:
        return build_config(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="Run the random generator MCP server.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging.",
    )
    parser.add_argument(
        "-m",
        "--max-size",
        dest="config",
        type=_max_size,
        default=build_config(DEFAULT_MAX_BYTE_SIZE),
        help=f"Maximum random bytes size in bytes (default {DEFAULT_MAX_BYTE_SIZE}).",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport to expose. Use 'stdio' for local clients or 'http' for a hosted server.",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host/IP to bind when using HTTP transport.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8765,
        help="Port to bind when using HTTP transport.",
    )
    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    """Send logs to stderr, since stdout carries the stdio transport."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)
    config: GeneratorConfig = args.config
    server = create_server(config)

    logger.info(__name__, "Random Generator MCP Server started")
    logger.info(__name__, f"Maximum random bytes size: {config.max_byte_size} bytes")
    try:
        if args.transport == "stdio":
            logger.info(__name__, "Serving MCP (transport=stdio)")
            anyio.run(serve_stdio, server)
        else:
            endpoint = f"http://{args.host}:{args.port}{HTTP_ENDPOINT}"
            logger.info(__name__, f"Serving MCP (transport=http, endpoint={endpoint})")
            uvicorn.run(
                create_http_app(server),
                host=args.host,
                port=args.port,
                log_level="debug" if args.verbose else "info",
            )
    except KeyboardInterrupt:  # pragma: no cover - manual interrupt
        logger.info(__name__, "Received interruption, shutting down...")
    except Exception as exc:  # pylint: disable=broad-except
        logger.error(__name__, f"Server error: {exc}")
        sys.exit(1)
    logger.info(__name__, "Stopped MCP Server.")

