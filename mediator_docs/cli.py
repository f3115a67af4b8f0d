"""Command line entry point for the documentation server.

Usage:
    mediator-docs                          # static docs over stdio
    mediator-docs --variant filesystem --root ./mediator
    mediator-docs -t http -p 9000          # HTTP transport
"""

import argparse
import logging

from fastmcp.utilities.logging import configure_logging

from mediator_docs.resolvers import create_resolver
from mediator_docs.server import build_server
from mediator_docs.settings import MediatorDocsSettings

logger = logging.getLogger("mediator_docs")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mediator-docs", description="Shiny.Mediator documentation MCP server")
    parser.add_argument(
        "-t",
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport to serve on (default: stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to for http/sse (default: 127.0.0.1)")
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=8000,
        help="Port to bind to for http/sse (default: 8000)",
    )
    parser.add_argument(
        "--variant",
        choices=["static", "filesystem"],
        default=None,
        help="Resolver variant (default: MEDIATOR_DOCS_VARIANT or 'static')",
    )
    parser.add_argument("--root", default=None, help="Documentation root for the filesystem variant")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> MediatorDocsSettings:
    """Settings from env/.env, with command line values taking precedence."""
    overrides = {}
    if args.variant:
        overrides["variant"] = args.variant
    if args.root:
        overrides["root"] = args.root
    return MediatorDocsSettings(**overrides)


def main(argv: list[str] | None = None) -> None:
    """Start the documentation server."""
    args = parse_args(argv)
    settings = load_settings(args)

    configure_logging(level=settings.log_level)  # fastmcp logger
    configure_logging(level=settings.log_level, logger=logger)  # mediator_docs logger

    mcp = build_server(create_resolver(settings), settings.max_response_chars)
    logger.info(f"Starting mediator-docs ({settings.variant}) on {args.transport}")

    if args.transport == "stdio":
        mcp.run()
    else:
        mcp.run(transport=args.transport, host=args.host, port=args.port)
