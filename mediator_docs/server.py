"""FastMCP server for the Shiny.Mediator documentation tools.

This is the edge layer that:
1. Validates and parses MCP tool inputs
2. Calls resolver operations in a worker thread
3. Formats outputs for MCP

Every outcome is a string: not-found, empty and rejected lookups are
rendered as text rather than raised to the transport.
"""

import asyncio
import logging
from typing import Annotated

import sentry_sdk
from fastmcp import FastMCP
from pydantic import Field

from mediator_docs import formatters
from mediator_docs.resolvers import DocsResolver, FilesystemResolver, create_resolver
from mediator_docs.resolvers.source import MAX_LISTED_FILES
from mediator_docs.settings import settings
from mediator_docs.types import BrokenInvariant, MediatorDocsError, NoResults, NotFound, Success

logger = logging.getLogger(__name__)

READ_ONLY = {"readOnlyHint": True, "openWorldHint": False}

INSTRUCTIONS = """\
Shiny.Mediator documentation. Start with list_topics, read a topic with
get_document, find a concept with search and get code with get_example.
"""


def _error_text(error: MediatorDocsError) -> str:
	if isinstance(error, BrokenInvariant):
		sentry_sdk.capture_exception(error)
		logger.error(str(error))
	else:
		logger.warning(str(error))
	return formatters.format_error(error)


def build_server(resolver: DocsResolver, max_response_chars: int = formatters.CHARACTER_LIMIT) -> FastMCP:
	"""Create a FastMCP server whose tools answer from resolver.

	read_source and list_source are only registered for the filesystem variant.
	"""
	mcp = FastMCP(name="mediator-docs", instructions=INSTRUCTIONS)
	noun = "section" if resolver.name == "filesystem" else "topic"

	# ─────────────────────────────────────────────────────────────────────
	# Documentation tools
	# ─────────────────────────────────────────────────────────────────────

	@mcp.tool(annotations=READ_ONLY)
	async def get_document(
		topic: Annotated[
			str | None,
			Field(
				description=(
					"Topic (static docs: overview, getting-started, requests, commands, events, streams, "
					"middleware, caching, offline, resilience, validation, http, context, source-generation, "
					"exception-handlers, advanced) or section (file docs: full, skill, readme). "
					f"Defaults to '{resolver.default_topic}'."
				)
			),
		] = None,
	) -> str:
		"""Retrieve Shiny.Mediator documentation for a topic.

		Topic names are case-insensitive. An unknown topic returns the list of valid topics.

		Examples:
		    - topic="caching" - caching middleware guide
		    - topic="Getting-Started" - setup guide
		"""
		try:
			result = await asyncio.to_thread(resolver.get_document, topic)
		except MediatorDocsError as e:
			return _error_text(e)

		match result:
			case Success(document):
				return formatters.truncate_response(document.body, max_response_chars)
			case NotFound() as missing:
				return formatters.format_document_not_found(missing, noun)

	@mcp.tool(annotations=READ_ONLY)
	async def list_topics() -> str:
		"""List all available Shiny.Mediator documentation topics."""
		try:
			topics = await asyncio.to_thread(resolver.list_topics)
		except MediatorDocsError as e:
			return _error_text(e)
		return formatters.format_topics(topics)

	@mcp.tool(annotations=READ_ONLY)
	async def search(
		term: Annotated[str, Field(description="Term to find, case-insensitive (e.g., 'IRequest', 'cache')")],
	) -> str:
		"""Search across all Shiny.Mediator documentation for a term or concept.

		Returns up to 5 matching lines per document, each with the line before and after.

		Examples:
		    - term="IStreamRequest" - where stream contracts are described
		    - term="ForceCacheRefresh" - how to bypass the cache
		"""
		try:
			result = await asyncio.to_thread(resolver.search, term)
		except MediatorDocsError as e:
			return _error_text(e)

		match result:
			case Success(matches):
				return formatters.truncate_response(formatters.format_search_results(term, matches), max_response_chars)
			case NotFound() as missing:
				return formatters.format_search_not_found(missing, noun)
			case NoResults():
				return formatters.format_no_results(term)

	@mcp.tool(annotations=READ_ONLY)
	async def get_example(
		feature: Annotated[
			str,
			Field(description="Feature: request, command, event, stream, caching, validation, http, middleware"),
		],
	) -> str:
		"""Get a code example for a specific Shiny.Mediator feature.

		Examples:
		    - feature="request" - request contract, handler and usage
		    - feature="validation" - data annotation and FluentValidation setup
		"""
		try:
			result = await asyncio.to_thread(resolver.get_example, feature)
		except MediatorDocsError as e:
			return _error_text(e)

		match result:
			case Success(example):
				return formatters.format_example(example)
			case NotFound() as missing:
				return formatters.format_example_not_found(missing)
			case NoResults():
				return formatters.format_no_examples(feature)

	if not isinstance(resolver, FilesystemResolver):
		return mcp

	# ─────────────────────────────────────────────────────────────────────
	# Source tree tools (filesystem variant)
	# ─────────────────────────────────────────────────────────────────────

	@mcp.tool(annotations=READ_ONLY)
	async def read_source(
		path: Annotated[str, Field(description="File path relative to the repository root (e.g., 'src/Shiny.Mediator/Mediator.cs')")],
	) -> str:
		"""Read a source file from the Shiny.Mediator repository.

		A missing file returns up to 5 similarly named files from the same directory.
		"""
		try:
			result = await asyncio.to_thread(resolver.read_source, path)
		except MediatorDocsError as e:
			return _error_text(e)

		match result:
			case Success(source):
				return formatters.truncate_response(formatters.format_source_file(source), max_response_chars)
			case NotFound() as missing:
				return formatters.format_source_not_found(missing)

	@mcp.tool(annotations=READ_ONLY)
	async def list_source(
		directory: Annotated[str, Field(description="Directory relative to the repository root")] = ".",
		extension: Annotated[
			str | None,
			Field(description="Only list files with this extension (e.g., 'cs', '.md')"),
		] = None,
	) -> str:
		"""List subdirectories and files in the Shiny.Mediator repository.

		Files are listed recursively in path order, at most 100.

		Examples:
		    - directory="src" - everything under src
		    - directory="src", extension="cs" - C# sources only
		"""
		try:
			result = await asyncio.to_thread(resolver.list_source, directory, extension)
		except MediatorDocsError as e:
			return _error_text(e)

		match result:
			case Success(listing):
				return formatters.format_listing(listing, limit=MAX_LISTED_FILES)
			case NotFound() as missing:
				return formatters.format_directory_not_found(missing)

	return mcp


mcp = build_server(create_resolver(settings), settings.max_response_chars)
