"""Response formatters for the documentation tools.

Every string a caller sees is built here from typed resolver results.
Output depends only on the inputs, so equal inputs give equal text.
"""

from itertools import groupby

from mediator_docs.content import DOCS_URL, GITHUB_URL
from mediator_docs.types import (
	DocumentMatches,
	Example,
	MediatorDocsError,
	NotFound,
	OutOfScopeError,
	RootUnavailableError,
	SourceFile,
	SourceListing,
	TopicInfo,
)

# Constants
CHARACTER_LIMIT = 25000  # Default maximum characters for tool responses


def truncate_response(content: str, limit: int = CHARACTER_LIMIT) -> str:
	"""Truncate response content if it exceeds character limit.

	Args:
	    content: The content to potentially truncate
	    limit: Maximum character limit

	Returns:
	    Truncated content with informative message if truncated
	"""
	if len(content) <= limit:
		return content

	truncated = content[:limit]
	return f"{truncated}\n\n[... Content truncated at {limit} characters. Use search or a narrower path to see more ...]"


def _file_not_found(missing: NotFound) -> str:
	message = f"File not found: {missing.location}"
	if missing.reason and missing.reason != "file not found":
		message += f" ({missing.reason})"
	return message


# =============================================================================
# Documents and topics
# =============================================================================


def format_document_not_found(missing: NotFound, noun: str = "topic") -> str:
	"""Unknown key lists every valid key; a missing backing file names its path."""
	if missing.location:
		return _file_not_found(missing)
	available = ", ".join(sorted(missing.suggestions))
	return f"{noun.capitalize()} '{missing.name}' not found. Available {noun}s: {available}"


def format_topics(topics: list[TopicInfo]) -> str:
	"""Render a topic listing.

	Categorized topics (static docs) are grouped under their category in
	the given order. Uncategorized topics (files) are listed with their size.
	"""
	if not topics:
		return "No documentation topics found."

	if all(t.category for t in topics):
		lines = ["# Available Shiny.Mediator Documentation Topics", ""]
		for category, entries in groupby(topics, key=lambda t: t.category):
			lines.append(f"## {category}")
			lines.extend(f"- **{t.key}** - {t.description}" for t in entries)
			lines.append("")
		lines.append("Use `get_document(topic)` to retrieve detailed documentation for any topic.")
	else:
		lines = ["# Available Documentation Files", ""]
		for t in topics:
			size = f" ({t.size_bytes / 1024:.1f} KiB)" if t.size_bytes is not None else ""
			lines.append(f"- **{t.key}**{size}")
		lines.append("")
		lines.append("Use `get_document(section)` with 'full', 'skill' or 'readme' to read the documentation.")

	lines.append("")
	lines.append(f"**GitHub**: {GITHUB_URL}")
	lines.append(f"**Documentation**: {DOCS_URL}")
	return "\n".join(lines)


# =============================================================================
# Search
# =============================================================================


def format_search_results(term: str, results: list[DocumentMatches]) -> str:
	"""Render matches grouped by document, with one line of context each side."""
	lines = [f"# Search Results for '{term}'", "", f"Found in {len(results)} document(s):", ""]

	for result in results:
		lines.append(f"## {result.document}")
		for match in result.matches:
			lines.append(f"Line {match.line_number}:")
			if match.before is not None:
				lines.append(f"    {match.before}")
			lines.append(f">>> {match.line}")
			if match.after is not None:
				lines.append(f"    {match.after}")
			lines.append("")
		lines.append("---")
		lines.append("")

	lines.append("Use `get_document(topic)` for full documentation on any topic.")
	return "\n".join(lines)


def format_search_not_found(missing: NotFound, noun: str = "topic") -> str:
	"""An empty term lists what can be searched; unreadable documents name their paths."""
	if missing.location:
		return _file_not_found(missing)
	available = ", ".join(sorted(missing.suggestions))
	return f"Search term '{missing.name}' is empty. Searchable {noun}s: {available}"


def format_no_results(term: str) -> str:
	return (
		f"No results found for '{term}'. Try different terms, use `list_topics()` to see "
		"available topics, or `get_document(topic)` to read a full topic."
	)


# =============================================================================
# Examples
# =============================================================================


def format_example(example: Example) -> str:
	"""Render one heading and every block in a fence tagged with its language."""
	title = example.feature[:1].upper() + example.feature[1:]
	heading = f"# {title} Example" if len(example.blocks) == 1 else f"# {title} Examples"

	parts = [heading]
	for block in example.blocks:
		body = block.body if block.body.endswith("\n") else block.body + "\n"
		parts.append(f"```{block.language or ''}\n{body}```")
	return "\n\n".join(parts)


def format_example_not_found(missing: NotFound) -> str:
	if missing.location:
		return _file_not_found(missing)
	available = ", ".join(sorted(missing.suggestions))
	return f"Example '{missing.name}' not found. Available examples: {available}"


def format_no_examples(feature: str) -> str:
	return (
		f"No examples found for '{feature}'. Try `search('{feature.strip()}')` for every mention, "
		"or `get_document('skill')` to read the whole guide."
	)


# =============================================================================
# Source tree
# =============================================================================


def format_source_file(source: SourceFile) -> str:
	content = source.content if source.content.endswith("\n") else source.content + "\n"
	return f"# {source.path}\n\n```{source.extension}\n{content}```"


def format_source_not_found(missing: NotFound) -> str:
	if missing.reason and not missing.suggestions:
		return f"Cannot read '{missing.name}': {missing.reason}"
	if missing.suggestions:
		lines = [f"File '{missing.name}' not found. Similar files:"]
		lines.extend(f"- {s}" for s in missing.suggestions)
		return "\n".join(lines)
	return f"File '{missing.name}' not found."


def format_listing(listing: SourceListing, limit: int) -> str:
	lines = [f"# Contents of {listing.directory}", ""]

	lines.append("## Directories")
	if listing.subdirectories:
		lines.extend(f"- {d}/" for d in listing.subdirectories)
	else:
		lines.append("(none)")
	lines.append("")

	heading = f"## Files (*{listing.extension})" if listing.extension else "## Files"
	lines.append(heading)
	if listing.files:
		lines.extend(f"- {f}" for f in listing.files)
	else:
		lines.append("(none)")

	if listing.truncated:
		lines.append("")
		lines.append(f"[... Showing first {limit} files. Use a narrower directory or extension filter to see more ...]")
	return "\n".join(lines)


def format_directory_not_found(missing: NotFound) -> str:
	if missing.reason:
		return f"Cannot list '{missing.name}': {missing.reason}"
	lines = [f"Directory '{missing.name}' not found. Top-level directories:"]
	if missing.suggestions:
		lines.extend(f"- {d}/" for d in missing.suggestions)
	else:
		lines.append("(none)")
	return "\n".join(lines)


# =============================================================================
# Errors
# =============================================================================


def format_error(error: MediatorDocsError) -> str:
	"""Format an error for the caller with actionable guidance."""
	if isinstance(error, OutOfScopeError):
		return f"Error: {error}. Use a path relative to the repository root, without '..'."
	if isinstance(error, RootUnavailableError):
		return f"Error: {error}. Check MEDIATOR_DOCS_ROOT and restart the server."
	return f"Error: {type(error).__name__}: {error}"
