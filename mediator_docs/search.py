"""Line search and fenced code block extraction.

Pure functions over document text, shared by both resolvers:

1. search_documents: case-insensitive substring search with one line of
   context, capped per document
2. extract_code_blocks: two-state fence parser (outside / inside)
3. find_code_examples: fenced blocks mentioning a marker token or feature
"""

from enum import Enum
from typing import Iterable

from mediator_docs.types import CodeBlock, DocumentMatches, SearchMatch

FENCE = "```"

# Per-document cap on collected matches
MAX_MATCHES_PER_DOCUMENT = 5

# Cap on blocks returned by find_code_examples
MAX_EXAMPLE_BLOCKS = 3


class _FenceState(Enum):
	OUTSIDE = "outside"
	INSIDE = "inside"


def _lines_with_endings(content: str) -> list[str]:
	"""Split on line feeds only, keeping each line's terminator."""
	lines = [line + "\n" for line in content.split("\n")]
	lines[-1] = lines[-1][:-1]
	return lines if lines[-1] else lines[:-1]


def search_lines(content: str, term: str, limit: int = MAX_MATCHES_PER_DOCUMENT) -> list[SearchMatch]:
	"""Find lines containing term, case-insensitively.

	Scanning stops as soon as limit matches are collected.

	Args:
	    content: Document text
	    term: Substring to look for
	    limit: Maximum number of matches

	Returns:
	    Matches in line order, each with the stripped previous/next line
	"""
	needle = term.lower()
	lines = content.split("\n")
	matches: list[SearchMatch] = []

	for index, line in enumerate(lines):
		if needle not in line.lower():
			continue
		matches.append(
			SearchMatch(
				line_number=index + 1,
				line=line.strip(),
				before=lines[index - 1].strip() if index > 0 else None,
				after=lines[index + 1].strip() if index + 1 < len(lines) else None,
			)
		)
		if len(matches) >= limit:
			break

	return matches


def search_documents(
	documents: Iterable[tuple[str, str]],
	term: str,
	limit: int = MAX_MATCHES_PER_DOCUMENT,
) -> list[DocumentMatches]:
	"""Search (name, content) pairs in iteration order.

	A document whose text does not contain term at all is skipped without
	scanning its lines.
	"""
	needle = term.lower()
	results: list[DocumentMatches] = []

	for name, content in documents:
		if needle not in content.lower():
			continue
		matches = search_lines(content, term, limit)
		if matches:
			results.append(DocumentMatches(document=name, matches=matches))

	return results


def extract_code_blocks(content: str) -> list[CodeBlock]:
	"""Extract fenced code blocks in document order.

	A line is a fence delimiter when it starts with ``` after leading
	whitespace is removed. The rest of an opening delimiter is the language
	tag. Content lines are kept verbatim, line endings included. A block
	still open at the end of the document is discarded.
	"""
	blocks: list[CodeBlock] = []
	state = _FenceState.OUTSIDE
	language: str | None = None
	body: list[str] = []

	for line in _lines_with_endings(content):
		is_fence = line.lstrip().startswith(FENCE)

		match state:
			case _FenceState.OUTSIDE if is_fence:
				language = line.lstrip()[len(FENCE) :].strip() or None
				body = []
				state = _FenceState.INSIDE
			case _FenceState.INSIDE if is_fence:
				blocks.append(CodeBlock(language=language, body="".join(body)))
				state = _FenceState.OUTSIDE
			case _FenceState.INSIDE:
				body.append(line)

	return blocks


def find_code_examples(
	content: str,
	marker: str,
	feature: str,
	limit: int = MAX_EXAMPLE_BLOCKS,
) -> list[CodeBlock]:
	"""Fenced blocks whose body contains marker or feature, case-insensitively.

	Args:
	    content: Markdown document to mine
	    marker: Marker token for the feature (e.g., "ICommandHandler")
	    feature: Normalized feature key (e.g., "command")
	    limit: Maximum number of blocks

	Returns:
	    Up to limit blocks in document order
	"""
	tokens = [marker.lower(), feature.lower()]
	found: list[CodeBlock] = []

	for block in extract_code_blocks(content):
		body = block.body.lower()
		if any(token and token in body for token in tokens):
			found.append(block)
			if len(found) >= limit:
				break

	return found
