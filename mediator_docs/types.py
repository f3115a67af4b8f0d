"""Type definitions for mediator-docs.

This module contains:
- Exception hierarchy for structured error handling
- Result types for resolver return values
- Domain models shared across layers
- Value objects for normalization
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Exceptions
# =============================================================================


class MediatorDocsError(Exception):
	"""Base for all mediator-docs errors."""

	pass


class BrokenInvariant(MediatorDocsError):
	"""Setup/config error - the resolver cannot serve requests."""

	pass


class RootUnavailableError(BrokenInvariant):
	"""The configured documentation root is missing or unreadable."""

	def __init__(self, root: str):
		self.root = root
		super().__init__(f"Documentation root is not available: {root}")


class OutOfScopeError(MediatorDocsError):
	"""A requested path resolves outside the configured root.

	Only the caller-supplied relative path is kept, never the canonical target.
	"""

	def __init__(self, requested: str):
		self.requested = requested
		super().__init__(f"Path '{requested}' must be within the repository")


# =============================================================================
# Result Types
# =============================================================================

T = TypeVar("T")


@dataclass
class Success(Generic[T]):
	"""Lookup returned data successfully."""

	data: T


@dataclass
class NoResults:
	"""The key or term was valid but matched nothing."""

	pass


@dataclass
class NotFound:
	"""The requested key, file or directory does not exist.

	Attributes:
	    name: What the caller asked for, as given
	    suggestions: Valid keys, similar file names or sibling directories
	    location: Resolved location that was tried (files only)
	    reason: Underlying OS error message, if any
	"""

	name: str
	suggestions: list[str] = field(default_factory=list)
	location: str | None = None
	reason: str | None = None


# =============================================================================
# Value Objects
# =============================================================================


@dataclass(frozen=True)
class TopicKey:
	"""Normalized lookup key for topics, sections and features.

	Examples:
	    TopicKey(" Caching ") -> TopicKey("caching")
	    TopicKey("Getting-Started") -> TopicKey("getting-started")
	"""

	value: str

	def __post_init__(self) -> None:
		object.__setattr__(self, "value", self.value.strip().lower())

	def __str__(self) -> str:
		return self.value

	def __bool__(self) -> bool:
		return bool(self.value)


# =============================================================================
# Domain Models
# =============================================================================


class TopicDocument(BaseModel):
	"""A named unit of documentation text."""

	model_config = ConfigDict(frozen=True)

	key: str = Field(..., description="Normalized topic identifier (e.g., 'caching')")
	body: str = Field(..., description="Markdown content")


class TopicInfo(BaseModel):
	"""One entry of a topic listing."""

	model_config = ConfigDict(frozen=True)

	key: str
	description: str | None = None
	category: str | None = None
	size_bytes: int | None = Field(default=None, ge=0, description="File size, filesystem topics only")


class SearchMatch(BaseModel):
	"""A single matching line with up to one line of context on each side.

	Context lines and the matched line are stripped of surrounding whitespace.
	"""

	model_config = ConfigDict(frozen=True)

	line_number: int = Field(..., ge=1, description="1-based line number in the document")
	line: str
	before: str | None = None
	after: str | None = None


class DocumentMatches(BaseModel):
	"""All matches collected from one document, in line order."""

	model_config = ConfigDict(frozen=True)

	document: str
	matches: list[SearchMatch]


@dataclass(frozen=True)
class CodeBlock:
	"""A fenced code block.

	body keeps the original line endings of every content line, so a block
	with one line "foo" ends with a newline.
	"""

	language: str | None
	body: str


class Example(BaseModel):
	"""Code examples for one feature."""

	model_config = ConfigDict(frozen=True)

	feature: str
	blocks: list[CodeBlock]


class SourceFile(BaseModel):
	"""A file read from below the root."""

	model_config = ConfigDict(frozen=True)

	path: str = Field(..., description="POSIX path relative to the root")
	extension: str = Field(default="", description="Suffix without the dot, used as fence tag")
	content: str


class SourceListing(BaseModel):
	"""Directory listing below the root."""

	model_config = ConfigDict(frozen=True)

	directory: str = Field(..., description="POSIX path relative to the root ('.' for the root)")
	subdirectories: list[str] = Field(default_factory=list)
	files: list[str] = Field(default_factory=list, description="Root-relative paths, lexicographic order")
	extension: str | None = None
	truncated: bool = False
