"""Resolver over documentation files below a fixed root.

Two documents back the topic, search and example operations:
- skill: the skill guide (settings.skill_file)
- readme: the repository readme (settings.readme_file)

Both are read lazily, once per process, through LazyText. Source browsing
is delegated to SourceTree.
"""

import logging
import os
import threading
from pathlib import Path

from mediator_docs.content import EXAMPLE_MARKERS
from mediator_docs.resolvers.source import SourceTree
from mediator_docs.search import find_code_examples, search_documents
from mediator_docs.types import (
	DocumentMatches,
	Example,
	NoResults,
	NotFound,
	RootUnavailableError,
	SourceFile,
	SourceListing,
	Success,
	TopicDocument,
	TopicInfo,
	TopicKey,
)

logger = logging.getLogger(__name__)

SECTIONS = ("full", "readme", "skill")

# Separator between skill and readme in the "full" section
SECTION_SEPARATOR = "\n\n---\n\n"


class LazyText:
	"""Reads a text file on first access and keeps the outcome for the process lifetime.

	Concurrent first callers block on one lock; exactly one of them reads the
	file and all of them observe the same value. A missing or unreadable file
	is remembered as well.
	"""

	def __init__(self, path: Path):
		self.path = path
		self._lock = threading.Lock()
		self._loaded = False
		self._content: str | None = None
		self._error: str | None = None

	def get(self) -> str | None:
		"""File content, or None if it could not be read."""
		if not self._loaded:
			with self._lock:
				if not self._loaded:
					self._content, self._error = self._read()
					self._loaded = True
		return self._content

	@property
	def error(self) -> str | None:
		"""Why the file could not be read (after get() returned None)."""
		return self._error

	def _read(self) -> tuple[str | None, str | None]:
		try:
			content = self.path.read_text(encoding="utf-8")
		except FileNotFoundError:
			logger.warning(f"File not found: {self.path}")
			return None, "file not found"
		except (OSError, UnicodeDecodeError) as e:
			logger.warning(f"Failed to read {self.path}: {e}")
			return None, str(e)
		logger.debug(f"Loaded {self.path} ({len(content)} chars)")
		return content, None


class FilesystemResolver:
	"""Looks up documentation and source files below a fixed root."""

	name = "filesystem"
	default_topic = "full"

	def __init__(self, root: Path, skill_file: str, readme_file: str):
		self.root = root.resolve()
		self.available = self.root.is_dir() and os.access(self.root, os.R_OK | os.X_OK)
		if not self.available:
			logger.error(f"Documentation root is missing or unreadable: {self.root}")

		self._documents = {
			"skill": LazyText(self.root / skill_file),
			"readme": LazyText(self.root / readme_file),
		}
		self._tree = SourceTree(self.root)

	def _require_root(self) -> None:
		if not self.available:
			raise RootUnavailableError(str(self.root))

	def _document(self, name: str) -> Success[str] | NotFound:
		doc = self._documents[name]
		content = doc.get()
		if content is None:
			return NotFound(name=name, location=str(doc.path), reason=doc.error)
		return Success(content)

	def get_document(self, topic: str | None = None) -> Success[TopicDocument] | NotFound:
		self._require_root()
		key = TopicKey(topic or self.default_topic)
		logger.debug(f"get_document: section={key}")

		if key.value not in SECTIONS:
			return NotFound(name=topic or "", suggestions=list(SECTIONS))

		if key.value != "full":
			section = self._document(key.value)
			if isinstance(section, NotFound):
				return section
			return Success(TopicDocument(key=key.value, body=section.data))

		parts: list[str] = []
		for name in ("skill", "readme"):
			section = self._document(name)
			if isinstance(section, NotFound):
				return section
			parts.append(section.data)
		return Success(TopicDocument(key="full", body=SECTION_SEPARATOR.join(parts)))

	def list_topics(self) -> list[TopicInfo]:
		"""Markdown files directly under the root, by name."""
		self._require_root()
		topics = []
		for path in sorted(self.root.glob("*.md")):
			try:
				if path.is_file():
					topics.append(TopicInfo(key=path.name, size_bytes=path.stat().st_size))
			except OSError as e:
				logger.warning(f"Skipping {path}: {e}")
		return topics

	def search(self, term: str) -> Success[list[DocumentMatches]] | NotFound | NoResults:
		"""Search skill, then readme.

		An empty term lists the searchable documents. When neither document
		can be read, the missing paths are reported instead of an empty result.
		"""
		self._require_root()
		if not term or not term.strip():
			return NotFound(name=term or "", suggestions=sorted(self._documents))

		logger.debug(f"search: term={term!r}")
		documents = [
			(name, content)
			for name, doc in self._documents.items()
			if (content := doc.get()) is not None
		]
		if not documents:
			paths = ", ".join(str(doc.path) for doc in self._documents.values())
			return NotFound(name=term, location=paths, reason="file not found")
		results = search_documents(documents, term)
		if results:
			return Success(results)
		return NoResults()

	def get_example(self, feature: str) -> Success[Example] | NotFound | NoResults:
		"""Mine the skill document for fenced blocks about feature.

		Unknown features use the key itself as the marker token.
		"""
		self._require_root()
		key = TopicKey(feature)
		if not key:
			return NotFound(name=feature, suggestions=sorted(EXAMPLE_MARKERS))

		skill = self._document("skill")
		if isinstance(skill, NotFound):
			return skill
		content = skill.data

		marker = EXAMPLE_MARKERS.get(key.value, key.value)
		logger.debug(f"get_example: feature={key}, marker={marker!r}")
		blocks = find_code_examples(content, marker, key.value)
		if blocks:
			return Success(Example(feature=key.value, blocks=blocks))
		return NoResults()

	def read_source(self, path: str) -> Success[SourceFile] | NotFound:
		self._require_root()
		return self._tree.read_file(path)

	def list_source(self, directory: str = ".", extension: str | None = None) -> Success[SourceListing] | NotFound:
		self._require_root()
		return self._tree.list_directory(directory, extension)
