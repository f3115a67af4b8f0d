"""Resolver over the embedded documentation.

Everything here is immutable after construction, so one instance can serve
concurrent calls without locking.
"""

import logging
from typing import Mapping

from mediator_docs.content import EXAMPLE_LANGUAGE, EXAMPLES, TOPIC_CATALOG, TOPICS
from mediator_docs.search import search_documents
from mediator_docs.types import (
	CodeBlock,
	DocumentMatches,
	Example,
	NoResults,
	NotFound,
	Success,
	TopicDocument,
	TopicInfo,
	TopicKey,
)

logger = logging.getLogger(__name__)


class StaticResolver:
	"""Looks up topics and examples in fixed in-memory mappings."""

	name = "static"
	default_topic = "overview"

	def __init__(
		self,
		topics: Mapping[str, str] = TOPICS,
		examples: Mapping[str, str] = EXAMPLES,
		catalog=TOPIC_CATALOG,
	):
		self._topics = topics
		self._examples = examples
		self._catalog = catalog

	def get_document(self, topic: str | None = None) -> Success[TopicDocument] | NotFound:
		key = TopicKey(topic or self.default_topic)
		logger.debug(f"get_document: topic={key}")

		body = self._topics.get(key.value)
		if body is None:
			return NotFound(name=topic or "", suggestions=sorted(self._topics))
		return Success(TopicDocument(key=key.value, body=body))

	def list_topics(self) -> list[TopicInfo]:
		return [
			TopicInfo(key=key, description=description, category=category)
			for category, entries in self._catalog
			for key, description in entries
		]

	def search(self, term: str) -> Success[list[DocumentMatches]] | NotFound | NoResults:
		if not term or not term.strip():
			return NotFound(name=term or "", suggestions=sorted(self._topics))

		logger.debug(f"search: term={term!r}")
		results = search_documents(self._topics.items(), term)
		if results:
			return Success(results)
		return NoResults()

	def get_example(self, feature: str) -> Success[Example] | NotFound:
		key = TopicKey(feature)
		logger.debug(f"get_example: feature={key}")
		body = self._examples.get(key.value)
		if body is None:
			return NotFound(name=feature, suggestions=sorted(self._examples))
		return Success(Example(feature=key.value, blocks=[CodeBlock(language=EXAMPLE_LANGUAGE, body=body)]))
