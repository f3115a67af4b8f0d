"""Documentation resolvers.

Two variants answer the same calls:
- StaticResolver: embedded topics and examples
- FilesystemResolver: skill/readme files and source tree below a root

Usage:
    from mediator_docs.resolvers import create_resolver
    resolver = create_resolver(settings)
    resolver.get_document("caching")
"""

import logging
from typing import Protocol

from mediator_docs.resolvers.filesystem import FilesystemResolver, LazyText
from mediator_docs.resolvers.source import SourceTree
from mediator_docs.resolvers.static import StaticResolver
from mediator_docs.settings import MediatorDocsSettings
from mediator_docs.types import DocumentMatches, Example, NoResults, NotFound, Success, TopicDocument, TopicInfo

logger = logging.getLogger(__name__)


class DocsResolver(Protocol):
    """Operations shared by every resolver variant."""

    name: str
    default_topic: str

    def get_document(self, topic: str | None = None) -> Success[TopicDocument] | NotFound: ...

    def list_topics(self) -> list[TopicInfo]: ...

    def search(self, term: str) -> Success[list[DocumentMatches]] | NotFound | NoResults: ...

    def get_example(self, feature: str) -> Success[Example] | NotFound | NoResults: ...


def create_resolver(settings: MediatorDocsSettings) -> DocsResolver:
    """Build the resolver selected by settings.variant."""
    if settings.variant == "filesystem":
        logger.info(f"Using filesystem resolver rooted at {settings.root}")
        return FilesystemResolver(settings.root, settings.skill_file, settings.readme_file)
    logger.info("Using static resolver")
    return StaticResolver()


__all__ = [
    "DocsResolver",
    "FilesystemResolver",
    "LazyText",
    "SourceTree",
    "StaticResolver",
    "create_resolver",
]
