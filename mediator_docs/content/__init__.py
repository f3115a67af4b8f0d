"""Static documentation content."""

from mediator_docs.content.examples import EXAMPLE_LANGUAGE, EXAMPLE_MARKERS, EXAMPLES
from mediator_docs.content.topics import DOCS_URL, GITHUB_URL, TOPIC_CATALOG, TOPICS

__all__ = [
    "DOCS_URL",
    "EXAMPLE_LANGUAGE",
    "EXAMPLE_MARKERS",
    "EXAMPLES",
    "GITHUB_URL",
    "TOPIC_CATALOG",
    "TOPICS",
]
