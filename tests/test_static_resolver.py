"""Tests for the embedded documentation resolver."""

import pytest

from mediator_docs.content import EXAMPLES, TOPIC_CATALOG, TOPICS
from mediator_docs.resolvers import StaticResolver
from mediator_docs.types import NoResults, NotFound, Success

ALL_TOPICS = [
	"overview",
	"getting-started",
	"requests",
	"commands",
	"events",
	"streams",
	"middleware",
	"caching",
	"offline",
	"resilience",
	"validation",
	"http",
	"context",
	"source-generation",
	"exception-handlers",
	"advanced",
]


@pytest.fixture
def resolver():
	return StaticResolver()


def test_topic_set_is_fixed():
	assert sorted(TOPICS) == sorted(ALL_TOPICS)
	assert sorted(EXAMPLES) == sorted(
		["request", "command", "event", "stream", "caching", "validation", "http", "middleware"]
	)


def test_catalog_covers_every_topic():
	catalogued = [key for _, entries in TOPIC_CATALOG for key, _ in entries]
	assert sorted(catalogued) == sorted(TOPICS)


# =============================================================================
# get_document
# =============================================================================


@pytest.mark.parametrize("topic", ALL_TOPICS)
def test_get_document_normalizes_key(resolver, topic):
	exact = resolver.get_document(topic)
	assert isinstance(exact, Success)
	assert resolver.get_document(topic.upper()) == exact
	assert resolver.get_document(f"  {topic} ") == exact


def test_get_document_caching_variants(resolver):
	assert resolver.get_document("Caching") == resolver.get_document(" caching ") == resolver.get_document("caching")


def test_get_document_default_is_overview(resolver):
	result = resolver.get_document()
	assert isinstance(result, Success)
	assert result.data.key == "overview"
	assert result.data.body.startswith("# Shiny.Mediator Overview")


def test_get_document_unknown_lists_sorted_keys(resolver):
	result = resolver.get_document("sagas")
	assert isinstance(result, NotFound)
	assert result.name == "sagas"
	assert result.suggestions == sorted(ALL_TOPICS)


# =============================================================================
# list_topics
# =============================================================================


def test_list_topics_grouped(resolver):
	topics = resolver.list_topics()
	assert [t.key for t in topics][:2] == ["overview", "getting-started"]
	assert {t.category for t in topics} == {"Core Concepts", "Contract Types", "Middleware & Extensions", "Advanced"}
	assert all(t.description for t in topics)


# =============================================================================
# search
# =============================================================================


def test_search_finds_request_contract(resolver):
	result = resolver.search("IRequest")
	assert isinstance(result, Success)

	by_doc = {r.document: r.matches for r in result.data}
	assert "requests" in by_doc
	line = "public record MyRequest(string Argument) : IRequest<MyResponse>;"
	assert any(line in (m.before, m.line, m.after) for m in by_doc["requests"])


def test_search_follows_topic_order(resolver):
	result = resolver.search("IRequest")
	order = [r.document for r in result.data]
	assert order == [key for key in TOPICS if key in order]


def test_search_caps_matches_per_document(resolver):
	result = resolver.search("public")
	assert all(len(r.matches) <= 5 for r in result.data)


def test_search_no_results(resolver):
	assert isinstance(resolver.search("zzz_no_such_term_zzz"), NoResults)


def test_search_empty_term_lists_topics(resolver):
	result = resolver.search("   ")
	assert isinstance(result, NotFound)
	assert result.suggestions == sorted(TOPICS)


# =============================================================================
# get_example
# =============================================================================


def test_get_example(resolver):
	result = resolver.get_example(" Request ")
	assert isinstance(result, Success)
	assert result.data.feature == "request"
	assert result.data.blocks[0].language == "csharp"
	assert "GetUserRequest" in result.data.blocks[0].body


def test_get_example_unknown(resolver):
	result = resolver.get_example("saga")
	assert isinstance(result, NotFound)
	assert result.suggestions == sorted(EXAMPLES)


def test_get_example_blank_lists_examples(resolver):
	for feature in ("", "   "):
		result = resolver.get_example(feature)
		assert isinstance(result, NotFound)
		assert result.suggestions == sorted(EXAMPLES)
