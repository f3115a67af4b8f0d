"""Tests for the filesystem-backed resolver."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from unittest.mock import patch

import pytest

from conftest import README_FILE, README_MD, SKILL_FILE, SKILL_MD
from mediator_docs.resolvers import FilesystemResolver, LazyText
from mediator_docs.resolvers.filesystem import SECTION_SEPARATOR
from mediator_docs.types import NoResults, NotFound, RootUnavailableError, Success


# =============================================================================
# LazyText
# =============================================================================


class TestLazyText:
	"""Tests for the read-once memo."""

	def test_reads_once(self, tmp_path):
		path = tmp_path / "doc.md"
		path.write_text("first", encoding="utf-8")
		lazy = LazyText(path)

		assert lazy.get() == "first"
		path.write_text("second", encoding="utf-8")
		assert lazy.get() == "first"

	def test_missing_file_is_remembered(self, tmp_path):
		path = tmp_path / "missing.md"
		lazy = LazyText(path)

		assert lazy.get() is None
		assert lazy.error == "file not found"
		path.write_text("late", encoding="utf-8")
		assert lazy.get() is None

	def test_concurrent_first_access_reads_once(self, tmp_path):
		path = tmp_path / "doc.md"
		path.write_text("shared", encoding="utf-8")
		lazy = LazyText(path)

		calls = 0
		calls_lock = threading.Lock()
		original = Path.read_text

		def slow_read(self, *args, **kwargs):
			nonlocal calls
			with calls_lock:
				calls += 1
			time.sleep(0.05)
			return original(self, *args, **kwargs)

		with patch.object(Path, "read_text", slow_read):
			with ThreadPoolExecutor(max_workers=16) as pool:
				values = list(pool.map(lambda _: lazy.get(), range(32)))

		assert calls == 1
		assert set(values) == {"shared"}


# =============================================================================
# Root handling
# =============================================================================


def test_missing_root_reports_unavailable(tmp_path):
	resolver = FilesystemResolver(tmp_path / "nope", SKILL_FILE, README_FILE)
	assert resolver.available is False
	with pytest.raises(RootUnavailableError):
		resolver.get_document("full")
	with pytest.raises(RootUnavailableError):
		resolver.list_source(".")


def test_root_is_canonical(docs_root):
	resolver = FilesystemResolver(docs_root / "src" / "..", SKILL_FILE, README_FILE)
	assert resolver.root == docs_root.resolve()


# =============================================================================
# get_document / list_topics
# =============================================================================


def test_get_document_sections(fs_resolver):
	assert fs_resolver.get_document("skill").data.body == SKILL_MD
	assert fs_resolver.get_document(" README ").data.body == README_MD


def test_get_document_full_joins_with_rule(fs_resolver):
	result = fs_resolver.get_document()
	assert isinstance(result, Success)
	assert result.data.key == "full"
	assert result.data.body == SKILL_MD + SECTION_SEPARATOR + README_MD


def test_get_document_unknown_section(fs_resolver):
	result = fs_resolver.get_document("overview")
	assert isinstance(result, NotFound)
	assert result.suggestions == ["full", "readme", "skill"]


def test_get_document_missing_file(docs_root):
	(docs_root / README_FILE).unlink()
	resolver = FilesystemResolver(docs_root, SKILL_FILE, README_FILE)

	result = resolver.get_document("full")
	assert isinstance(result, NotFound)
	assert result.location == str(docs_root.resolve() / README_FILE)


def test_list_topics_top_level_markdown_only(fs_resolver, docs_root):
	topics = fs_resolver.list_topics()
	assert [t.key for t in topics] == ["CHANGELOG.md", "README.md"]
	assert topics[1].size_bytes == (docs_root / "README.md").stat().st_size
	assert all(t.category is None for t in topics)


# =============================================================================
# search
# =============================================================================


def test_search_skill_before_readme(fs_resolver):
	result = fs_resolver.search("mediator")
	assert isinstance(result, Success)
	assert [r.document for r in result.data] == ["skill", "readme"]


def test_search_context(fs_resolver):
	result = fs_resolver.search("fire and forget")
	match = result.data[0].matches[0]
	assert match.line == "Commands are fire and forget."
	assert match.line_number == 10
	assert match.before == ""
	assert match.after == ""


def test_search_no_results(fs_resolver):
	assert isinstance(fs_resolver.search("zzz_no_such_term_zzz"), NoResults)


def test_search_empty_term_lists_documents(fs_resolver):
	result = fs_resolver.search("")
	assert isinstance(result, NotFound)
	assert result.suggestions == ["readme", "skill"]


def test_search_reports_missing_documents(docs_root):
	(docs_root / SKILL_FILE).unlink()
	(docs_root / README_FILE).unlink()
	resolver = FilesystemResolver(docs_root, SKILL_FILE, README_FILE)

	result = resolver.search("mediator")
	assert isinstance(result, NotFound)
	assert "SKILL.md" in result.location
	assert "README.md" in result.location


def test_search_with_one_missing_document(docs_root):
	(docs_root / README_FILE).unlink()
	resolver = FilesystemResolver(docs_root, SKILL_FILE, README_FILE)

	result = resolver.search("mediator")
	assert isinstance(result, Success)
	assert [r.document for r in result.data] == ["skill"]


# =============================================================================
# get_example
# =============================================================================


def test_get_example_by_marker(fs_resolver):
	result = fs_resolver.get_example("command")
	assert isinstance(result, Success)
	assert len(result.data.blocks) == 1
	assert "ICommandHandler<MyCommand>" in result.data.blocks[0].body


def test_get_example_caching_marker(fs_resolver):
	result = fs_resolver.get_example("Caching")
	assert [b.body.splitlines()[0] for b in result.data.blocks] == ["[Cache(AbsoluteExpirationSeconds = 60)]"]


def test_get_example_request_collects_all_handlers(fs_resolver):
	result = fs_resolver.get_example("request")
	assert len(result.data.blocks) == 2


def test_get_example_absent(fs_resolver):
	assert isinstance(fs_resolver.get_example("stream"), NoResults)


def test_get_example_unknown_feature_uses_key(fs_resolver):
	result = fs_resolver.get_example("MyResponse")
	assert isinstance(result, Success)
	assert len(result.data.blocks) == 2


def test_get_example_missing_skill(docs_root):
	(docs_root / SKILL_FILE).unlink()
	resolver = FilesystemResolver(docs_root, SKILL_FILE, README_FILE)
	result = resolver.get_example("request")
	assert isinstance(result, NotFound)
	assert result.location.endswith("SKILL.md")


def test_get_example_blank_lists_features(fs_resolver):
	result = fs_resolver.get_example("  ")
	assert isinstance(result, NotFound)
	assert "command" in result.suggestions
	assert result.suggestions == sorted(result.suggestions)
