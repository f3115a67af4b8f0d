"""Tests for line search and fenced code block extraction."""

from mediator_docs.search import (
	extract_code_blocks,
	find_code_examples,
	search_documents,
	search_lines,
)
from mediator_docs.types import CodeBlock

FENCED = "text\n```csharp\nICommandHandler<MyCommand>\n```\nmore text\n"


class TestSearchLines:
	"""Tests for per-document line matching."""

	def test_case_insensitive(self):
		matches = search_lines("Alpha\nbeta\nALPHA gamma", "alpha")
		assert [m.line_number for m in matches] == [1, 3]

	def test_context_lines_are_stripped(self):
		matches = search_lines("  first  \n\tmatch here \n   last", "match")
		assert len(matches) == 1
		assert matches[0].before == "first"
		assert matches[0].line == "match here"
		assert matches[0].after == "last"

	def test_no_context_at_edges(self):
		matches = search_lines("match one\nmatch two", "match")
		assert matches[0].before is None
		assert matches[0].after == "match two"
		assert matches[1].after is None

	def test_caps_at_five_matches(self):
		content = "\n".join(f"term {i}" for i in range(8))
		matches = search_lines(content, "term")
		assert len(matches) == 5
		assert [m.line_number for m in matches] == [1, 2, 3, 4, 5]

	def test_no_match(self):
		assert search_lines("nothing here", "zzz") == []

	def test_splits_on_line_feed_only(self):
		matches = search_lines("a\x0cb term\nnext\u2028line term", "term")
		assert [m.line_number for m in matches] == [1, 2]
		assert matches[0].line == "a\x0cb term"

	def test_trailing_newline_leaves_empty_last_line(self):
		matches = search_lines("first\nterm\n", "term")
		assert matches[0].after == ""


class TestSearchDocuments:
	"""Tests for multi-document search."""

	def test_keeps_document_order(self):
		docs = [("b", "needle"), ("a", "needle too"), ("c", "hay")]
		results = search_documents(docs, "NEEDLE")
		assert [r.document for r in results] == ["b", "a"]

	def test_cap_applies_per_document(self):
		many = "\n".join(["hit"] * 8)
		results = search_documents([("one", many), ("two", many)], "hit")
		assert [len(r.matches) for r in results] == [5, 5]

	def test_no_results(self):
		assert search_documents([("a", "foo"), ("b", "bar")], "zzz_no_such_term_zzz") == []

	def test_deterministic(self):
		docs = [("a", "x term\ny\nterm z"), ("b", "term")]
		assert search_documents(docs, "term") == search_documents(docs, "term")


class TestExtractCodeBlocks:
	"""Tests for the fence state machine."""

	def test_single_block(self):
		blocks = extract_code_blocks(FENCED)
		assert blocks == [CodeBlock(language="csharp", body="ICommandHandler<MyCommand>\n")]

	def test_language_optional(self):
		blocks = extract_code_blocks("```\ncode\n```\n")
		assert blocks == [CodeBlock(language=None, body="code\n")]

	def test_indented_fences(self):
		content = "- item\n    ```bash\n    dotnet build\n    ```\n"
		blocks = extract_code_blocks(content)
		assert blocks == [CodeBlock(language="bash", body="    dotnet build\n")]

	def test_preserves_line_endings(self):
		blocks = extract_code_blocks("```\r\na\r\nb\r\n```\r\n")
		assert blocks[0].body == "a\r\nb\r\n"

	def test_unterminated_fence_is_discarded(self):
		content = "```csharp\nfirst\n```\n\n```csharp\nnever closed\n"
		blocks = extract_code_blocks(content)
		assert len(blocks) == 1
		assert blocks[0].body == "first\n"

	def test_multiple_blocks_in_order(self):
		content = "```a\n1\n```\ntext\n```b\n2\n```\n"
		assert [b.language for b in extract_code_blocks(content)] == ["a", "b"]

	def test_empty_block(self):
		assert extract_code_blocks("```\n```\n") == [CodeBlock(language=None, body="")]

	def test_form_feed_stays_inside_body(self):
		blocks = extract_code_blocks("```\na\x0cb\n```\n")
		assert blocks == [CodeBlock(language=None, body="a\x0cb\n")]

	def test_last_line_without_newline(self):
		assert extract_code_blocks("```\ncode\n```") == [CodeBlock(language=None, body="code\n")]


class TestFindCodeExamples:
	"""Tests for marker-based example mining."""

	def test_marker_match(self):
		blocks = find_code_examples(FENCED, "ICommandHandler", "command")
		assert len(blocks) == 1
		assert blocks[0].body == "ICommandHandler<MyCommand>\n"

	def test_absent_marker(self):
		assert find_code_examples(FENCED, "IStreamRequestHandler", "stream") == []

	def test_feature_key_matches_without_marker(self):
		blocks = find_code_examples("```\nvar command = new Foo();\n```\n", "NoSuchMarker", "command")
		assert len(blocks) == 1

	def test_case_insensitive(self):
		blocks = find_code_examples("```\n[cache(60)]\n```\n", "[Cache(", "caching")
		assert len(blocks) == 1

	def test_caps_at_three_blocks(self):
		content = "```\nICommandHandler\n```\n" * 5
		assert len(find_code_examples(content, "ICommandHandler", "command")) == 3
