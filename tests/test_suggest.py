"""Unit tests for suggest module.

Covers the lookup and definition providers against an in-memory buffer
and a temporary project folder.
"""

import asyncio

import pytest
from core.boundary import TriggerContext, scan_definition, scan_word
from core.suggest import DefinitionSuggester, LookupSuggester, wrap_reference
from core.term_repository import TermRepository
from core.term_store import FolderTermStore
from core.text_buffer import BufferDocument, NoActiveDocumentError, StringBuffer


def make_repository(*terms):
    repo = TermRepository()
    for term in terms:
        repo.add(term)
    return repo


class TestWrapReference:
    def test_wrap(self):
        assert wrap_reference("Apple") == "[[Apple]]"


class TestLookupSuggester:
    """Tests for LookupSuggester."""

    @pytest.fixture
    def lookup(self):
        return LookupSuggester(make_repository("Apple", "Applesauce", "Banana"))

    def test_trigger(self, lookup):
        context = lookup.on_trigger("an appl", 7)
        assert context == TriggerContext(3, 7, "appl")

    def test_trigger_rejects_after_separator(self, lookup):
        assert lookup.on_trigger("an appl ", 8) is None

    def test_ranked_by_distance(self, lookup):
        """Test substring matches are ordered by edit distance."""
        result = asyncio.run(lookup.get_suggestions(TriggerContext(0, 4, "appl")))
        assert result == ["Apple", "Applesauce"]

    def test_case_insensitive(self, lookup):
        assert lookup.rank("NAN") == ["Banana"]
        assert lookup.rank("nan") == ["Banana"]

    def test_no_match(self, lookup):
        assert lookup.rank("cherry") == []

    def test_ties_keep_repository_order(self):
        """Test equal distances keep insertion order."""
        lookup = LookupSuggester(make_repository("Cat", "Bat", "Hat"))
        assert lookup.rank("at") == ["Cat", "Bat", "Hat"]

    def test_literal_query_by_default(self, lookup):
        """Test regex metacharacters match literally."""
        assert lookup.rank("a.p") == []
        assert lookup.rank("ap(") == []

    def test_regex_queries(self):
        """Test the typed word is a pattern when regex queries are on."""
        lookup = LookupSuggester(make_repository("Apple", "Applesauce", "Banana"), regex_queries=True)
        assert lookup.rank("a.p") == ["Apple", "Applesauce"]
        assert lookup.rank("^ban") == ["Banana"]

    def test_invalid_regex(self):
        """Test an invalid pattern yields no suggestions."""
        lookup = LookupSuggester(make_repository("Apple"), regex_queries=True)
        assert lookup.compile_query("ap(") is None
        assert lookup.rank("ap(") == []

    def test_sees_new_terms(self):
        """Test terms added after construction are suggested."""
        repo = make_repository("Apple")
        lookup = LookupSuggester(repo)
        repo.add("Apricot")
        assert lookup.rank("ap") == ["Apple", "Apricot"]

    def test_select_lowercases(self):
        """Test lower-case typing inserts a lower-cased reference."""
        lookup = LookupSuggester(make_repository("Dog", "DNA"))
        document = BufferDocument("Notes/a.md", StringBuffer("my do"))
        context = scan_word("my do", 5)

        lookup.select_suggestion("Dog", context, document)

        assert document.buffer.text == "my [[dog]]"
        assert document.buffer.get_cursor().ch == len("my [[dog]]")

    def test_select_keeps_acronym(self):
        lookup = LookupSuggester(make_repository("Dog", "DNA"))
        document = BufferDocument("Notes/a.md", StringBuffer("my dn"))

        lookup.select_suggestion("DNA", scan_word("my dn", 5), document)

        assert document.buffer.text == "my [[DNA]]"

    def test_select_without_document(self, lookup):
        with pytest.raises(NoActiveDocumentError):
            lookup.select_suggestion("Apple", TriggerContext(0, 4, "appl"), None)


class TestDefinitionSuggester:
    """Tests for DefinitionSuggester."""

    LINE = "see !!!Foo: a bar!!! here"

    @pytest.fixture
    def store(self, tmp_path):
        store = FolderTermStore(str(tmp_path))
        store.ensure_root()
        return store

    @pytest.fixture
    def messages(self):
        return []

    @pytest.fixture
    def definition(self, store, messages):
        return DefinitionSuggester(store, notifier=messages.append)

    def test_suggestion_is_body(self, definition):
        context = definition.on_trigger(self.LINE, 0)
        assert asyncio.run(definition.get_suggestions(context)) == ["Foo: a bar"]

    def test_render(self, definition):
        assert definition.render_suggestion("Foo: a bar") == "Create Term: Foo"

    def test_record_folder(self, definition):
        """Test records are filed under a folder named after the document."""
        assert definition.record_folder("Notes/Chapter 1.md") == "Dictionary/Notes/Chapter 1"
        assert definition.record_folder("Intro.md") == "Dictionary/Intro"

    def test_select_creates_record(self, definition, store, tmp_path, messages):
        """Test accepting writes the record and leaves a reference behind."""
        repository = TermRepository()
        store.add_listener(repository)
        document = BufferDocument("Notes/Chapter1.md", StringBuffer(self.LINE))
        context = scan_definition(self.LINE)

        definition.select_suggestion(context.query, context, document)

        record = tmp_path / "Dictionary" / "Notes" / "Chapter1" / "Foo.md"
        assert record.read_text() == "a bar"
        assert document.buffer.text == "see [[Foo]] here"
        assert "Foo" in repository
        assert messages == []

    def test_select_existing_record(self, definition, store, tmp_path, messages):
        """Test a duplicate is reported and the reference still inserted."""
        folder = tmp_path / "Dictionary" / "Notes" / "Chapter1"
        folder.mkdir(parents=True)
        (folder / "Foo.md").write_text("original")
        document = BufferDocument("Notes/Chapter1.md", StringBuffer(self.LINE))
        context = scan_definition(self.LINE)

        definition.select_suggestion(context.query, context, document)

        assert (folder / "Foo.md").read_text() == "original"
        assert len(messages) == 1
        assert "already exists" in messages[0]
        assert document.buffer.text == "see [[Foo]] here"

    def test_select_without_document(self, definition, tmp_path):
        """Test nothing is written when no document is active."""
        context = scan_definition(self.LINE)
        with pytest.raises(NoActiveDocumentError):
            definition.select_suggestion(context.query, context, None)
        assert not (tmp_path / "Dictionary" / "Notes").exists()

    def test_custom_marker(self, store):
        definition = DefinitionSuggester(store, marker="%%")
        context = definition.on_trigger("x %%Foo: bar%% y", 0)
        assert context.query == "Foo: bar"
