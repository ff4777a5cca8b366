"""Unit tests for completion module."""

import asyncio

import pytest
from core.completion import TermCompletion
from core.suggest import DefinitionSuggester, LookupSuggester
from core.term_repository import TermRepository
from core.term_store import FolderTermStore
from core.text_buffer import BufferDocument, Position, StringBuffer


class TestTermCompletion:
    """Tests for TermCompletion."""

    @pytest.fixture
    def repository(self):
        repo = TermRepository()
        for term in ["Term", "Terms", "Termite", "Terminal", "Termination", "Terrace"]:
            repo.add(term)
        return repo

    @pytest.fixture
    def lookup(self, repository):
        return LookupSuggester(repository)

    @pytest.fixture
    def definition(self, tmp_path):
        store = FolderTermStore(str(tmp_path))
        store.ensure_root()
        return DefinitionSuggester(store, notifier=lambda message: None)

    @pytest.fixture
    def completion(self, definition, lookup):
        return TermCompletion([lookup, definition])

    def test_no_trigger(self, completion):
        assert completion.trigger(StringBuffer("plain text ")) is None

    def test_lookup_trigger(self, completion, lookup):
        active = completion.trigger(StringBuffer("a ter"))
        assert active.provider is lookup
        assert active.context.query == "ter"

    def test_lookup_on_line_with_definition(self, completion, lookup):
        """Test the word being typed is looked up even when the line holds a definition."""
        active = completion.trigger(StringBuffer("!!!Term: a word!!! then ter"))
        assert active.provider is lookup
        assert active.context.query == "ter"

    def test_definition_after_closing_marker(self, completion, definition):
        """Test the definition is offered when the cursor follows the closing marker."""
        buffer = StringBuffer("!!!Term: a word!!! then ter", cursor=Position(0, 18))
        active = completion.trigger(buffer)
        assert active.provider is definition
        assert active.context.query == "Term: a word"

    def test_context_line_follows_cursor(self, completion):
        buffer = StringBuffer("first line\nsecond ter")
        active = completion.trigger(buffer)
        assert active.context.line == 1
        assert (active.context.start, active.context.end) == (7, 10)

    def test_suggestions_truncated(self, completion):
        """Test at most the provider's limit of rows is returned."""
        active = completion.trigger(StringBuffer("a ter"))
        values = asyncio.run(completion.suggestions(active))
        assert len(values) == 4
        assert values[0] == "Term"

    def test_render(self, completion):
        active = completion.trigger(StringBuffer("!!!Term: a word!!!"))
        values = asyncio.run(completion.suggestions(active))
        assert completion.render(active, values) == ["Create Term: Term"]

    def test_is_current(self, completion):
        """Test results for an edited span are recognized as stale."""
        buffer = StringBuffer("a ter")
        active = completion.trigger(buffer)
        assert completion.is_current(active, buffer)

        buffer.replace_range("m", Position(0, 5), Position(0, 5))
        assert not completion.is_current(active, buffer)

    def test_accept_on_second_line(self, completion):
        """Test the reference replaces the span on the cursor line."""
        buffer = StringBuffer("first line\nsecond ter")
        document = BufferDocument("Notes/a.md", buffer)
        active = completion.trigger(buffer)

        completion.accept(active, "Term", document)

        assert buffer.text == "first line\nsecond [[term]]"
