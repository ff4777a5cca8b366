"""Suggestion providers for term lookups and term definitions."""

import asyncio
import posixpath
import re
from abc import ABC, abstractmethod

from core.boundary import DEFINITION_MARKER, TriggerContext, scan_definition, scan_word, split_definition
from core.case_adapter import adapt_case
from core.edit_distance import levenshtein_distance
from core.notifications import print_notifier
from core.term_store import TermStoreError
from core.text_buffer import NoActiveDocumentError, Position


def wrap_reference(term: str) -> str:
    """Format a term as a wiki-style reference."""
    return f"[[{term}]]"


class SuggestionProvider(ABC):
    """Base class for editor suggestion providers.

    A provider decides whether it applies to the text at the cursor
    (``on_trigger``), computes candidates (``get_suggestions``) and applies
    the one the user picked (``select_suggestion``).
    """

    limit = 4

    def __init__(self, notifier=None):
        self.notifier = notifier or print_notifier

    @abstractmethod
    def on_trigger(self, line: str, cursor: int) -> TriggerContext | None:
        """Detect the span this provider would complete.

        Args:
            line: Text of the cursor line
            cursor: Cursor offset within the line

        Returns:
            TriggerContext, or None if the provider does not apply
        """
        pass

    @abstractmethod
    async def get_suggestions(self, context: TriggerContext) -> list[str]:
        """Compute candidates for ``context``."""
        pass

    def render_suggestion(self, value: str) -> str:
        """Text shown for ``value`` in the suggestion list."""
        return value

    @abstractmethod
    def select_suggestion(self, value: str, context: TriggerContext, document):
        """Apply ``value`` to the document.

        Args:
            value: Suggestion picked by the user
            context: Trigger context the suggestion was computed for
            document: ActiveDocument being edited

        Raises:
            NoActiveDocumentError: If no document is active
        """
        pass

    def _replace(self, document, context: TriggerContext, text: str):
        if document is None:
            raise NoActiveDocumentError("No document is active")
        document.buffer.replace_range(
            text,
            Position(context.line, context.start),
            Position(context.line, context.end),
        )


class LookupSuggester(SuggestionProvider):
    """Suggests known terms for the word under the cursor."""

    def __init__(self, repository, notifier=None, regex_queries: bool = False, limit: int = 4):
        """Initialize lookup provider.

        Args:
            repository: TermRepository to search
            notifier: Callable receiving user-visible messages
            regex_queries: Use the typed word as a regular expression instead
                of a literal substring
            limit: Number of rows the host should render
        """
        super().__init__(notifier)
        self.repository = repository
        self.regex_queries = regex_queries
        self.limit = limit

    def on_trigger(self, line: str, cursor: int) -> TriggerContext | None:
        return scan_word(line, cursor)

    def compile_query(self, query: str) -> re.Pattern | None:
        """Build the search pattern for ``query``.

        Returns:
            Compiled pattern, or None if a raw regex query is invalid
        """
        query = query.upper()
        if not self.regex_queries:
            query = re.escape(query)
        try:
            return re.compile(query)
        except re.error:
            return None

    def rank(self, query: str) -> list[str]:
        """Return matching terms ordered by edit distance to ``query``."""
        pattern = self.compile_query(query)
        if pattern is None:
            return []

        normalized_query = query.upper()
        candidates = [term for term in self.repository.terms() if pattern.search(term.upper())]
        # sorted() is stable, equal distances keep repository order
        return sorted(candidates, key=lambda term: levenshtein_distance(term.upper(), normalized_query))

    async def get_suggestions(self, context: TriggerContext) -> list[str]:
        await asyncio.sleep(0)
        return self.rank(context.query)

    def select_suggestion(self, value: str, context: TriggerContext, document):
        text = adapt_case(context.query[:1], value)
        self._replace(document, context, wrap_reference(text))


class DefinitionSuggester(SuggestionProvider):
    """Offers to create a new term from an inline ``!!!Name: description!!!``."""

    def __init__(self, store, notifier=None, marker: str = DEFINITION_MARKER, limit: int = 5):
        """Initialize definition provider.

        Args:
            store: FolderTermStore new records are written to
            notifier: Callable receiving user-visible messages
            marker: Delimiter surrounding an inline definition
            limit: Number of rows the host should render
        """
        super().__init__(notifier)
        self.store = store
        self.marker = marker
        self.limit = limit

    def on_trigger(self, line: str, cursor: int) -> TriggerContext | None:
        return scan_definition(line, cursor, self.marker)

    async def get_suggestions(self, context: TriggerContext) -> list[str]:
        return [context.query]

    def render_suggestion(self, value: str) -> str:
        name, _ = split_definition(value)
        return f"Create Term: {name}"

    def record_folder(self, document_path: str) -> str:
        """Folder that holds terms defined in ``document_path``.

        ``Notes/Chapter 1.md`` maps to ``Dictionary/Notes/Chapter 1``.
        """
        stem, _ = posixpath.splitext(document_path.replace('\\', '/').strip('/'))
        return f"{self.store.root_name}/{stem}"

    def select_suggestion(self, value: str, context: TriggerContext, document):
        if document is None or not getattr(document, 'path', None):
            raise NoActiveDocumentError("Cannot define a term without an active document")

        name, description = split_definition(value)
        folder = self.record_folder(document.path)
        record_path = f"{folder}/{name}{self.store.record_extension}"

        try:
            if not self.store.folder_exists(folder):
                self.store.create_folder(folder)
            # The repository picks the term up from the store's created notification
            self.store.create_record(record_path, description)
        except TermStoreError as e:
            self.notifier(str(e))

        self._replace(document, context, wrap_reference(name))
