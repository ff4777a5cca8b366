"""Wires the term dictionary together for one project."""

from core.completion import TermCompletion
from core.notifications import print_notifier
from core.settings import load_settings
from core.suggest import DefinitionSuggester, LookupSuggester
from core.term_repository import TermRepository
from core.term_store import FolderTermStore


class TermPlugin:
    """Owns the term store, the repository and the suggestion providers."""

    def __init__(self, project_root: str, settings=None, notifier=None):
        """Initialize plugin.

        Args:
            project_root: Project folder
            settings: TermSettings, loaded from the project when omitted
            notifier: Callable receiving user-visible messages
        """
        self.project_root = project_root
        self.settings = settings
        self.notifier = notifier or print_notifier
        self.store = None
        self.repository = None
        self.lookup = None
        self.definition = None
        self.completion = None

    def load(self):
        """Create the dictionary folder if needed and index its records."""
        if self.settings is None:
            self.settings = load_settings(self.project_root)
        settings = self.settings

        self.store = FolderTermStore(
            self.project_root,
            root_name=settings.dictionary_name,
            record_extension=settings.record_extension,
        )
        if self.store.ensure_root():
            print(f"DEBUG: Created dictionary folder {settings.dictionary_name}")

        self.repository = TermRepository(
            record_extension=settings.record_extension,
            root_name=settings.dictionary_name,
        )
        self.repository.load(self.store.list_records())
        self.store.add_listener(self.repository)
        print(f"DEBUG: Loaded {len(self.repository)} terms from {settings.dictionary_name}")

        self.lookup = LookupSuggester(
            self.repository,
            notifier=self.notifier,
            regex_queries=settings.regex_queries,
            limit=settings.lookup_limit,
        )
        self.definition = DefinitionSuggester(
            self.store,
            notifier=self.notifier,
            marker=settings.definition_marker,
            limit=settings.definition_limit,
        )
        # Lookup first: right after a closing "!!!" the word scan fails on the
        # separator and the definition takes over
        self.completion = TermCompletion([self.lookup, self.definition])
        return self

    def unload(self):
        """Stop listening to the term store."""
        if self.store and self.repository:
            self.store.remove_listener(self.repository)
