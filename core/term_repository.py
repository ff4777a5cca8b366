"""In-memory set of known terms mirrored from the dictionary folder."""

import posixpath


class TermRepository:
    """Known terms, kept in sync with the term store through notifications.

    Terms are stored exactly as named by their records; case is only
    normalized when matching. Deleting a record does not remove its term.
    """

    def __init__(self, record_extension: str = ".md", root_name: str = "Dictionary"):
        """Initialize an empty repository.

        Args:
            record_extension: Extension of term records, stripped to get the term
            root_name: Name of the dictionary folder inside the project
        """
        self.record_extension = record_extension
        self.root_name = root_name
        self._terms: list[str] = []

    def load(self, paths):
        """Replace the contents with the terms derived from ``paths``.

        Args:
            paths: Record paths from a recursive listing of the dictionary
        """
        self._terms = []
        for path in paths:
            term = self.term_name(path)
            if term:
                self.add(term)

    def term_name(self, path: str) -> str | None:
        """Derive a term from a record path.

        Args:
            path: Project-relative record path

        Returns:
            File name without its extension, or None if the path is not a record
        """
        name = posixpath.basename(path.replace('\\', '/').rstrip('/'))
        if not name.endswith(self.record_extension):
            return None
        term = name[:-len(self.record_extension)] if self.record_extension else name
        return term or None

    def is_dictionary_path(self, path: str) -> bool:
        """Check whether ``path`` lies inside the dictionary folder."""
        path = path.replace('\\', '/').lstrip('/')
        return path.startswith(self.root_name + '/')

    def add(self, term: str) -> bool:
        """Add a term if it is not already known.

        Returns:
            True if the term was added
        """
        if not term or term in self._terms:
            return False
        self._terms.append(term)
        return True

    def remove(self, term: str) -> bool:
        """Remove a term.

        Returns:
            True if the term was known
        """
        if term in self._terms:
            self._terms.remove(term)
            return True
        return False

    def terms(self) -> list[str]:
        """Snapshot of the known terms in insertion order."""
        return list(self._terms)

    def __contains__(self, term):
        return term in self._terms

    def __iter__(self):
        return iter(list(self._terms))

    def __len__(self):
        return len(self._terms)

    # Term store listener

    def on_created(self, path: str):
        """Handle a record created in the term store."""
        if not self.is_dictionary_path(path):
            return
        term = self.term_name(path)
        if term:
            self.add(term)

    def on_renamed(self, old_path: str, new_path: str):
        """Handle a record renamed or moved in the term store.

        The old term is removed before the new one is added, so renaming a
        record to the same term name leaves the repository unchanged.
        """
        if self.is_dictionary_path(old_path):
            old_term = self.term_name(old_path)
            if old_term:
                self.remove(old_term)
        if self.is_dictionary_path(new_path):
            new_term = self.term_name(new_path)
            if new_term:
                self.add(new_term)
