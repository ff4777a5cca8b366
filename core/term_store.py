"""Folder-based term store.

Each term is a Markdown record inside the dictionary folder of a project,
possibly nested in subfolders. Paths handed in and out of the store are
project-relative with forward slashes, e.g. ``Dictionary/Notes/Foo.md``.
"""

import os


class TermStoreError(Exception):
    """Raised when the term store cannot complete an operation."""


class TermExistsError(TermStoreError):
    """Raised when creating a record that already exists."""


class TermStoreListener:
    """Receives notifications about records appearing in the store."""

    def on_created(self, path: str):
        """Called after a record or folder was created.

        Args:
            path: Project-relative path of the new entry
        """
        raise NotImplementedError

    def on_renamed(self, old_path: str, new_path: str):
        """Called after an entry was renamed or moved.

        Args:
            old_path: Project-relative path before the rename
            new_path: Project-relative path after the rename
        """
        raise NotImplementedError


class FolderTermStore:
    """Term store backed by a folder inside the project directory."""

    def __init__(self, project_root: str, root_name: str = "Dictionary", record_extension: str = ".md"):
        """Initialize store.

        Args:
            project_root: Absolute path of the project folder
            root_name: Name of the dictionary folder inside the project
            record_extension: Extension used for term records
        """
        self.project_root = os.path.abspath(project_root)
        self.root_name = root_name
        self.record_extension = record_extension
        self._listeners: list = []

    # Listeners

    def add_listener(self, listener):
        """Register a listener for created/renamed notifications."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener):
        """Unregister a listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify_created(self, path: str):
        """Tell listeners that ``path`` was created."""
        path = self._normalize(path)
        for listener in list(self._listeners):
            listener.on_created(path)

    def notify_renamed(self, old_path: str, new_path: str):
        """Tell listeners that ``old_path`` is now ``new_path``."""
        old_path = self._normalize(old_path)
        new_path = self._normalize(new_path)
        for listener in list(self._listeners):
            listener.on_renamed(old_path, new_path)

    # Paths

    def _normalize(self, path: str) -> str:
        if os.path.isabs(path):
            path = self.relative_path(path)
        path = path.replace('\\', '/')
        while '//' in path:
            path = path.replace('//', '/')
        return path.strip('/')

    def absolute_path(self, path: str) -> str:
        """Convert a project-relative path to an absolute one."""
        return os.path.join(self.project_root, *self._normalize(path).split('/'))

    def relative_path(self, abs_path: str) -> str:
        """Convert an absolute path to a project-relative one."""
        rel = os.path.relpath(abs_path, self.project_root)
        return rel.replace('\\', '/')

    def is_record(self, path: str) -> bool:
        """Check if ``path`` names a term record (by extension)."""
        return path.endswith(self.record_extension)

    # Folders

    def root_exists(self) -> bool:
        return self.folder_exists(self.root_name)

    def ensure_root(self) -> bool:
        """Create the dictionary folder if it is missing.

        Returns:
            True if the folder had to be created
        """
        if self.root_exists():
            return False
        self.create_folder(self.root_name)
        return True

    def folder_exists(self, path: str) -> bool:
        return os.path.isdir(self.absolute_path(path))

    def create_folder(self, path: str):
        """Create a folder (and its parents) inside the project.

        Raises:
            TermStoreError: If the folder could not be created
        """
        try:
            os.makedirs(self.absolute_path(path), exist_ok=True)
        except OSError as e:
            raise TermStoreError(f"Could not create folder {path}: {e}") from e

    # Records

    def list_records(self, path: str | None = None) -> list[str]:
        """Enumerate record paths below ``path`` recursively.

        Args:
            path: Folder to enumerate, defaults to the dictionary folder

        Returns:
            Sorted project-relative record paths
        """
        base = self.absolute_path(path or self.root_name)
        if not os.path.isdir(base):
            return []

        records = []
        for root, dirs, files in os.walk(base):
            dirs[:] = [d for d in dirs if not d.startswith('.')]
            for filename in files:
                if filename.startswith('.') or not self.is_record(filename):
                    continue
                records.append(self.relative_path(os.path.join(root, filename)))
        return sorted(records)

    def create_record(self, path: str, body: str):
        """Create a new record and notify listeners.

        Args:
            path: Project-relative record path
            body: Full content of the record

        Raises:
            TermExistsError: If a record already exists at ``path``
            TermStoreError: If the record could not be written
        """
        path = self._normalize(path)
        full_path = self.absolute_path(path)
        try:
            with open(full_path, 'x', encoding='utf-8') as f:
                f.write(body)
        except FileExistsError as e:
            raise TermExistsError(f"{path} already exists") from e
        except OSError as e:
            raise TermStoreError(f"Could not create {path}: {e}") from e
        self.notify_created(path)

    def read_record(self, path: str) -> str:
        """Read the body of a record.

        Raises:
            TermStoreError: If the record could not be read
        """
        try:
            with open(self.absolute_path(path), 'r', encoding='utf-8') as f:
                return f.read()
        except OSError as e:
            raise TermStoreError(f"Could not read {path}: {e}") from e

    def rename(self, old_path: str, new_path: str):
        """Rename or move a record or folder and notify listeners.

        Raises:
            TermExistsError: If ``new_path`` is already taken
            TermStoreError: If the rename failed
        """
        old_full = self.absolute_path(old_path)
        new_full = self.absolute_path(new_path)
        if os.path.exists(new_full):
            raise TermExistsError(f"{self._normalize(new_path)} already exists")
        try:
            os.makedirs(os.path.dirname(new_full), exist_ok=True)
            os.rename(old_full, new_full)
        except OSError as e:
            raise TermStoreError(f"Could not rename {old_path}: {e}") from e
        self.notify_renamed(old_path, new_path)

    def find_record(self, term: str) -> str | None:
        """Find the record holding ``term``.

        Returns:
            Project-relative path of the first matching record, or None
        """
        filename = term + self.record_extension
        for path in self.list_records():
            if path.rsplit('/', 1)[-1] == filename:
                return path
        return None
