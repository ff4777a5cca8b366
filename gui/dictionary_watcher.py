"""Watches the dictionary folder for records created outside the editor."""

import os
from PySide6.QtCore import QObject, QFileSystemWatcher, Signal


class DictionaryWatcher(QObject):
    """Forwards newly appearing dictionary records to the term store.

    QFileSystemWatcher only reports that a directory changed, so the
    watcher keeps the last listing and diffs against it. Records that
    disappear are not reported.
    """

    record_created = Signal(str)  # project-relative path

    def __init__(self, store, parent=None):
        """Initialize watcher.

        Args:
            store: FolderTermStore whose dictionary folder is watched
        """
        super().__init__(parent)
        self.store = store
        self.watcher = QFileSystemWatcher(self)
        self.watcher.directoryChanged.connect(self._on_directory_changed)
        self.known_records = set(store.list_records())
        self._watch_folders()

    def _watch_folders(self):
        root = self.store.absolute_path(self.store.root_name)
        if not os.path.isdir(root):
            return
        folders = [root]
        for current, dirs, _ in os.walk(root):
            dirs[:] = [d for d in dirs if not d.startswith('.')]
            folders.extend(os.path.join(current, d) for d in dirs)

        watched = set(self.watcher.directories())
        new_folders = [f for f in folders if f not in watched]
        if new_folders:
            self.watcher.addPaths(new_folders)

    def _on_directory_changed(self, path):
        # New subfolders need watching too
        self._watch_folders()

        records = set(self.store.list_records())
        created = sorted(records - self.known_records)
        self.known_records = records

        for record in created:
            self.record_created.emit(record)
            self.store.notify_created(record)

    def mark_known(self, path):
        """Record a path the editor already announced, so it is not reported twice."""
        self.known_records.add(path)

    def stop(self):
        directories = self.watcher.directories()
        if directories:
            self.watcher.removePaths(directories)
