"""Unit tests for EditorController file relocation handling."""

from types import SimpleNamespace

import pytest
from core.term_repository import TermRepository
from core.term_store import FolderTermStore
from gui.controllers.editor_controller import EditorController


class RecordingEditor:
    """Stands in for EditorWidget, tracking open file paths."""

    def __init__(self, open_paths):
        self.open_files = set(open_paths)
        self.retargets = []

    def update_open_file_path(self, old_path, new_path):
        self.retargets.append((old_path, new_path))
        if old_path in self.open_files:
            self.open_files.remove(old_path)
            self.open_files.add(new_path)
            return True
        return False


class StubWindow:
    def __init__(self, editor, store):
        self.editor = editor
        self.term_plugin = SimpleNamespace(store=store)
        self.saved_states = 0
        self.messages = []

    def save_project_state(self):
        self.saved_states += 1

    def statusBar(self):
        return SimpleNamespace(showMessage=lambda message, timeout=0: self.messages.append(message))


class TestRecordRename:
    """Tests for renames done through the term store (dictionary dialog)."""

    @pytest.fixture
    def store(self, tmp_path):
        store = FolderTermStore(str(tmp_path))
        store.ensure_root()
        store.create_record("Dictionary/Old.md", "An old term.")
        return store

    @pytest.fixture
    def repository(self, store):
        repository = TermRepository()
        repository.load(store.list_records())
        store.add_listener(repository)
        return repository

    def test_open_tab_follows_rename(self, store, repository):
        """Test a tab on the renamed record points at the new file."""
        old_path = store.absolute_path("Dictionary/Old.md")
        new_path = store.absolute_path("Dictionary/New.md")
        editor = RecordingEditor([old_path])
        controller = EditorController(StubWindow(editor, store))

        store.rename("Dictionary/Old.md", "Dictionary/New.md")
        controller.on_record_renamed(old_path, new_path)

        assert editor.open_files == {new_path}
        assert repository.terms() == ["New"]
        assert controller.file_ops_history == [{"type": "rename", "old": old_path, "new": new_path}]

    def test_store_not_notified_twice(self, store):
        events = []
        store.add_listener(SimpleNamespace(
            on_created=lambda path: events.append(("created", path)),
            on_renamed=lambda old, new: events.append(("renamed", old, new)),
        ))
        old_path = store.absolute_path("Dictionary/Old.md")
        new_path = store.absolute_path("Dictionary/New.md")
        controller = EditorController(StubWindow(RecordingEditor([]), store))

        store.rename("Dictionary/Old.md", "Dictionary/New.md")
        controller.on_record_renamed(old_path, new_path)

        assert events == [("renamed", "Dictionary/Old.md", "Dictionary/New.md")]

    def test_undo_restores_record_and_term(self, store, repository, tmp_path):
        """Test undoing the rename moves the file back and restores the term."""
        old_path = store.absolute_path("Dictionary/Old.md")
        new_path = store.absolute_path("Dictionary/New.md")
        editor = RecordingEditor([old_path])
        controller = EditorController(StubWindow(editor, store))

        store.rename("Dictionary/Old.md", "Dictionary/New.md")
        controller.on_record_renamed(old_path, new_path)
        controller.undo_file_change()

        assert (tmp_path / "Dictionary" / "Old.md").exists()
        assert not (tmp_path / "Dictionary" / "New.md").exists()
        assert editor.open_files == {old_path}
        assert repository.terms() == ["Old"]
        assert controller.file_ops_redo == [{"type": "rename", "old": old_path, "new": new_path}]


class TestSidebarRename:
    """Tests for renames done in the project tree."""

    def test_rename_notifies_store(self, tmp_path):
        store = FolderTermStore(str(tmp_path))
        store.ensure_root()
        (tmp_path / "Dictionary" / "Old.md").write_text("x")
        repository = TermRepository()
        repository.load(store.list_records())
        store.add_listener(repository)
        controller = EditorController(StubWindow(RecordingEditor([]), store))

        (tmp_path / "Dictionary" / "Old.md").rename(tmp_path / "Dictionary" / "New.md")
        controller.on_file_renamed(str(tmp_path / "Dictionary" / "Old.md"), str(tmp_path / "Dictionary" / "New.md"))

        assert repository.terms() == ["New"]
