"""Unit tests for project module."""

import pytest
from core.project import ProjectManager


class TestProjectManager:
    """Tests for ProjectManager."""

    @pytest.fixture
    def manager(self, tmp_path):
        (tmp_path / "Notes").mkdir()
        (tmp_path / "Notes" / "Chapter.md").write_text("Hello")
        manager = ProjectManager()
        assert manager.open_project(str(tmp_path))
        return manager

    def test_open_rejects_missing_folder(self, tmp_path):
        manager = ProjectManager()
        assert manager.open_project(str(tmp_path / "missing")) is False
        assert manager.get_root_path() is None

    def test_read_relative_and_absolute(self, manager, tmp_path):
        assert manager.read_file("Notes/Chapter.md") == "Hello"
        assert manager.read_file(str(tmp_path / "Notes" / "Chapter.md")) == "Hello"
        assert manager.read_file("Notes/missing.md") is None

    def test_save_file(self, manager, tmp_path):
        assert manager.save_file("Notes/New.md", "Body") is True
        assert (tmp_path / "Notes" / "New.md").read_text() == "Body"
        assert manager.save_file("Missing/New.md", "Body") is False

    def test_closed_project(self, manager):
        manager.close_project()
        with pytest.raises(ValueError):
            manager.read_file("Notes/Chapter.md")
