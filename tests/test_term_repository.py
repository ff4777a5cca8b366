"""Unit tests for term_repository module."""

import pytest
from core.term_repository import TermRepository


class TestTermRepository:
    """Tests for TermRepository."""

    @pytest.fixture
    def repository(self):
        repo = TermRepository()
        repo.load([
            "Dictionary/Apple.md",
            "Dictionary/Fruit/Banana.md",
            "Dictionary/Notes/Chapter 1/Old.md",
        ])
        return repo

    def test_load(self, repository):
        """Test terms are derived from record names."""
        assert repository.terms() == ["Apple", "Banana", "Old"]
        assert len(repository) == 3

    def test_load_skips_non_records(self):
        """Test non-record files and folders are ignored."""
        repo = TermRepository()
        repo.load(["Dictionary/notes.txt", "Dictionary/Fruit", "Dictionary/Kiwi.md"])
        assert repo.terms() == ["Kiwi"]

    def test_load_replaces_contents(self, repository):
        repository.load(["Dictionary/Pear.md"])
        assert repository.terms() == ["Pear"]

    def test_term_name(self, repository):
        """Test extension stripping on nested and Windows paths."""
        assert repository.term_name("Dictionary/a/b/Term Name.md") == "Term Name"
        assert repository.term_name("Dictionary\\a\\Term.md") == "Term"
        assert repository.term_name("Dictionary/a") is None
        assert repository.term_name("Dictionary/.md") is None

    def test_add_is_unique(self, repository):
        """Test duplicates are not added."""
        assert repository.add("Apple") is False
        assert repository.add("apple") is True
        assert repository.terms().count("Apple") == 1

    def test_remove(self, repository):
        assert repository.remove("Apple") is True
        assert repository.remove("Apple") is False
        assert "Apple" not in repository

    def test_terms_is_snapshot(self, repository):
        """Test callers cannot mutate the repository through terms()."""
        terms = repository.terms()
        terms.append("Injected")
        assert "Injected" not in repository

    def test_case_preserved(self):
        repo = TermRepository()
        repo.add("DNA")
        assert "DNA" in repo
        assert "dna" not in repo


class TestRepositoryNotifications:
    """Tests for the created/renamed handlers."""

    @pytest.fixture
    def repository(self):
        repo = TermRepository()
        repo.load(["Dictionary/Old.md", "Dictionary/Apple.md"])
        return repo

    def test_created(self, repository):
        """Test a new dictionary record adds its term."""
        repository.on_created("Dictionary/Notes/New.md")
        assert "New" in repository

    def test_created_twice(self, repository):
        """Test creating an already known term is a no-op."""
        repository.on_created("Dictionary/Other/Apple.md")
        assert repository.terms() == ["Old", "Apple"]

    def test_created_outside_dictionary(self, repository):
        """Test documents outside the dictionary are not terms."""
        repository.on_created("Notes/Chapter.md")
        assert "Chapter" not in repository

    def test_created_folder(self, repository):
        """Test folders never become terms."""
        repository.on_created("Dictionary/Notes")
        assert repository.terms() == ["Old", "Apple"]

    def test_renamed(self, repository):
        """Test renaming a record swaps old term for new term."""
        repository.on_renamed("Dictionary/Old.md", "Dictionary/New.md")
        assert "Old" not in repository
        assert "New" in repository

    def test_renamed_to_same_term(self, repository):
        """Test moving a record between folders keeps a single term."""
        repository.on_renamed("Dictionary/Old.md", "Dictionary/Archive/Old.md")
        assert repository.terms().count("Old") == 1

    def test_renamed_to_existing_term(self, repository):
        """Test renaming onto a known term does not duplicate it."""
        repository.on_renamed("Dictionary/Old.md", "Dictionary/Apple.md")
        assert repository.terms() == ["Apple"]

    def test_renamed_out_of_dictionary(self, repository):
        """Test moving a record out of the dictionary drops the term."""
        repository.on_renamed("Dictionary/Old.md", "Notes/Old.md")
        assert "Old" not in repository

    def test_renamed_into_dictionary(self, repository):
        """Test moving a document into the dictionary makes it a term."""
        repository.on_renamed("Notes/Pear.md", "Dictionary/Pear.md")
        assert "Pear" in repository

    def test_renamed_outside_dictionary(self, repository):
        """Test renames elsewhere in the project are ignored."""
        repository.on_renamed("Notes/Apple.md", "Notes/Pear.md")
        assert repository.terms() == ["Old", "Apple"]

    def test_no_delete_handler(self, repository):
        """Test deletions are not propagated: there is no handler for them."""
        assert not hasattr(repository, "on_deleted")
