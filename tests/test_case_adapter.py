"""Unit tests for case_adapter module."""

from core.case_adapter import adapt_case


class TestAdaptCase:
    """Tests for adapt_case."""

    def test_lowercase_typing_lowers_term(self):
        """Test a capitalized term follows lower-case typing."""
        assert adapt_case("d", "Dog") == "dog"

    def test_acronym_kept(self):
        """Test acronym-like terms are inserted unchanged."""
        assert adapt_case("d", "DNA") == "DNA"
        assert adapt_case("x", "XYz") == "XYz"

    def test_uppercase_typing_keeps_term(self):
        """Test upper-case typing never changes the term."""
        assert adapt_case("D", "Dog") == "Dog"
        assert adapt_case("D", "dog") == "dog"

    def test_single_character_term(self):
        """Test terms without a second character are unchanged."""
        assert adapt_case("x", "X") == "X"

    def test_non_letter_first_character(self):
        """Test characters without case never lower the term."""
        assert adapt_case("1", "Dog") == "Dog"

    def test_non_letter_second_character(self):
        """Test a caseless second character keeps the term."""
        assert adapt_case("a", "A1") == "A1"

    def test_empty_original(self):
        assert adapt_case("", "Dog") == "Dog"
