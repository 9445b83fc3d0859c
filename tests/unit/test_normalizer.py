"""Unit tests for lexical normalization."""

import pytest

from handsfree.commands.normalizer import normalize, words_to_numbers


@pytest.mark.unit
class TestNormalizer:
    """Test cases for normalize and words_to_numbers."""

    def test_trims_and_lowercases(self):
        assert normalize("  Show Contacts  ") == "show contacts"

    def test_replaces_number_words(self):
        assert normalize("take a picture five timer three") == "take a picture 5 timer 3"

    def test_replaces_zero_through_ten(self):
        words = "zero one two three four five six seven eight nine ten"
        assert normalize(words) == "0 1 2 3 4 5 6 7 8 9 10"

    def test_leaves_other_words_alone(self):
        assert normalize("record video for twenty seconds") == "record video for twenty seconds"

    def test_only_whole_tokens_are_replaced(self):
        # "someone" and "tone" contain "one" but are not number words
        assert normalize("someone rang a tone") == "someone rang a tone"

    def test_collapses_repeated_whitespace(self):
        assert normalize("record   video\tfor  two") == "record video for 2"

    def test_empty_input(self):
        assert normalize("   ") == ""

    def test_words_to_numbers_keeps_casing_of_other_tokens(self):
        assert words_to_numbers("ABC One two Xyz") == "ABC 1 2 Xyz"
