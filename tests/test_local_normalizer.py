"""Unit tests for local_normalizer.py module."""
from __future__ import annotations

import unittest

from textpolisher.local_normalizer import normalize


class TestNormalize(unittest.TestCase):
    """Test cases for the rule-based normalizer."""

    def test_empty_and_none(self):
        """Empty and missing input normalize to an empty string."""
        self.assertEqual(normalize(""), "")
        self.assertEqual(normalize(None), "")

    def test_whitespace_only_stays_empty(self):
        """No period is appended to whitespace-only input."""
        self.assertEqual(normalize("   \t\r\n  "), "")

    def test_collapses_and_trims_whitespace(self):
        self.assertEqual(normalize("  hello   world  "), "Hello world.")

    def test_removes_space_before_punctuation(self):
        self.assertEqual(normalize("this is bad , ok ?"), "This is bad, ok?")
        self.assertEqual(normalize("one ; two !"), "One; two!")

    def test_no_duplicate_trailing_period(self):
        self.assertEqual(normalize("already done."), "Already done.")

    def test_keeps_exclamation_and_question_endings(self):
        self.assertEqual(normalize("wow!"), "Wow!")
        self.assertEqual(normalize("really?"), "Really?")

    def test_tabs_and_crlf(self):
        self.assertEqual(normalize("a\tb\r\nc"), "A b c.")

    def test_only_first_character_uppercased(self):
        """The rest of the string keeps its casing."""
        self.assertEqual(normalize("iPhone and macOS"), "IPhone and macOS.")

    def test_non_letter_first_character(self):
        self.assertEqual(normalize("42 is the answer"), "42 is the answer.")

    def test_unicode_first_character(self):
        self.assertEqual(normalize("źle napisane"), "Źle napisane.")

    def test_space_kept_before_colon(self):
        """Only . , ; ! ? pull the preceding space in."""
        self.assertEqual(normalize("note : this"), "Note : this.")

    def test_punctuation_only(self):
        self.assertEqual(normalize(" . "), ".")

    def test_idempotent(self):
        """Normalizing twice gives the same result as normalizing once."""
        samples = [
            "",
            "   ",
            "  hello   world  ",
            "this is bad , ok ?",
            "already done.",
            "a\tb\r\nc",
            "a . . , ; ! ?",
            "ßtraße ist gut",
            "\n\nmulti\n\nline\ttext ,with  spaces ;",
            "x",
            "?",
            "end with comma ,",
            "ALL CAPS !",
        ]
        for sample in samples:
            with self.subTest(sample=sample):
                once = normalize(sample)
                self.assertEqual(normalize(once), once)


if __name__ == '__main__':
    unittest.main()
