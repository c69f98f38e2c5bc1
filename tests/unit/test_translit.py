#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_translit.py
"""Unit tests for Latin/Cyrillic transliteration."""

from __future__ import annotations

import pytest

from strtools.translit import CYRILLIC_TO_LATIN, LATIN_TO_CYRILLIC, translit_to_eng, translit_to_rus


@pytest.mark.unit
class TestTranslitToEng:
    """Test translit_to_eng."""

    def test_greeting(self) -> None:
        """Test a simple word."""
        assert translit_to_eng("Привет") == "Privet"

    def test_multi_letter_mappings(self) -> None:
        """Test letters that map to several Latin letters."""
        assert translit_to_eng("Щука") == "Schuka"
        assert translit_to_eng("Ёжик") == "Yozhik"
        assert translit_to_eng("Юля и Яна") == "Yulya i Yana"
        assert translit_to_eng("чаща") == "chascha"

    def test_signs(self) -> None:
        """Test hard and soft signs."""
        assert translit_to_eng("объём") == "ob'yom"
        assert translit_to_eng("Мышь") == "Mysh'"

    def test_case_preserved(self) -> None:
        """Test that case follows the source letter."""
        assert translit_to_eng("МОСКВА москва") == "MOSKVA moskva"

    def test_other_characters_untouched(self) -> None:
        """Test that Latin text, digits and punctuation pass through."""
        assert translit_to_eng("Test 123, тест!") == "Test 123, test!"

    def test_full_uppercase_alphabet(self) -> None:
        """Test every upper-case letter of the table."""
        source = "".join(pattern for pattern, _ in CYRILLIC_TO_LATIN[:33])
        assert translit_to_eng(source) == "ABVGDEYoZhZIIKLMNOPRSTUFHCChShSch'Y'EYuYa"


@pytest.mark.unit
class TestTranslitToRus:
    """Test translit_to_rus."""

    def test_word(self) -> None:
        """Test a simple word."""
        assert translit_to_rus("Moskva") == "Москва"

    def test_multi_letter_mappings(self) -> None:
        """Test letters that map to several Cyrillic letters."""
        assert translit_to_rus("Jazz") == "Джазз"
        assert translit_to_rus("Xerox") == "Ксерокс"

    def test_approximations(self) -> None:
        """Test letters without a direct counterpart."""
        assert translit_to_rus("Quiz") == "Куиз"
        assert translit_to_rus("Wow") == "Вов"
        assert translit_to_rus("yes") == "юес"

    def test_cyrillic_untouched(self) -> None:
        """Test that Cyrillic text passes through."""
        assert translit_to_rus("уже русский") == "уже русский"

    def test_full_lowercase_alphabet(self) -> None:
        """Test every lower-case letter of the table."""
        assert translit_to_rus("abcdefghijklmnopqrstuvwxyz") == "абсдефгхиджклмнопкрстуввксюз"


@pytest.mark.unit
class TestTables:
    """Test the shape of the transliteration tables."""

    def test_sizes(self) -> None:
        """Test that both cases of every letter are covered."""
        assert len(LATIN_TO_CYRILLIC) == 52
        assert len(CYRILLIC_TO_LATIN) == 66

    def test_single_letter_patterns(self) -> None:
        """Test that every pattern is a single letter."""
        for pattern, replacement in LATIN_TO_CYRILLIC + CYRILLIC_TO_LATIN:
            assert len(pattern) == 1
            assert replacement

    def test_tables_are_immutable(self) -> None:
        """Test that the tables are tuples."""
        assert isinstance(LATIN_TO_CYRILLIC, tuple)
        assert isinstance(CYRILLIC_TO_LATIN, tuple)
