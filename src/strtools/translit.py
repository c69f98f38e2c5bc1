#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/strtools/translit.py
"""Latin and Cyrillic transliteration.

Both directions use a fixed, ordered table of ``(pattern, replacement)``
pairs. Pairs are applied one after another as global replacements over
the intermediate result, so the table order is part of the behavior.
Case is preserved: upper-case letters have their own pairs.

Examples
--------
    >>> translit_to_eng("Привет")
    'Privet'
    >>> translit_to_rus("Jazz")
    'Джазз'

"""

from __future__ import annotations

from typing import Sequence

LATIN_TO_CYRILLIC: tuple[tuple[str, str], ...] = (
    ("A", "А"),
    ("B", "Б"),
    ("C", "С"),
    ("D", "Д"),
    ("E", "Е"),
    ("F", "Ф"),
    ("G", "Г"),
    ("H", "Х"),
    ("I", "И"),
    ("J", "Дж"),
    ("K", "К"),
    ("L", "Л"),
    ("M", "М"),
    ("N", "Н"),
    ("O", "О"),
    ("P", "П"),
    ("Q", "К"),
    ("R", "Р"),
    ("S", "С"),
    ("T", "Т"),
    ("U", "У"),
    ("V", "В"),
    ("W", "В"),
    ("X", "Кс"),
    ("Y", "Ю"),
    ("Z", "З"),
    ("a", "а"),
    ("b", "б"),
    ("c", "с"),
    ("d", "д"),
    ("e", "е"),
    ("f", "ф"),
    ("g", "г"),
    ("h", "х"),
    ("i", "и"),
    ("j", "дж"),
    ("k", "к"),
    ("l", "л"),
    ("m", "м"),
    ("n", "н"),
    ("o", "о"),
    ("p", "п"),
    ("q", "к"),
    ("r", "р"),
    ("s", "с"),
    ("t", "т"),
    ("u", "у"),
    ("v", "в"),
    ("w", "в"),
    ("x", "кс"),
    ("y", "ю"),
    ("z", "з"),
)

CYRILLIC_TO_LATIN: tuple[tuple[str, str], ...] = (
    ("А", "A"),
    ("Б", "B"),
    ("В", "V"),
    ("Г", "G"),
    ("Д", "D"),
    ("Е", "E"),
    ("Ё", "Yo"),
    ("Ж", "Zh"),
    ("З", "Z"),
    ("И", "I"),
    ("Й", "I"),
    ("К", "K"),
    ("Л", "L"),
    ("М", "M"),
    ("Н", "N"),
    ("О", "O"),
    ("П", "P"),
    ("Р", "R"),
    ("С", "S"),
    ("Т", "T"),
    ("У", "U"),
    ("Ф", "F"),
    ("Х", "H"),
    ("Ц", "C"),
    ("Ч", "Ch"),
    ("Ш", "Sh"),
    ("Щ", "Sch"),
    ("Ъ", "'"),
    ("Ы", "Y"),
    ("Ь", "'"),
    ("Э", "E"),
    ("Ю", "Yu"),
    ("Я", "Ya"),
    ("а", "a"),
    ("б", "b"),
    ("в", "v"),
    ("г", "g"),
    ("д", "d"),
    ("е", "e"),
    ("ё", "yo"),
    ("ж", "zh"),
    ("з", "z"),
    ("и", "i"),
    ("й", "i"),
    ("к", "k"),
    ("л", "l"),
    ("м", "m"),
    ("н", "n"),
    ("о", "o"),
    ("п", "p"),
    ("р", "r"),
    ("с", "s"),
    ("т", "t"),
    ("у", "u"),
    ("ф", "f"),
    ("х", "h"),
    ("ц", "c"),
    ("ч", "ch"),
    ("ш", "sh"),
    ("щ", "sch"),
    ("ъ", "'"),
    ("ы", "y"),
    ("ь", "'"),
    ("э", "e"),
    ("ю", "yu"),
    ("я", "ya"),
)


def _apply_table(text: str, table: Sequence[tuple[str, str]]) -> str:
    for pattern, replacement in table:
        text = text.replace(pattern, replacement)
    return text


def translit_to_rus(text: str) -> str:
    """Transliterate Latin letters in ``text`` to Cyrillic."""
    return _apply_table(text, LATIN_TO_CYRILLIC)


def translit_to_eng(text: str) -> str:
    """Transliterate Cyrillic letters in ``text`` to Latin."""
    return _apply_table(text, CYRILLIC_TO_LATIN)
