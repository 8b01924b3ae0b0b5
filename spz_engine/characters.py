from __future__ import annotations

import re
import string
import unicodedata
from typing import List

from .constants import REQUIRED_MAPPINGS, VOWELS
from .models import InputCharacter

_COMBINING_MARKS_RE = re.compile(r"[\u0300-\u036f]")
_WHITESPACE_RE = re.compile(r"\s")
# Basic Latin, Latin-1 Supplement, Latin Extended-A
_LATIN_RE = re.compile(r"^[\u0000-\u017f]*$")
_SYMBOLS = frozenset(string.punctuation)


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return _COMBINING_MARKS_RE.sub("", decomposed)


def _upper(text: str) -> str:
    # one position per typed character: "ß".upper() would give two
    upper = text.upper()
    return upper if len(upper) == len(text) else text


def classify_character(char: str) -> InputCharacter:
    """Normalize one typed character and describe it.

    Never raises: characters outside the Latin blocks are only flagged, the
    caller decides what to do with them.
    """
    decomposed = unicodedata.normalize("NFD", char)
    without_diacritics = strip_diacritics(char)
    uppercase = _upper(char)
    uppercase_without_diacritics = _upper(without_diacritics)
    composed = unicodedata.normalize("NFC", char)

    return InputCharacter(
        original=char,
        uppercase=uppercase,
        uppercase_without_diacritics=uppercase_without_diacritics,
        transformed=REQUIRED_MAPPINGS.get(uppercase_without_diacritics, uppercase_without_diacritics),
        is_vowel=uppercase_without_diacritics in VOWELS,
        is_whitespace=bool(_WHITESPACE_RE.search(decomposed)),
        is_symbol=any(ch in _SYMBOLS for ch in decomposed),
        is_diacritic=uppercase != uppercase_without_diacritics,
        # checked on the typed form and on the form that reaches the plate
        is_latin=bool(_LATIN_RE.match(composed)) and bool(_LATIN_RE.match(uppercase_without_diacritics)),
    )


def classify_text(text: str) -> List[InputCharacter]:
    return [classify_character(ch) for ch in (text or "").strip()]
