"""Alphabet, character mappings and plate geometry."""

from typing import Dict, FrozenSet

PLATE_LENGTH = 8

# 26 letters minus G, O, Q, W followed by the ten digits
VALID_CHARS = "ABCDEFHIJKLMNPRSTUVXYZ0123456789"

# Letters that never appear on a plate and always become a digit.
REQUIRED_MAPPINGS: Dict[str, str] = {
    "G": "6",
    "Q": "6",
    "W": "3",
    "O": "0",
}

# Letters offered a digit alternative, used only when a digit is needed.
OPTIONAL_MAPPINGS: Dict[str, str] = {
    "I": "1",
    "S": "5",
    "A": "4",
    "B": "8",
    "E": "3",
}

VOWELS: FrozenSet[str] = frozenset("AEIOUY")

EL_PREFIX = "EL"
EL_PADDING_DIGIT = "0"
EL_FULL_LENGTH_DIGIT = "3"

FIVE_CHAR_GROUP = 5
FIVE_CHAR_GAP = 2

VOWEL_ROW_SIZE = PLATE_LENGTH + 1
