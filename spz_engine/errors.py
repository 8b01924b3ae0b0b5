"""Error kinds surfaced through plate metadata and layout error lists.

Values are message keys, never user-facing text; translating them is up to
whoever renders the result.
"""

import enum


class PlateError(str, enum.Enum):
    NON_LATIN_INPUT = "Non-Latin script characters are not allowed"
    TOO_MANY_CONSONANTS = "inputSection.errors.tooManyConsonants"
    NO_POSITION_FOR_NUMBER = "inputSection.errors.noPositionForNumber"

    @property
    def message_key(self) -> str:
        return self.value

    @property
    def clears_candidates(self) -> bool:
        """Halting errors drop the candidates; the rest keep them for editing."""
        return self is not PlateError.NO_POSITION_FOR_NUMBER


CONSECUTIVE_VOWELS = "vowelIndicator.errors.consecutiveVowels"
TOO_MANY_VOWELS = "vowelIndicator.errors.tooManyVowels"
PLATE_TOO_LONG = "plateDisplay.errors.tooManyConsonants"
