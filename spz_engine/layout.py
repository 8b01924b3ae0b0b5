from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .constants import PLATE_LENGTH, VOWEL_ROW_SIZE
from .errors import CONSECUTIVE_VOWELS, PLATE_TOO_LONG, TOO_MANY_VOWELS
from .models import DisplayLayout, PlateCandidate, ValidationResult

log = logging.getLogger(__name__)


def derive_display_layout(candidates: Sequence[PlateCandidate]) -> DisplayLayout:
    """Split candidates into the vowel-indicator row and the plate row.

    The rows interleave: vowel slot, plate slot, vowel slot, ... A vowel slot
    holds a skipped vowel or stays empty; a plate slot takes the next visible
    candidate. A skipped vowel met on a plate turn means two skipped vowels
    sit next to each other, which is reported but not fatal.
    """
    vowels: List[Optional[PlateCandidate]] = [None] * VOWEL_ROW_SIZE
    plate: List[PlateCandidate] = []
    vowel_errors: List[str] = []
    plate_errors: List[str] = []

    idx = 0
    vowel_slot = 0
    vowel_turn = True
    while idx < len(candidates):
        c = candidates[idx]
        if vowel_turn:
            if vowel_slot >= len(vowels):
                vowels.append(None)
            if c.is_skipped_vowel:
                vowels[vowel_slot] = c
                idx += 1
            vowel_slot += 1
        elif c.is_skipped_vowel:
            vowel_errors.append(CONSECUTIVE_VOWELS)
            idx += 1
        else:
            plate.append(c)
            idx += 1
        vowel_turn = not vowel_turn

    if sum(1 for c in plate if c.selected) > PLATE_LENGTH:
        plate_errors.append(PLATE_TOO_LONG)
    if any(v is not None for v in vowels[VOWEL_ROW_SIZE:]):
        vowel_errors.append(TOO_MANY_VOWELS)

    if vowel_errors or plate_errors:
        log.debug("Layout anomalies: vowels=%s plate=%s", vowel_errors, plate_errors)

    return DisplayLayout(
        vowel_row=ValidationResult(data=vowels, errors=vowel_errors),
        plate_row=ValidationResult(data=plate, errors=plate_errors),
    )


def render_vowel_row(layout: DisplayLayout, empty: str = " ") -> str:
    return "".join(v.selected if v is not None else empty for v in layout.vowel_row.data)
