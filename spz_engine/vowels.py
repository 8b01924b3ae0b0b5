from __future__ import annotations

import logging
from typing import List, Sequence

from .constants import PLATE_LENGTH
from .errors import PlateError
from .models import PlateCandidate, StageResult, clone_all

log = logging.getLogger(__name__)


def remove_vowels(
    candidates: Sequence[PlateCandidate],
    plate_length: int = PLATE_LENGTH,
) -> StageResult[List[PlateCandidate]]:
    """Mark vowels as skipped until the sequence fits on the plate.

    Scans right to left twice. The first pass leaves a vowel alone when its
    right neighbour was just skipped, the second pass takes whatever vowels
    remain. Candidates are only marked, never removed.
    """
    out = clone_all(list(candidates))
    if len(out) <= plate_length:
        return StageResult(value=out)

    remaining = len(out) - plate_length

    for i in range(len(out) - 1, -1, -1):
        if remaining <= 0:
            break
        if not out[i].input.is_vowel:
            continue
        right_skipped = i < len(out) - 1 and out[i + 1].is_skipped_vowel
        if not right_skipped:
            out[i].is_skipped_vowel = True
            remaining -= 1

    for i in range(len(out) - 1, -1, -1):
        if remaining <= 0:
            break
        if out[i].input.is_vowel and not out[i].is_skipped_vowel:
            out[i].is_skipped_vowel = True
            remaining -= 1

    if remaining > 0:
        log.debug("Cannot fit %d characters: %d more vowels needed", len(out), remaining)
        return StageResult(error=PlateError.TOO_MANY_CONSONANTS)

    log.debug("Skipped %d vowels", len(out) - plate_length)
    return StageResult(value=out)
