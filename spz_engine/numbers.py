from __future__ import annotations

import logging
import string
from typing import List, Optional, Sequence

from .constants import OPTIONAL_MAPPINGS, REQUIRED_MAPPINGS
from .errors import PlateError
from .models import PlateCandidate, StageResult, clone_all

log = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)


def is_digit(value: str) -> bool:
    return bool(value) and all(ch in _DIGITS for ch in value)


def has_digit(candidates: Sequence[PlateCandidate]) -> bool:
    return any(ch in _DIGITS for c in candidates if c.is_visible for ch in c.selected)


def find_digit(candidate: PlateCandidate) -> Optional[str]:
    """Digit this position can show: selected, an alternative, or its letter mapping."""
    if is_digit(candidate.selected):
        return candidate.selected
    for alt in candidate.alternatives:
        if is_digit(alt):
            return alt
    if not candidate.is_padding:
        key = candidate.input.uppercase_without_diacritics
        mapping = REQUIRED_MAPPINGS.get(key) or OPTIONAL_MAPPINGS.get(key)
        if mapping and is_digit(mapping):
            return mapping
    return None


def ensure_digit(candidates: Sequence[PlateCandidate]) -> StageResult[List[PlateCandidate]]:
    """Make sure at least one visible position shows a digit.

    Padding is tried first, rightmost first; then typed characters from the
    left. Skipped vowels are never considered.
    """
    out = clone_all(list(candidates))
    if has_digit(out):
        return StageResult(value=out)

    visible = [idx for idx, c in enumerate(out) if c.is_visible]

    for idx in reversed(visible):
        if not out[idx].is_padding:
            continue
        digit = find_digit(out[idx])
        if digit:
            out[idx].selected = digit
            log.debug("Digit %s placed on padding at %d", digit, idx)
            return StageResult(value=out)

    for idx in visible:
        digit = find_digit(out[idx])
        if digit:
            out[idx].selected = digit
            log.debug("Digit %s mapped from %r at %d", digit, out[idx].input.original, idx)
            return StageResult(value=out)

    return StageResult(value=out, error=PlateError.NO_POSITION_FOR_NUMBER)
