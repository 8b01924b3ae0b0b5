"""Structural rewrites applied before generic padding.

EL prefix
    "EL" at the start of a full plate reads like a special-series prefix, so
    the plate must not start with it. A full-length input turns the E into 3,
    a 7-character input gets a leading 0, anything shorter gets a leading
    padding character.

Five-character group
    A lone 5-character word is right-aligned behind three padding characters.
    A 1-character word plus a 5-character word becomes "X" + two padding
    characters + the 5-character word at the end.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from .candidates import create_padding_candidate
from .constants import (
    EL_FULL_LENGTH_DIGIT,
    EL_PADDING_DIGIT,
    EL_PREFIX,
    FIVE_CHAR_GAP,
    FIVE_CHAR_GROUP,
    PLATE_LENGTH,
    VALID_CHARS,
)
from .models import PlateCandidate, clone_all

log = logging.getLogger(__name__)


def handle_el_prefix(
    candidates: Sequence[PlateCandidate],
    padding_char: str,
    valid_chars: Sequence[str] = VALID_CHARS,
) -> List[PlateCandidate]:
    out = clone_all(list(candidates))
    if len(out) < 2 or "".join(c.selected for c in out[:2]) != EL_PREFIX:
        return out

    if len(out) == PLATE_LENGTH:
        out[0] = out[0].clone(selected=EL_FULL_LENGTH_DIGIT, alternatives=[EL_FULL_LENGTH_DIGIT])
        log.debug("EL prefix on full plate: E forced to %s", EL_FULL_LENGTH_DIGIT)
    elif len(out) == PLATE_LENGTH - 1:
        out.insert(0, create_padding_candidate(padding_char, valid_chars, selected=EL_PADDING_DIGIT))
        log.debug("EL prefix one short: leading %s inserted", EL_PADDING_DIGIT)
    else:
        out.insert(0, create_padding_candidate(padding_char, valid_chars))
        log.debug("EL prefix: leading padding inserted (length=%d)", len(candidates))
    return out


def _visible_groups(candidates: Sequence[PlateCandidate]) -> Dict[int, List[int]]:
    """Word group -> indices of its visible, non-padding members, in order."""
    groups: Dict[int, List[int]] = {}
    for idx, c in enumerate(candidates):
        if c.is_padding or c.is_skipped_vowel:
            continue
        groups.setdefault(c.word_group, []).append(idx)
    return groups


def handle_five_char_group(
    candidates: Sequence[PlateCandidate],
    padding_char: str,
    valid_chars: Sequence[str] = VALID_CHARS,
) -> List[PlateCandidate]:
    out = clone_all(list(candidates))
    groups = _visible_groups(out)
    five = [group for group, members in groups.items() if len(members) == FIVE_CHAR_GROUP]
    if len(five) != 1:
        return out

    five_group = five[0]
    others = [group for group in groups if group != five_group]
    visible_count = sum(1 for c in out if c.is_visible)

    if not others:
        while visible_count < PLATE_LENGTH:
            out.insert(0, create_padding_candidate(padding_char, valid_chars))
            visible_count += 1
        log.debug("Standalone five-character group right-aligned")
        return out

    if len(others) == 1 and len(groups[others[0]]) == 1:
        single_group = others[0]
        moved = [c for c in out if not c.is_padding and c.word_group == five_group]
        rest = [c for c in out if c.is_padding or c.word_group != five_group]
        single_idx = next(
            idx for idx, c in enumerate(rest) if not c.is_padding and c.word_group == single_group
        )
        gap = min(FIVE_CHAR_GAP, PLATE_LENGTH - visible_count)
        padding = [create_padding_candidate(padding_char, valid_chars) for _ in range(gap)]
        log.debug("Five-character group moved behind single character with %d padding", gap)
        return rest[: single_idx + 1] + padding + rest[single_idx + 1:] + moved

    return out
