"""Editor affordances derived from the candidate sequence.

Nothing here changes what the plate reads; it only tells the editor where
word groups start and end and which characters may be shifted into an
adjacent padding slot.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .models import PlateCandidate, ShiftButtonState, ShiftDisabledReason, clone_all

_ENABLED = ShiftButtonState(can_be_enabled=True)
_BOUNDARY = ShiftButtonState(disabled_reason=ShiftDisabledReason.BOUNDARY_REACHED)
_BLOCKED = ShiftButtonState(disabled_reason=ShiftDisabledReason.NON_PADDING_CHAR_FOUND)


def set_word_group_boundaries(candidates: Sequence[PlateCandidate]) -> List[PlateCandidate]:
    out = clone_all(list(candidates))
    for c in out:
        c.word_group_boundary_left = False
        c.word_group_boundary_right = False

    current_group: Optional[int] = None
    previous: Optional[PlateCandidate] = None
    for c in out:
        if c.is_padding or c.is_skipped_vowel:
            continue
        if current_group is None:
            c.word_group_boundary_left = True
        elif c.word_group != current_group:
            previous.word_group_boundary_right = True
            c.word_group_boundary_left = True
        current_group = c.word_group
        previous = c

    if previous is not None:
        previous.word_group_boundary_right = True
    return out


def _shift_state(neighbour: Optional[PlateCandidate]) -> ShiftButtonState:
    if neighbour is None:
        return _BOUNDARY
    if neighbour.is_padding:
        return _ENABLED
    return _BLOCKED


def determine_shift_states(candidates: Sequence[PlateCandidate]) -> List[PlateCandidate]:
    out = clone_all(list(candidates))
    last = len(out) - 1
    for idx, c in enumerate(out):
        if c.is_padding or c.is_skipped_vowel:
            c.left_shift_state = ShiftButtonState()
            c.right_shift_state = ShiftButtonState()
            continue
        c.left_shift_state = _shift_state(out[idx - 1] if idx > 0 else None)
        c.right_shift_state = _shift_state(out[idx + 1] if idx < last else None)
    return out
