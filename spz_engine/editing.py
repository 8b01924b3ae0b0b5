"""Edits the plate editor applies to an already derived plate.

Each operation returns a new PlateData and bumps the plate's change
counter; the candidate touched gets the new counter value in
``last_changed``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Sequence

from .candidates import mandatory_digit
from .constants import VALID_CHARS
from .errors import PlateError
from .models import PlateData, clone_all
from .numbers import has_digit, is_digit
from .ui_state import determine_shift_states, set_word_group_boundaries

log = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"


def separate_plate_characters(alternatives: Sequence[str]) -> Dict[str, List[str]]:
    return {
        "numbers": [alt for alt in alternatives if is_digit(alt)],
        "letters": [alt for alt in alternatives if not is_digit(alt)],
    }


def revalidate(plate: PlateData) -> PlateData:
    if not plate.candidates:
        return plate
    metadata = replace(plate.metadata, is_valid=True, error_message="")
    if not has_digit(plate.candidates):
        metadata.fail(PlateError.NO_POSITION_FOR_NUMBER)
    return PlateData(input=plate.input, candidates=plate.candidates, metadata=metadata)


def _check_index(plate: PlateData, index: int) -> None:
    if not 0 <= index < len(plate.candidates):
        raise ValueError(f"no plate position {index}")


def select_character(
    plate: PlateData,
    index: int,
    value: str,
    valid_chars: Sequence[str] = VALID_CHARS,
) -> PlateData:
    _check_index(plate, index)
    value = (value or "").upper()
    if len(value) != 1 or value not in valid_chars:
        raise ValueError(f"{value!r} is not a valid plate character")

    target = plate.candidates[index]
    forced = mandatory_digit(target)
    if forced and value != forced:
        raise ValueError(f"position {index} can only hold {forced}")

    counter = plate.metadata.last_change_counter + 1
    candidates = clone_all(plate.candidates)
    candidates[index].selected = value
    candidates[index].last_changed = counter
    metadata = replace(plate.metadata, last_change_counter=counter)
    log.debug("Position %d set to %s", index, value)
    return revalidate(PlateData(input=plate.input, candidates=candidates, metadata=metadata))


def shift_candidate(plate: PlateData, index: int, direction: str) -> PlateData:
    """Swap a typed character with the padding slot next to it.

    Shift states are derived again from the candidate sequence; the flags
    stored on the incoming plate are not trusted.
    """
    _check_index(plate, index)
    if direction not in (LEFT, RIGHT):
        raise ValueError(f"unknown shift direction {direction!r}")

    candidates = determine_shift_states(set_word_group_boundaries(plate.candidates))
    target = candidates[index]
    state = target.left_shift_state if direction == LEFT else target.right_shift_state
    other = index - 1 if direction == LEFT else index + 1
    if not state.can_be_enabled or not 0 <= other < len(candidates) or not candidates[other].is_padding:
        reason = state.disabled_reason.value if state.disabled_reason else "notShiftable"
        raise ValueError(f"cannot shift position {index} {direction}: {reason}")

    counter = plate.metadata.last_change_counter + 1
    candidates[index], candidates[other] = candidates[other], candidates[index]
    candidates[other].last_changed = counter
    candidates = determine_shift_states(set_word_group_boundaries(candidates))

    metadata = replace(plate.metadata, last_change_counter=counter)
    log.debug("Position %d shifted %s", index, direction)
    return revalidate(PlateData(input=plate.input, candidates=candidates, metadata=metadata))
