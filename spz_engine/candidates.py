from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .constants import OPTIONAL_MAPPINGS, REQUIRED_MAPPINGS, VALID_CHARS
from .models import InputCharacter, PlateCandidate

log = logging.getLogger(__name__)


def create_alternatives(char: InputCharacter) -> List[str]:
    """Transformed character first, then its optional digit if it differs."""
    alternatives = [char.transformed]
    optional = OPTIONAL_MAPPINGS.get(char.uppercase_without_diacritics)
    if optional and optional != char.transformed:
        alternatives.append(optional)
    return alternatives


def create_input_candidate(char: InputCharacter, word_group: int = 0) -> PlateCandidate:
    required = REQUIRED_MAPPINGS.get(char.uppercase_without_diacritics)
    if required:
        return PlateCandidate(input=char, alternatives=[required], selected=required, word_group=word_group)
    return PlateCandidate(
        input=char,
        alternatives=create_alternatives(char),
        selected=char.transformed,
        word_group=word_group,
    )


def resolve_padding_char(preferred: Optional[str], valid_chars: Sequence[str] = VALID_CHARS) -> str:
    if preferred and preferred in valid_chars:
        return preferred
    if preferred:
        log.warning("Padding character %r is not a valid plate character; using %r", preferred, valid_chars[0])
    return valid_chars[0]


def create_padding_candidate(
    padding_char: str,
    valid_chars: Sequence[str] = VALID_CHARS,
    selected: Optional[str] = None,
) -> PlateCandidate:
    synthetic = InputCharacter(
        original=padding_char,
        uppercase=padding_char,
        uppercase_without_diacritics=padding_char,
        transformed=padding_char,
    )
    return PlateCandidate(
        input=synthetic,
        alternatives=list(valid_chars),
        selected=selected or padding_char,
        is_padding=True,
    )


def build_candidates(characters: Iterable[InputCharacter]) -> List[PlateCandidate]:
    """Turn classified characters into candidates, one word group per separator run.

    Leading separators are dropped; every later run of whitespace/symbols
    starts a new word group once, however long the run is.
    """
    candidates: List[PlateCandidate] = []
    word_group = 0
    previous_was_char = False

    for char in characters:
        if char.is_separator:
            if previous_was_char:
                word_group += 1
            previous_was_char = False
            continue
        previous_was_char = True
        candidates.append(create_input_candidate(char, word_group))

    return candidates


def mandatory_digit(candidate: PlateCandidate) -> Optional[str]:
    """Forced digit for a typed G/Q/W/O, None for everything else."""
    if candidate.is_padding:
        return None
    return REQUIRED_MAPPINGS.get(candidate.input.uppercase_without_diacritics)


def is_mandatory(candidate: PlateCandidate) -> bool:
    return mandatory_digit(candidate) is not None


def apply_mandatory_transforms(candidates: Sequence[PlateCandidate]) -> List[PlateCandidate]:
    out: List[PlateCandidate] = []
    for c in candidates:
        required = mandatory_digit(c)
        if required:
            out.append(c.clone(selected=required, alternatives=[required]))
        else:
            out.append(c.clone())
    return out
