"""Plate-candidate derivation: raw text in, structured plate data out.

Stage order:

    classify -> build candidates -> mandatory transforms -> EL prefix
    -> vowel elision -> five-character group -> padding -> word-group
    boundaries -> mandatory transforms again -> shift states -> digit

Every stage returns a fresh candidate list. ``process_input`` never raises
for text input; failures end up in ``PlateData.metadata``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .candidates import apply_mandatory_transforms, build_candidates, resolve_padding_char
from .characters import classify_text
from .constants import PLATE_LENGTH, VALID_CHARS
from .errors import PlateError
from .models import InputCharacter, PlateCandidate, PlateData, PlateMetadata
from .numbers import ensure_digit
from .padding import add_padding
from .special_cases import handle_el_prefix, handle_five_char_group
from .ui_state import determine_shift_states, set_word_group_boundaries
from .vowels import remove_vowels

log = logging.getLogger(__name__)


def describe_input(characters: Sequence[InputCharacter]) -> PlateMetadata:
    return PlateMetadata(
        has_diacritics=any(c.is_diacritic for c in characters),
        has_symbols=any(c.is_symbol for c in characters),
        has_whitespace=any(c.is_whitespace for c in characters),
        has_non_latin=any(not c.is_latin for c in characters),
    )


def _failed(raw_input: str, metadata: PlateMetadata, error: PlateError,
            candidates: Optional[List[PlateCandidate]] = None) -> PlateData:
    metadata.fail(error)
    log.info("Plate for %r is invalid: %s", raw_input, error.name)
    if error.clears_candidates or candidates is None:
        candidates = []
    return PlateData(input=raw_input, candidates=candidates, metadata=metadata)


def process_input(
    raw_input: str,
    padding_char: Optional[str] = None,
    valid_chars: Sequence[str] = VALID_CHARS,
) -> PlateData:
    """Derive a plate candidate for ``raw_input``.

    ``padding_char`` is the caller's snapshot of the preferred padding
    character; it falls back to the first valid character.
    """
    raw_input = raw_input or ""
    padding = resolve_padding_char(padding_char, valid_chars)
    characters = classify_text(raw_input)
    metadata = describe_input(characters)

    if metadata.has_non_latin:
        return _failed(raw_input, metadata, PlateError.NON_LATIN_INPUT)

    if all(c.is_separator for c in characters):
        return PlateData(input=raw_input, candidates=[], metadata=metadata)

    candidates = build_candidates(characters)
    candidates = apply_mandatory_transforms(candidates)
    candidates = handle_el_prefix(candidates, padding, valid_chars)

    elided = remove_vowels(candidates, PLATE_LENGTH)
    if not elided.ok:
        return _failed(raw_input, metadata, elided.error)
    candidates = elided.value

    candidates = handle_five_char_group(candidates, padding, valid_chars)
    candidates = add_padding(candidates, padding, valid_chars, PLATE_LENGTH)
    candidates = set_word_group_boundaries(candidates)
    candidates = apply_mandatory_transforms(candidates)
    candidates = determine_shift_states(candidates)

    with_digit = ensure_digit(candidates)
    if not with_digit.ok:
        return _failed(raw_input, metadata, with_digit.error, with_digit.value)

    return PlateData(input=raw_input, candidates=with_digit.value, metadata=metadata)
