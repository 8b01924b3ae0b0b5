from __future__ import annotations

import logging
from typing import List, Sequence

from .candidates import create_padding_candidate
from .constants import PLATE_LENGTH, VALID_CHARS
from .models import PlateCandidate, clone_all

log = logging.getLogger(__name__)


def add_padding(
    candidates: Sequence[PlateCandidate],
    padding_char: str,
    valid_chars: Sequence[str] = VALID_CHARS,
    plate_length: int = PLATE_LENGTH,
) -> List[PlateCandidate]:
    """Fill the plate up to its length.

    One padding character goes between consecutive word groups while there is
    room, the rest is appended at the end. Padding already present (EL prefix,
    five-character group) is left where it is.
    """
    out = clone_all(list(candidates))
    if len(out) >= plate_length:
        return out

    inserted = 0
    last_group = 0
    i = 0
    while i < len(out) and len(out) < plate_length:
        current = out[i]
        if current.is_padding:
            i += 1
            continue
        if i > 0 and current.word_group != last_group:
            out.insert(i, create_padding_candidate(padding_char, valid_chars))
            inserted += 1
            i += 1
        last_group = current.word_group
        i += 1

    while len(out) < plate_length:
        out.append(create_padding_candidate(padding_char, valid_chars))
        inserted += 1

    log.debug("Inserted %d padding characters", inserted)
    return out
