from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .constants import VALID_CHARS
from .models import PlateData
from .pipeline import process_input


def split_lines(text: str, max_lines: Optional[int] = None) -> List[str]:
    lines = [line.strip() for line in (text or "").splitlines()]
    lines = [line for line in lines if line]
    if max_lines is not None:
        lines = lines[:max(max_lines, 0)]
    return lines


def process_lines(
    text: str,
    max_lines: Optional[int] = None,
    padding_char: Optional[str] = None,
    valid_chars: Sequence[str] = VALID_CHARS,
) -> List[PlateData]:
    """One independent plate per non-empty line, in input order."""
    return [process_input(line, padding_char, valid_chars) for line in split_lines(text, max_lines)]


def plates_to_text(plates: Iterable[PlateData]) -> str:
    return "\n".join(plate.input for plate in plates)
