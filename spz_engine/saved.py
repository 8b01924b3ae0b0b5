from __future__ import annotations

from dataclasses import dataclass

from .layout import derive_display_layout, render_vowel_row
from .models import PlateData


@dataclass(frozen=True)
class SavedPlateEntry:
    input: str
    plate_number: str
    # vowel-indicator row, a space for each empty slot
    vowels: str


def make_saved_entry(plate: PlateData) -> SavedPlateEntry:
    if not plate.candidates or not plate.metadata.is_valid:
        raise ValueError(f"plate for {plate.input!r} is not valid and cannot be saved")
    layout = derive_display_layout(plate.candidates)
    return SavedPlateEntry(
        input=plate.input,
        plate_number=plate.plate_number,
        vowels=render_vowel_row(layout).rstrip(),
    )
