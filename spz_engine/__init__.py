"""Czech vanity registration plate candidate derivation."""

from .batch import plates_to_text, process_lines
from .constants import PLATE_LENGTH, VALID_CHARS
from .errors import PlateError
from .layout import derive_display_layout
from .models import (
    DisplayLayout,
    InputCharacter,
    PlateCandidate,
    PlateData,
    PlateMetadata,
    ShiftButtonState,
    ShiftDisabledReason,
    ValidationResult,
    create_plate_number,
)
from .pipeline import process_input

__all__ = [
    "PLATE_LENGTH",
    "VALID_CHARS",
    "DisplayLayout",
    "InputCharacter",
    "PlateCandidate",
    "PlateData",
    "PlateError",
    "PlateMetadata",
    "ShiftButtonState",
    "ShiftDisabledReason",
    "ValidationResult",
    "create_plate_number",
    "derive_display_layout",
    "plates_to_text",
    "process_input",
    "process_lines",
]
