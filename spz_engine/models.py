from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Generic, Iterable, List, Optional, TypeVar

from .errors import PlateError

T = TypeVar("T")


class ShiftDisabledReason(str, enum.Enum):
    BOUNDARY_REACHED = "boundaryReached"
    NON_PADDING_CHAR_FOUND = "nonPaddingCharFound"


@dataclass(frozen=True)
class InputCharacter:
    """One typed character with its normalized forms and classification flags."""
    original: str
    uppercase: str
    uppercase_without_diacritics: str
    # mandatory digit for G/Q/W/O, otherwise uppercase_without_diacritics
    transformed: str

    is_vowel: bool = False
    is_whitespace: bool = False
    is_symbol: bool = False
    is_diacritic: bool = False
    is_latin: bool = True

    @property
    def is_separator(self) -> bool:
        return self.is_whitespace or self.is_symbol


@dataclass(frozen=True)
class ShiftButtonState:
    can_be_enabled: bool = False
    disabled_reason: Optional[ShiftDisabledReason] = None


@dataclass
class PlateCandidate:
    input: InputCharacter
    alternatives: List[str]
    selected: str
    # inserted to reach the plate length, not typed by the user
    is_padding: bool = False
    is_skipped_vowel: bool = False
    word_group: int = 0
    word_group_boundary_left: bool = False
    word_group_boundary_right: bool = False
    left_shift_state: ShiftButtonState = field(default_factory=ShiftButtonState)
    right_shift_state: ShiftButtonState = field(default_factory=ShiftButtonState)
    # editor bookkeeping, never touched by the derivation pipeline
    last_changed: int = 0

    @property
    def is_visible(self) -> bool:
        return not self.is_skipped_vowel

    def clone(self, **changes) -> "PlateCandidate":
        changes.setdefault("alternatives", list(self.alternatives))
        return replace(self, **changes)


@dataclass
class PlateMetadata:
    has_diacritics: bool = False
    has_symbols: bool = False
    has_whitespace: bool = False
    has_non_latin: bool = False
    is_valid: bool = True
    error_message: str = ""
    last_change_counter: int = 0

    def fail(self, error: PlateError) -> None:
        self.is_valid = False
        self.error_message = error.message_key


@dataclass
class PlateData:
    input: str
    candidates: List[PlateCandidate]
    metadata: PlateMetadata

    @property
    def plate_number(self) -> str:
        return create_plate_number(self.candidates)


@dataclass
class ValidationResult(Generic[T]):
    data: T
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """Outcome of a pipeline stage: a new value, or the error that stopped it."""
    value: Optional[T] = None
    error: Optional[PlateError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class DisplayLayout:
    vowel_row: ValidationResult[List[Optional[PlateCandidate]]]
    plate_row: ValidationResult[List[PlateCandidate]]


def clone_all(candidates: List[PlateCandidate]) -> List[PlateCandidate]:
    return [c.clone() for c in candidates]


def create_plate_number(candidates: Iterable[PlateCandidate]) -> str:
    return "".join(c.selected for c in candidates if c.is_visible)
