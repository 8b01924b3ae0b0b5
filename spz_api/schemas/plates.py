from __future__ import annotations

from dataclasses import asdict
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from spz_engine.layout import derive_display_layout
from spz_engine.models import (
    InputCharacter,
    PlateCandidate,
    PlateData,
    PlateMetadata,
    ShiftButtonState,
    ShiftDisabledReason,
)


class InputCharacterSchema(BaseModel):
    original: str
    uppercase: str
    uppercase_without_diacritics: str
    transformed: str
    is_vowel: bool = False
    is_whitespace: bool = False
    is_symbol: bool = False
    is_diacritic: bool = False
    is_latin: bool = True


class ShiftStateSchema(BaseModel):
    can_be_enabled: bool = False
    disabled_reason: Optional[ShiftDisabledReason] = None


class CandidateSchema(BaseModel):
    input: InputCharacterSchema
    alternatives: List[str] = Field(..., min_length=1)
    selected: str
    is_padding: bool = False
    is_skipped_vowel: bool = False
    word_group: int = Field(0, ge=0)
    word_group_boundary_left: bool = False
    word_group_boundary_right: bool = False
    left_shift_state: ShiftStateSchema = Field(default_factory=ShiftStateSchema)
    right_shift_state: ShiftStateSchema = Field(default_factory=ShiftStateSchema)
    last_changed: int = 0


class MetadataSchema(BaseModel):
    has_diacritics: bool = False
    has_symbols: bool = False
    has_whitespace: bool = False
    has_non_latin: bool = False
    is_valid: bool = True
    error_message: str = ""
    last_change_counter: int = 0


class PlateSchema(BaseModel):
    input: str
    candidates: List[CandidateSchema]
    metadata: MetadataSchema


class LayoutOut(BaseModel):
    vowels: List[Optional[str]]
    vowel_errors: List[str]
    plate: List[str]
    plate_errors: List[str]


class PlateOut(PlateSchema):
    plate_number: str
    layout: LayoutOut


class ProcessIn(BaseModel):
    input: str = Field("", max_length=256)
    padding_char: Optional[str] = Field(None, min_length=1, max_length=1)


class BatchIn(BaseModel):
    text: str = Field("", max_length=8192)
    max_lines: Optional[int] = Field(None, ge=1)
    padding_char: Optional[str] = Field(None, min_length=1, max_length=1)


class SelectIn(BaseModel):
    plate: PlateSchema
    index: int
    value: str


class ShiftIn(BaseModel):
    plate: PlateSchema
    index: int
    direction: Literal["left", "right"]


class AlphabetOut(BaseModel):
    valid_chars: List[str]
    numbers: List[str]
    letters: List[str]
    plate_length: int


def plate_to_out(plate: PlateData) -> PlateOut:
    layout = derive_display_layout(plate.candidates)
    return PlateOut(
        **asdict(plate),
        plate_number=plate.plate_number,
        layout=LayoutOut(
            vowels=[v.selected if v is not None else None for v in layout.vowel_row.data],
            vowel_errors=layout.vowel_row.errors,
            plate=[c.selected for c in layout.plate_row.data],
            plate_errors=layout.plate_row.errors,
        ),
    )


def _shift_state(schema: ShiftStateSchema) -> ShiftButtonState:
    return ShiftButtonState(can_be_enabled=schema.can_be_enabled, disabled_reason=schema.disabled_reason)


def plate_from_schema(schema: PlateSchema) -> PlateData:
    candidates = [
        PlateCandidate(
            input=InputCharacter(**c.input.model_dump()),
            alternatives=list(c.alternatives),
            selected=c.selected,
            is_padding=c.is_padding,
            is_skipped_vowel=c.is_skipped_vowel,
            word_group=c.word_group,
            word_group_boundary_left=c.word_group_boundary_left,
            word_group_boundary_right=c.word_group_boundary_right,
            left_shift_state=_shift_state(c.left_shift_state),
            right_shift_state=_shift_state(c.right_shift_state),
            last_changed=c.last_changed,
        )
        for c in schema.candidates
    ]
    return PlateData(
        input=schema.input,
        candidates=candidates,
        metadata=PlateMetadata(**schema.metadata.model_dump()),
    )
