from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from spz_api.core.config import settings
from spz_api.db.session import get_db
from spz_api.schemas.plates import (
    AlphabetOut,
    BatchIn,
    PlateOut,
    ProcessIn,
    SelectIn,
    ShiftIn,
    plate_from_schema,
    plate_to_out,
)
from spz_api.services.preferences import get_padding_char
from spz_engine.batch import process_lines
from spz_engine.constants import PLATE_LENGTH
from spz_engine.editing import select_character, separate_plate_characters, shift_candidate
from spz_engine.pipeline import process_input

router = APIRouter()

def _padding_char(requested: Optional[str], db: Session) -> str:
    if requested:
        return requested.upper()
    return get_padding_char(db)

@router.post("/plates/process", response_model=PlateOut)
def process_plate(payload: ProcessIn, db: Session = Depends(get_db)):
    plate = process_input(payload.input, _padding_char(payload.padding_char, db), settings.valid_chars)
    return plate_to_out(plate)

@router.post("/plates/batch", response_model=list[PlateOut])
def process_batch(payload: BatchIn, db: Session = Depends(get_db)):
    max_lines = min(payload.max_lines or settings.max_batch_lines, settings.max_batch_lines)
    plates = process_lines(payload.text, max_lines, _padding_char(payload.padding_char, db), settings.valid_chars)
    return [plate_to_out(p) for p in plates]

@router.post("/plates/select", response_model=PlateOut)
def select(payload: SelectIn):
    try:
        plate = select_character(plate_from_schema(payload.plate), payload.index, payload.value, settings.valid_chars)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return plate_to_out(plate)

@router.post("/plates/shift", response_model=PlateOut)
def shift(payload: ShiftIn):
    try:
        plate = shift_candidate(plate_from_schema(payload.plate), payload.index, payload.direction)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return plate_to_out(plate)

@router.get("/plates/alphabet", response_model=AlphabetOut)
def alphabet():
    chars = list(settings.valid_chars)
    groups = separate_plate_characters(chars)
    return AlphabetOut(valid_chars=chars, numbers=groups["numbers"], letters=groups["letters"], plate_length=PLATE_LENGTH)
