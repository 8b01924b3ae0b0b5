from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from spz_api.db.session import get_db
from spz_api.schemas.plates import plate_from_schema
from spz_api.schemas.saved import SavedPlateOut, SavePlateIn
from spz_api.services import saved_plates

router = APIRouter()

def _out(rows):
    return [
        SavedPlateOut(
            position=idx,
            input=row.input,
            plate_number=row.plate_number,
            vowels=row.vowels,
            created_at=row.created_at,
        )
        for idx, row in enumerate(rows)
    ]

@router.get("/saved", response_model=list[SavedPlateOut])
def list_saved(db: Session = Depends(get_db)):
    return _out(saved_plates.list_saved(db))

@router.post("/saved", response_model=list[SavedPlateOut])
def save(payload: SavePlateIn, db: Session = Depends(get_db)):
    try:
        saved_plates.save_plate(db, plate_from_schema(payload.plate))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _out(saved_plates.list_saved(db))

@router.delete("/saved/{position}", response_model=list[SavedPlateOut])
def remove(position: int, db: Session = Depends(get_db)):
    try:
        saved_plates.remove_saved(db, position)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _out(saved_plates.list_saved(db))

@router.delete("/saved")
def clear(db: Session = Depends(get_db)):
    removed = saved_plates.clear_saved(db)
    return {"ok": True, "removed": removed}
