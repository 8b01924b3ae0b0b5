from sqlalchemy.orm import Session
from sqlalchemy import func

from spz_api.db import models
from spz_engine.models import PlateData
from spz_engine.saved import make_saved_entry

def list_saved(db: Session) -> list[models.SavedPlate]:
    return db.query(models.SavedPlate).order_by(models.SavedPlate.position.asc(), models.SavedPlate.id.asc()).all()

def save_plate(db: Session, plate: PlateData) -> models.SavedPlate:
    entry = make_saved_entry(plate)
    last = db.query(func.max(models.SavedPlate.position)).scalar()
    row = models.SavedPlate(
        position=(last + 1) if last is not None else 0,
        input=entry.input,
        plate_number=entry.plate_number,
        vowels=entry.vowels,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row

def remove_saved(db: Session, index: int) -> None:
    rows = list_saved(db)
    if not 0 <= index < len(rows):
        raise LookupError(f"no saved plate at position {index}")
    db.delete(rows[index])
    db.commit()

def clear_saved(db: Session) -> int:
    removed = db.query(models.SavedPlate).delete()
    db.commit()
    return removed
