from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from spz_api.db.session import get_db
from spz_api.schemas.preferences import PreferencesIn, PreferencesOut
from spz_api.services import preferences

router = APIRouter()

@router.get("/preferences", response_model=PreferencesOut)
def get_preferences(db: Session = Depends(get_db)):
    return PreferencesOut(**preferences.get_preferences(db))

@router.put("/preferences", response_model=PreferencesOut)
def update_preferences(payload: PreferencesIn, db: Session = Depends(get_db)):
    try:
        prefs = preferences.update_preferences(
            db,
            default_padding_char=payload.default_padding_char,
            theme=payload.theme,
            language=payload.language,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return PreferencesOut(**prefs)
