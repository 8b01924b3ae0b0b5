import logging
from datetime import datetime
from sqlalchemy.orm import Session

from spz_api.core.config import settings
from spz_api.db import models

log = logging.getLogger(__name__)

PADDING_KEY = "defaultPaddingChar"
THEME_KEY = "theme"
LANGUAGE_KEY = "language"

THEMES = ("light", "dark", "auto")
LANGUAGES = ("cs", "en")

def _stored(db: Session) -> dict:
    return {p.key: p.value for p in db.query(models.Preference).all()}

def _put(db: Session, key: str, value: str | None):
    pref = db.query(models.Preference).filter(models.Preference.key == key).first()
    if not value:
        if pref:
            db.delete(pref)
        return
    if pref:
        pref.value = value
        pref.updated_at = datetime.utcnow()
    else:
        db.add(models.Preference(key=key, value=value))

def get_padding_char(db: Session) -> str:
    """Snapshot of the preferred padding character for one pipeline run"""
    value = _stored(db).get(PADDING_KEY)
    if value and value in settings.valid_chars:
        return value
    if value:
        log.warning("Stored padding character %r is not valid; using %r", value, settings.fallback_padding_char)
    return settings.fallback_padding_char

def get_preferences(db: Session) -> dict:
    stored = _stored(db)
    theme = stored.get(THEME_KEY, "auto")
    if theme not in THEMES:
        log.warning("Stored theme %r is not valid; using auto", theme)
        theme = "auto"
    language = stored.get(LANGUAGE_KEY, "cs")
    if language not in LANGUAGES:
        log.warning("Stored language %r is not valid; using cs", language)
        language = "cs"
    return {
        "default_padding_char": get_padding_char(db),
        "theme": theme,
        "language": language,
    }

def update_preferences(db: Session, default_padding_char=None, theme=None, language=None) -> dict:
    if default_padding_char is not None:
        value = default_padding_char.strip().upper()
        if value and (len(value) != 1 or value not in settings.valid_chars):
            raise ValueError(f"{default_padding_char!r} is not a valid plate character")
        _put(db, PADDING_KEY, value)
    if theme is not None:
        if theme not in THEMES:
            raise ValueError(f"unknown theme {theme!r}")
        _put(db, THEME_KEY, theme)
    if language is not None:
        if language not in LANGUAGES:
            raise ValueError(f"unsupported language {language!r}")
        _put(db, LANGUAGE_KEY, language)
    db.commit()
    return get_preferences(db)
