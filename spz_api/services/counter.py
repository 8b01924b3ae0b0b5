from sqlalchemy.orm import Session

from spz_api.db import models

VISITS = "visits"

def get_count(db: Session, name: str = VISITS) -> int:
    counter = db.query(models.Counter).filter(models.Counter.name == name).first()
    return counter.count if counter else 0

def increment(db: Session, name: str = VISITS) -> int:
    counter = db.query(models.Counter).filter(models.Counter.name == name).first()
    if not counter:
        counter = models.Counter(name=name, count=0)
        db.add(counter)
    counter.count = (counter.count or 0) + 1
    db.commit()
    return counter.count
