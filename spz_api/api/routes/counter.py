from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from spz_api.db.session import get_db
from spz_api.schemas.counter import CounterOut
from spz_api.services import counter

router = APIRouter()

@router.get("/counter", response_model=CounterOut)
def get_counter(db: Session = Depends(get_db)):
    return CounterOut(count=counter.get_count(db))

@router.post("/counter", response_model=CounterOut)
def increment_counter(db: Session = Depends(get_db)):
    return CounterOut(count=counter.increment(db))
