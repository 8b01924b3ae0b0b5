from pydantic import BaseModel
from datetime import datetime

from spz_api.schemas.plates import PlateSchema

class SavedPlateOut(BaseModel):
    position: int
    input: str
    plate_number: str
    vowels: str
    created_at: datetime

class SavePlateIn(BaseModel):
    plate: PlateSchema
