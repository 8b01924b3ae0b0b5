from pydantic import BaseModel

class CounterOut(BaseModel):
    count: int
