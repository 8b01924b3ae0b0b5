from pydantic import BaseModel
from typing import Literal, Optional

class PreferencesOut(BaseModel):
    default_padding_char: str
    theme: Literal["light", "dark", "auto"]
    language: Literal["cs", "en"]

class PreferencesIn(BaseModel):
    # empty string resets the padding character to the first valid character
    default_padding_char: Optional[str] = None
    theme: Optional[Literal["light", "dark", "auto"]] = None
    language: Optional[Literal["cs", "en"]] = None
