import json
from pydantic_settings import BaseSettings

from spz_engine.constants import VALID_CHARS


class Settings(BaseSettings):
    database_url: str = "sqlite:///./spz.db"
    cors_origins: str = "http://localhost:5173,http://localhost:4173"
    valid_chars: str = VALID_CHARS
    default_padding_char: str = ""
    max_batch_lines: int = 20
    log_level: str = "INFO"

    @property
    def cors_origins_list(self):
        if not self.cors_origins:
            return []
        origins = self.cors_origins.strip()
        if not origins:
            return []
        if origins.startswith("["):
            try:
                parsed = json.loads(origins)
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, list):
                return [str(item).strip() for item in parsed if str(item).strip()]
        return [x.strip() for x in origins.split(",") if x.strip()]

    @property
    def fallback_padding_char(self) -> str:
        if self.default_padding_char and self.default_padding_char in self.valid_chars:
            return self.default_padding_char
        return self.valid_chars[0]

    class Config:
        env_prefix = ""
        case_sensitive = False

settings = Settings()
