import os
import sys

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "BLOCKTUI_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_db_path() -> str:
    # the board lives next to the launched program
    program_dir = os.path.dirname(os.path.abspath(sys.argv[0] or "."))
    return os.path.join(program_dir, "app.db")


class Settings(BaseModel):
    capacity: int = Field(default=5, ge=0)
    db_path: str = Field(default_factory=default_db_path)
    log_level: str = "INFO"

    @field_validator('db_path')
    @classmethod
    def validate_db_path(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('db_path must not be empty')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f'log_level must be one of {", ".join(LOG_LEVELS)}')
        return v

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "Settings":
        environ = os.environ if environ is None else environ
        values = {}
        for field in cls.model_fields:
            raw = environ.get(ENV_PREFIX + field.upper())
            if raw is not None:
                values[field] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
