"""
Runtime settings, read from the environment (and a local .env file).
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=3001, ge=1, le=65535)
    data_dir: Path = Path("initial-data")
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def load_settings() -> Settings:
    values = {
        "host": os.getenv("STOREFRONT_HOST"),
        "port": os.getenv("STOREFRONT_PORT"),
        "data_dir": os.getenv("STOREFRONT_DATA_DIR"),
        "log_level": os.getenv("STOREFRONT_LOG_LEVEL"),
    }
    return Settings(**{k: v for k, v in values.items() if v})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
