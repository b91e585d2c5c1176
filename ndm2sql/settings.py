from __future__ import annotations
import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

class Settings:
    LOG_LEVEL: str
    ENCODING: str

    def __init__(self) -> None:
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
        self.ENCODING = os.getenv("NDM2SQL_ENCODING", "utf-8")

@lru_cache
def get_settings() -> Settings:
    return Settings()
