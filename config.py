"""Settings read from TODO_* environment variables."""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List

from infrastructure.task_storage import STORAGE_KEY


def _env_list(name: str) -> List[str]:
    raw = os.getenv(name, "")
    return [part for part in raw.replace(",", " ").split() if part]


@dataclass(frozen=True)
class Settings:
    app_title: str
    db_path: Path
    storage_key: str
    log_level: str
    cors_origins: List[str]
    host: str
    port: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        app_title=os.getenv("TODO_APP_TITLE", "To-Do List"),
        db_path=Path(os.getenv("TODO_DB_PATH", "todo.db")).expanduser(),
        storage_key=os.getenv("TODO_STORAGE_KEY", STORAGE_KEY),
        log_level=os.getenv("TODO_LOG_LEVEL", "INFO").upper(),
        cors_origins=_env_list("TODO_CORS_ORIGINS"),
        host=os.getenv("TODO_HOST", "127.0.0.1"),
        port=int(os.getenv("TODO_PORT", "8000")),
    )
