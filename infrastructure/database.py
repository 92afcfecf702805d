import logging
import sqlite3
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class Database:
    """Durable key-value slots kept in a single SQLite table."""

    def __init__(self, db_name: Union[str, Path] = "todo.db"):
        self.db_name = str(db_name)
        self._init_db()

    def _init_db(self):
        Path(self.db_name).parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(self.db_name) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()
        logger.debug("Key-value storage ready at %s", self.db_name)

    def get_item(self, key: str) -> Optional[str]:
        raw = self.get_raw_item(key)
        return raw.decode("utf-8", errors="replace") if raw is not None else None

    def get_raw_item(self, key: str) -> Optional[bytes]:
        """Stored value as undecoded bytes, whatever the column holds."""
        with sqlite3.connect(self.db_name) as conn:
            conn.text_factory = bytes
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM storage WHERE key = ?", (key,))
            row = cursor.fetchone()
            if row is None:
                return None
            value = row[0]
            if isinstance(value, bytes):
                return value
            return str(value).encode("utf-8")

    def set_item(self, key: str, value: str) -> None:
        with sqlite3.connect(self.db_name) as conn:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO storage (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value)
            )
            conn.commit()

    def remove_item(self, key: str) -> bool:
        with sqlite3.connect(self.db_name) as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM storage WHERE key = ?", (key,))
            conn.commit()
            return cursor.rowcount > 0
