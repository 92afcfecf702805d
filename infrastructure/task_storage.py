import logging
from typing import List, Sequence

from pydantic import TypeAdapter, ValidationError

from domain.entities import Task
from infrastructure.database import Database
from schemas.task import TaskRecord

logger = logging.getLogger(__name__)

STORAGE_KEY = "taskManager_tasks"

_records = TypeAdapter(List[TaskRecord])


class TaskStorage:
    """Loads and saves the whole task collection as one JSON blob."""

    def __init__(self, db: Database, storage_key: str = STORAGE_KEY):
        self.db = db
        self.storage_key = storage_key

    def load(self) -> List[Task]:
        """Return the stored tasks in storage order.

        A missing slot is an empty collection. So is a blob that does not
        validate (bad UTF-8 included); the slot is left as-is until the next
        save replaces it.
        """
        raw = self.db.get_raw_item(self.storage_key)
        if raw is None:
            return []
        try:
            records = _records.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Ignoring malformed task data under key %r (%d errors): %s",
                self.storage_key, e.error_count(), e.errors()[0]["msg"]
            )
            return []
        tasks = [record.to_task() for record in records]
        logger.debug("Loaded %d tasks from %r", len(tasks), self.storage_key)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        records = [TaskRecord.from_task(task) for task in tasks]
        blob = _records.dump_json(records, by_alias=True).decode("utf-8")
        self.db.set_item(self.storage_key, blob)
        logger.debug("Saved %d tasks to %r", len(records), self.storage_key)
