import logging
from datetime import date
from typing import Any, List, Mapping, Optional, Union

from domain.entities import FilterMode, Task
from infrastructure.task_storage import TaskStorage

logger = logging.getLogger(__name__)


class TaskRepository:
    """CRUD and filtering over the persisted task collection.

    Every call reads the whole collection and, when it changes something,
    writes the whole collection back. A single writer is assumed.
    Missing ids are reported through the return value, never raised.
    """

    def __init__(self, storage: TaskStorage):
        self.storage = storage

    def get_all(self) -> List[Task]:
        return self.storage.load()

    def get_by_id(self, task_id: str) -> Optional[Task]:
        for task in self.storage.load():
            if task.id == task_id:
                return task
        return None

    def add(self, task: Task) -> Task:
        tasks = self.storage.load()
        tasks.append(task)
        self.storage.save(tasks)
        return task

    def create(self, title: str, description: Optional[str], due_date: Union[date, str]) -> Task:
        return self.add(Task.create(title, description, due_date))

    def update(self, task_id: str, patch: Mapping[str, Any]) -> Optional[Task]:
        return self._replace(task_id, lambda task: task.update(patch))

    def toggle_complete(self, task_id: str) -> Optional[Task]:
        return self._replace(task_id, lambda task: task.toggle_complete())

    def delete(self, task_id: str) -> bool:
        tasks = self.storage.load()
        remaining = [task for task in tasks if task.id != task_id]
        if len(remaining) == len(tasks):
            return False
        self.storage.save(remaining)
        return True

    def filter(self, mode: Union[FilterMode, str, None] = FilterMode.ALL) -> List[Task]:
        mode = FilterMode.parse(mode)
        tasks = self.storage.load()
        if mode is FilterMode.PENDING:
            return [task for task in tasks if not task.completed]
        if mode is FilterMode.COMPLETED:
            return [task for task in tasks if task.completed]
        return tasks

    def _replace(self, task_id, change) -> Optional[Task]:
        tasks = self.storage.load()
        for index, task in enumerate(tasks):
            if task.id == task_id:
                tasks[index] = change(task)
                self.storage.save(tasks)
                return tasks[index]
        return None
