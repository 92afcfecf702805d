from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from application.repository import TaskRepository
from domain.entities import Task
from infrastructure.database import Database
from infrastructure.task_storage import STORAGE_KEY, TaskStorage
from interfaces.api import get_repository
from main import app


@pytest.fixture()
def db(tmp_path: Path) -> Database:
    return Database(tmp_path / "todo.db")


@pytest.fixture()
def storage(db: Database) -> TaskStorage:
    return TaskStorage(db, STORAGE_KEY)


@pytest.fixture()
def repository(storage: TaskStorage) -> TaskRepository:
    return TaskRepository(storage)


@pytest.fixture()
def client(repository: TaskRepository):
    app.dependency_overrides[get_repository] = lambda: repository
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_task():
    def _make(title="Write report", due_date=date(2025, 1, 10), description=None, completed=False):
        task = Task.create(title, description, due_date)
        return task.toggle_complete() if completed else task
    return _make
