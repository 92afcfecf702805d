from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain.entities import Task


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TaskRecord(BaseModel):
    """Stored form of a task, one element of the serialized collection."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: Optional[str] = None
    due_date: date = Field(alias="dueDate")
    completed: bool = False
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_task(cls, task: Task) -> "TaskRecord":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            completed=self.completed,
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None
    due_date: date

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None


class TaskUpdate(BaseModel):
    """Partial update; only the fields sent by the client are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None

    @model_validator(mode="after")
    def required_fields_not_null(self) -> "TaskUpdate":
        for name in ("title", "due_date"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_patch(self) -> dict:
        return self.model_dump(exclude_unset=True)


class TaskResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    due_date: date
    completed: bool
    created_at: datetime
    updated_at: datetime
    overdue: bool
    due_soon: bool

    @classmethod
    def from_task(cls, task: Task, today: Optional[date] = None) -> "TaskResponse":
        pending = not task.completed
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
            overdue=pending and task.is_past_due(today),
            due_soon=pending and task.is_due_soon(today),
        )
