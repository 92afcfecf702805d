from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional, Union
import logging
import uuid

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "due_date")
DUE_SOON_DAYS = 2


class FilterMode(str, Enum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "FilterMode":
        """Unknown or missing modes fall back to ALL."""
        try:
            return cls(raw)
        except ValueError:
            return cls.ALL


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_task_id() -> str:
    return uuid.uuid4().hex


def parse_due_date(value: Union[date, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


@dataclass(frozen=True)
class Task:
    title: str
    due_date: date
    description: Optional[str] = None
    completed: bool = False
    id: str = field(default_factory=new_task_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)

    @classmethod
    def create(cls, title: str, description: Optional[str], due_date: Union[date, str]) -> "Task":
        now = utcnow()
        return cls(
            id=new_task_id(),
            title=title,
            description=description,
            due_date=parse_due_date(due_date),
            completed=False,
            created_at=now,
            updated_at=now,
        )

    def _touched(self) -> datetime:
        # Never move backwards, even if the wall clock does.
        return max(utcnow(), self.updated_at)

    def toggle_complete(self) -> "Task":
        return replace(self, completed=not self.completed, updated_at=self._touched())

    def update(self, patch: Mapping[str, Any]) -> "Task":
        """Overwrite the fields present in ``patch``; everything else is kept.

        Only title, description and due_date can change. A due_date that is
        not a date or an ISO ``YYYY-MM-DD`` string (None included) leaves the
        current due date in place. ``updated_at`` is refreshed even when the
        patch carries no usable field.
        """
        changes = {name: patch[name] for name in UPDATABLE_FIELDS if name in patch}
        if "due_date" in changes:
            try:
                changes["due_date"] = parse_due_date(changes["due_date"])
            except (TypeError, ValueError):
                logger.warning("Task %s: ignoring unusable due_date %r", self.id, changes["due_date"])
                del changes["due_date"]
        return replace(self, updated_at=self._touched(), **changes)

    def is_past_due(self, today: Optional[date] = None) -> bool:
        today = today or date.today()
        return self.due_date < today

    def is_due_soon(self, today: Optional[date] = None) -> bool:
        today = today or date.today()
        days_left = (self.due_date - today).days
        return 0 <= days_left <= DUE_SOON_DAYS
