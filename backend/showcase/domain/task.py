"""
Task entity - the innermost layer of the clean architecture example.

No framework dependencies: the entity validates itself and knows how to
change state; persistence is somebody else's problem.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from showcase.core.exceptions import (
    DescriptionTooLongError,
    EmptyTitleError,
    TitleTooLongError,
)

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_title(title: str) -> None:
    """Validate the task title."""
    if not title:
        raise EmptyTitleError()
    if len(title) > MAX_TITLE_LENGTH:
        raise TitleTooLongError(MAX_TITLE_LENGTH)


def validate_description(description: str) -> None:
    """Validate the task description."""
    if description and len(description) > MAX_DESCRIPTION_LENGTH:
        raise DescriptionTooLongError(MAX_DESCRIPTION_LENGTH)


@dataclass
class Task:
    """Domain entity representing a to-do item."""

    title: str = ""
    description: str = ""
    completed: bool = False
    id: Optional[int] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def new(cls, title: str, description: str = "") -> "Task":
        """Create a new, not yet persisted, task with validation."""
        validate_title(title)
        validate_description(description)
        now = utcnow()
        return cls(
            title=title,
            description=description or "",
            completed=False,
            created_at=now,
            updated_at=now,
        )

    def mark_as_completed(self) -> None:
        self.completed = True
        self.updated_at = utcnow()

    def mark_as_incomplete(self) -> None:
        self.completed = False
        self.updated_at = utcnow()

    def update(self, title: str, description: str, completed: bool) -> None:
        """Replace title, description and completion flag.

        Both fields are validated before anything is assigned, so a failed
        update leaves the task untouched.
        """
        validate_title(title)
        validate_description(description)

        self.title = title
        self.description = description or ""
        self.completed = completed
        self.updated_at = utcnow()
