"""
Single Responsibility Principle.

``UserServiceBad`` validates, stores, mails and logs in one method, so it
has four reasons to change. ``UserService`` only coordinates; each concern
lives in its own collaborator.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from showcase.core.exceptions import DomainValidationError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


@dataclass
class User:
    email: str
    password: str


class UserServiceBad:
    def __init__(self):
        self.users: Dict[str, User] = {}
        self.sent: List[str] = []
        self.log: List[str] = []

    def create_user(self, email: str, password: str) -> User:
        if "@" not in email or len(password) < MIN_PASSWORD_LENGTH:
            raise DomainValidationError("invalid user data")
        user = User(email, password)
        self.users[email] = user
        self.sent.append(f"Welcome {email}")
        self.log.append(f"User created: {email}")
        return user


class UserValidator:
    def validate(self, email: str, password: str) -> None:
        if not email or "@" not in email:
            raise DomainValidationError("valid email is required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise DomainValidationError(
                f"password must be at least {MIN_PASSWORD_LENGTH} characters"
            )


class UserRepository:
    def __init__(self):
        self._users: Dict[str, User] = {}

    def save(self, user: User) -> None:
        self._users[user.email] = user

    def find(self, email: str) -> Optional[User]:
        return self._users.get(email)


class EmailSender:
    def __init__(self):
        self.sent: List[str] = []

    def send_welcome_email(self, user: User) -> None:
        self.sent.append(f"Welcome {user.email}")


class ActivityLogger:
    def __init__(self):
        self.entries: List[str] = []

    def log(self, message: str) -> None:
        self.entries.append(message)
        logger.info(message)


class UserService:
    def __init__(
        self,
        validator: UserValidator,
        repository: UserRepository,
        email_sender: EmailSender,
        activity_logger: ActivityLogger,
    ):
        self.validator = validator
        self.repository = repository
        self.email_sender = email_sender
        self.activity_logger = activity_logger

    def create_user(self, email: str, password: str) -> User:
        self.validator.validate(email, password)
        user = User(email, password)
        self.repository.save(user)
        self.email_sender.send_welcome_email(user)
        self.activity_logger.log(f"User created: {email}")
        return user


def demo() -> List[str]:
    sender = EmailSender()
    activity = ActivityLogger()
    service = UserService(UserValidator(), UserRepository(), sender, activity)
    service.create_user("ada@example.com", "correct-horse")

    lines = ["SRP: each collaborator has one reason to change"]
    lines += [f"  email: {m}" for m in sender.sent]
    lines += [f"  log:   {m}" for m in activity.entries]
    try:
        service.create_user("not-an-email", "short")
    except DomainValidationError as e:
        lines.append(f"  validator rejected input: {e}")
    return lines
