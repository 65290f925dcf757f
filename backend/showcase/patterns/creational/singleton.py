"""
Singleton: one shared ``Database`` handle, created lazily and exactly once
even when several threads ask for it at the same time.
"""

import threading
from typing import List, Optional


class Database:
    _instance: Optional["Database"] = None
    _lock = threading.Lock()
    _created = 0

    def __init__(self, connection: str):
        self.connection = connection

    @classmethod
    def get_instance(cls) -> "Database":
        if cls._instance is None:
            with cls._lock:
                # Re-check inside the lock; another thread may have won the race.
                if cls._instance is None:
                    cls._instance = cls("db-connection")
                    cls._created += 1
        return cls._instance

    @classmethod
    def instances_created(cls) -> int:
        return cls._created

    @classmethod
    def reset(cls) -> None:
        """Forget the instance; tests only."""
        with cls._lock:
            cls._instance = None
            cls._created = 0


def demo() -> List[str]:
    a = Database.get_instance()
    b = Database.get_instance()
    return [
        "Singleton: Database.get_instance() always returns the same object",
        f"  same instance: {a is b}",
        f"  connection: {a.connection}",
    ]
