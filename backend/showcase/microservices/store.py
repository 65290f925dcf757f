"""Thread-safe in-memory record store shared by the demo microservices."""

import threading
from typing import Any, Dict, Iterable, List, Optional


class InMemoryStore:
    """Dict-backed store; ids are assigned as ``f"{prefix}{n}"`` strings."""

    def __init__(self, prefix: str = "", seed: Optional[Iterable[Dict[str, Any]]] = None):
        self._prefix = prefix
        self._records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()
        self._counter = 0
        for record in seed or []:
            self._records[str(record["id"])] = dict(record)
            self._counter += 1

    def add(self, record: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            self._counter += 1
            new_id = f"{self._prefix}{self._counter}"
            while new_id in self._records:
                self._counter += 1
                new_id = f"{self._prefix}{self._counter}"
            stored = dict(record, id=new_id)
            self._records[new_id] = stored
            return dict(stored)

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._records.get(record_id)
            return dict(record) if record else None

    def all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(r) for r in self._records.values()]
