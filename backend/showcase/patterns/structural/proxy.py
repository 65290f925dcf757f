"""
Proxy: a stand-in that controls access to the real object.

- ``ProxyImage`` (virtual proxy) loads the real image on first display.
- ``ProtectedDocument`` (protection proxy) requires authentication to edit.
- ``CachingDatabaseProxy`` answers repeated queries from a cache.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class Image(ABC):
    @abstractmethod
    def display(self) -> str: ...


class RealImage(Image):
    loads = 0

    def __init__(self, filename: str):
        self.filename = filename
        RealImage.loads += 1

    def display(self) -> str:
        return f"Displaying {self.filename}"


class ProxyImage(Image):
    def __init__(self, filename: str):
        self.filename = filename
        self._real: Optional[RealImage] = None

    @property
    def loaded(self) -> bool:
        return self._real is not None

    def display(self) -> str:
        if self._real is None:
            self._real = RealImage(self.filename)
        return self._real.display()


class Document(ABC):
    @abstractmethod
    def view(self) -> str: ...

    @abstractmethod
    def edit(self, content: str) -> None: ...


class RealDocument(Document):
    def __init__(self, content: str):
        self.content = content

    def view(self) -> str:
        return self.content

    def edit(self, content: str) -> None:
        self.content = content


class ProtectedDocument(Document):
    def __init__(self, content: str, password: str):
        self._document = RealDocument(content)
        self._password = password
        self.user: Optional[str] = None

    def authenticate(self, user: str, password: str) -> bool:
        if password == self._password:
            self.user = user
            return True
        return False

    def view(self) -> str:
        return self._document.view()

    def edit(self, content: str) -> None:
        if self.user is None:
            raise PermissionError("authentication required to edit")
        self._document.edit(content)


class DatabaseQuery(ABC):
    @abstractmethod
    def execute(self, query: str) -> List[str]: ...


class RealDatabase(DatabaseQuery):
    def __init__(self):
        self.calls = 0

    def execute(self, query: str) -> List[str]:
        self.calls += 1
        return [f"result of '{query}'"]


class CachingDatabaseProxy(DatabaseQuery):
    def __init__(self, database: Optional[RealDatabase] = None):
        self.database = database or RealDatabase()
        self._cache: Dict[str, List[str]] = {}

    def execute(self, query: str) -> List[str]:
        if query not in self._cache:
            self._cache[query] = self.database.execute(query)
        return list(self._cache[query])


def demo() -> List[str]:
    image = ProxyImage("photo.jpg")
    loaded_before = image.loaded
    shown = image.display()

    doc = ProtectedDocument("draft", "secret123")
    try:
        doc.edit("hacked")
        denied = "edit allowed"
    except PermissionError as e:
        denied = str(e)
    doc.authenticate("john", "secret123")
    doc.edit("final")

    db = CachingDatabaseProxy()
    for _ in range(3):
        db.execute("SELECT * FROM users")

    return [
        "Proxy:",
        f"  image loaded before display: {loaded_before}; {shown}",
        f"  unauthenticated edit: {denied}; after login: {doc.view()}",
        f"  3 identical queries hit the database {db.database.calls} time(s)",
    ]
