"""
Prototype: new objects are copies of configured templates.

``clone()`` is a deep copy, so nested tags, metadata and connection
properties of a clone never leak back into the original.
"""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, List


class Prototype(ABC):
    def clone(self):
        return copy.deepcopy(self)

    @abstractmethod
    def info(self) -> str:
        pass


@dataclass
class Document(Prototype):
    title: str
    content: str
    author: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    modified_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tags: List[str] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)

    def clone(self) -> "Document":
        cloned = copy.deepcopy(self)
        cloned.modified_at = datetime.now(timezone.utc)
        return cloned

    def info(self) -> str:
        return f"Document: {self.title} by {self.author} (Created: {self.created_at:%Y-%m-%d})"


@dataclass
class Circle(Prototype):
    x: int
    y: int
    radius: int
    color: str

    def info(self) -> str:
        return f"Circle at ({self.x},{self.y}) radius={self.radius} color={self.color}"

    def draw(self) -> str:
        return f"Drawing {self.color} circle at ({self.x},{self.y}) with radius {self.radius}"


@dataclass
class Rectangle(Prototype):
    x: int
    y: int
    width: int
    height: int
    color: str

    def info(self) -> str:
        return f"Rectangle at ({self.x},{self.y}) size={self.width}x{self.height} color={self.color}"

    def draw(self) -> str:
        return (
            f"Drawing {self.color} rectangle at ({self.x},{self.y}) "
            f"with size {self.width}x{self.height}"
        )


@dataclass
class DBConfig(Prototype):
    host: str
    port: int
    database: str
    username: str
    password: str
    max_connections: int = 10
    timeout: timedelta = timedelta(seconds=30)
    ssl: bool = True
    connection_props: Dict[str, str] = field(default_factory=dict)

    def info(self) -> str:
        return f"DBConfig: {self.username}@{self.host}:{self.port}/{self.database} (SSL: {self.ssl})"


class PrototypeRegistry:
    def __init__(self):
        self._prototypes: Dict[str, Prototype] = {}

    def register(self, name: str, prototype: Prototype) -> None:
        self._prototypes[name] = prototype

    def create(self, name: str) -> Prototype:
        try:
            return self._prototypes[name].clone()
        except KeyError:
            raise KeyError(f"prototype '{name}' not found")

    def names(self) -> List[str]:
        return sorted(self._prototypes)


def demo() -> List[str]:
    original = Document(
        "Design Patterns",
        "This is a book about design patterns...",
        "Gang of Four",
        tags=["programming", "design", "patterns"],
        metadata={"version": "1.0"},
    )
    second = original.clone()
    second.title = "Design Patterns - Second Edition"
    second.tags.append("architecture")
    second.metadata["version"] = "2.0"

    registry = PrototypeRegistry()
    registry.register("red-circle", Circle(0, 0, 10, "red"))
    circle = registry.create("red-circle")
    circle.x, circle.y = 10, 20

    prod = DBConfig(
        "prod.example.com", 5432, "myapp", "appuser", "secret",
        max_connections=100, connection_props={"pool_size": "20"},
    )
    dev = prod.clone()
    dev.host, dev.ssl = "localhost", False
    dev.connection_props["pool_size"] = "5"

    return [
        "Prototype:",
        f"  original tags: {original.tags} version {original.metadata['version']}",
        f"  cloned tags:   {second.tags} version {second.metadata['version']}",
        f"  {circle.draw()}",
        f"  Production:  {prod.info()} pool_size={prod.connection_props['pool_size']}",
        f"  Development: {dev.info()} pool_size={dev.connection_props['pool_size']}",
    ]
