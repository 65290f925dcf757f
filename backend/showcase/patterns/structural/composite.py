"""
Composite: treat single objects and groups of objects uniformly.

Two trees: a file system of files and folders, and compound graphics that
move all of their children together.
"""

from abc import ABC, abstractmethod
from typing import List


class Component(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def operation(self, indent: int = 0) -> List[str]: ...

    @abstractmethod
    def size(self) -> int: ...


class File(Component):
    def __init__(self, name: str, size: int = 0):
        super().__init__(name)
        self._size = size

    def operation(self, indent: int = 0) -> List[str]:
        return [f"{' ' * indent}File: {self.name}"]

    def size(self) -> int:
        return self._size


class Folder(Component):
    def __init__(self, name: str):
        super().__init__(name)
        self.children: List[Component] = []

    def add(self, component: Component) -> None:
        self.children.append(component)

    def remove(self, component: Component) -> None:
        self.children.remove(component)

    def get_child(self, index: int) -> Component:
        return self.children[index]

    def operation(self, indent: int = 0) -> List[str]:
        lines = [f"{' ' * indent}Folder: {self.name}"]
        for child in self.children:
            lines += child.operation(indent + 2)
        return lines

    def size(self) -> int:
        return sum(child.size() for child in self.children)


class Graphic(ABC):
    @abstractmethod
    def draw(self) -> str: ...

    @abstractmethod
    def move(self, dx: int, dy: int) -> None: ...


class Dot(Graphic):
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def draw(self) -> str:
        return f"Dot at ({self.x}, {self.y})"

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy


class Circle(Dot):
    def __init__(self, x: int, y: int, radius: int):
        super().__init__(x, y)
        self.radius = radius

    def draw(self) -> str:
        return f"Circle at ({self.x}, {self.y}) with radius {self.radius}"


class CompoundGraphic(Graphic):
    def __init__(self):
        self.children: List[Graphic] = []

    def add(self, graphic: Graphic) -> None:
        self.children.append(graphic)

    def draw(self) -> str:
        return "Compound[" + ", ".join(child.draw() for child in self.children) + "]"

    def move(self, dx: int, dy: int) -> None:
        for child in self.children:
            child.move(dx, dy)


def demo() -> List[str]:
    root = Folder("root")
    docs = Folder("documents")
    docs.add(File("resume.pdf", 120))
    docs.add(File("letter.docx", 30))
    root.add(docs)
    root.add(File("readme.txt", 2))

    group = CompoundGraphic()
    group.add(Dot(1, 2))
    group.add(Circle(5, 3, 10))
    group.move(10, 10)

    return (
        ["Composite:"]
        + [f"  {line}" for line in root.operation()]
        + [f"  total size: {root.size()}", f"  {group.draw()}"]
    )
