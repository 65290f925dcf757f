"""
Liskov Substitution Principle.

``SquareBad`` overrides the setters of ``Rectangle`` so that code written
against a rectangle gets the wrong area. ``RectangleShape`` and
``SquareShape`` share only the ``Shape`` contract and are freely
interchangeable.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List


class Rectangle:
    def __init__(self, width: float = 0, height: float = 0):
        self.width = width
        self.height = height

    def set_width(self, width: float) -> None:
        self.width = width

    def set_height(self, height: float) -> None:
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class SquareBad(Rectangle):
    def set_width(self, width: float) -> None:
        self.width = width
        self.height = width

    def set_height(self, height: float) -> None:
        self.width = height
        self.height = height


def resize_to_5_by_4(rect: Rectangle) -> float:
    """Client code that assumes width and height change independently."""
    rect.set_width(5)
    rect.set_height(4)
    return rect.area()


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        pass


class RectangleShape(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class SquareShape(Shape):
    def __init__(self, side: float):
        self.side = side

    def area(self) -> float:
        return self.side * self.side


def calculate_total_area(shapes: Iterable[Shape]) -> float:
    return sum(shape.area() for shape in shapes)


def demo() -> List[str]:
    return [
        "LSP: substitutes must honour the base contract",
        f"  Rectangle resized to 5x4 -> area {resize_to_5_by_4(Rectangle()):g}",
        f"  SquareBad resized to 5x4 -> area {resize_to_5_by_4(SquareBad()):g} (expected 20)",
        f"  total area of 2x3 rectangle and 4x4 square: "
        f"{calculate_total_area([RectangleShape(2, 3), SquareShape(4)]):g}",
    ]
