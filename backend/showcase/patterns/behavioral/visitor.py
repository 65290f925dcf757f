"""
Visitor: add operations (area, perimeter, JSON export) to a fixed set of
shapes without changing the shape classes.
"""

import json
import math
from abc import ABC, abstractmethod
from typing import List


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: "Visitor") -> str: ...


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def accept(self, visitor):
        return visitor.visit_circle(self)


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def accept(self, visitor):
        return visitor.visit_rectangle(self)


class Triangle(Shape):
    """Equilateral triangle described by base and height."""

    def __init__(self, base: float, height: float):
        self.base = base
        self.height = height

    def accept(self, visitor):
        return visitor.visit_triangle(self)


class Visitor(ABC):
    @abstractmethod
    def visit_circle(self, circle: Circle) -> str: ...

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> str: ...

    @abstractmethod
    def visit_triangle(self, triangle: Triangle) -> str: ...


class AreaCalculator(Visitor):
    def visit_circle(self, circle):
        return f"Circle area: {math.pi * circle.radius ** 2:.2f}"

    def visit_rectangle(self, rectangle):
        return f"Rectangle area: {rectangle.width * rectangle.height:.2f}"

    def visit_triangle(self, triangle):
        return f"Triangle area: {0.5 * triangle.base * triangle.height:.2f}"


class PerimeterCalculator(Visitor):
    def visit_circle(self, circle):
        return f"Circle perimeter: {2 * math.pi * circle.radius:.2f}"

    def visit_rectangle(self, rectangle):
        return f"Rectangle perimeter: {2 * (rectangle.width + rectangle.height):.2f}"

    def visit_triangle(self, triangle):
        return f"Triangle perimeter: {3 * triangle.base:.2f}"


class JSONExporter(Visitor):
    def visit_circle(self, circle):
        return json.dumps({"type": "circle", "radius": circle.radius})

    def visit_rectangle(self, rectangle):
        return json.dumps(
            {"type": "rectangle", "width": rectangle.width, "height": rectangle.height}
        )

    def visit_triangle(self, triangle):
        return json.dumps(
            {"type": "triangle", "base": triangle.base, "height": triangle.height}
        )


def demo() -> List[str]:
    shapes = [Circle(5), Rectangle(4, 6), Triangle(3, 4)]
    lines = ["Visitor:"]
    for visitor in (AreaCalculator(), PerimeterCalculator(), JSONExporter()):
        lines += [f"  {shape.accept(visitor)}" for shape in shapes]
    return lines
