"""Decorator: add milk and sugar to a coffee without subclassing every combination."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List


class Coffee(ABC):
    @abstractmethod
    def cost(self) -> Decimal: ...

    @abstractmethod
    def description(self) -> str: ...


class SimpleCoffee(Coffee):
    def cost(self) -> Decimal:
        return Decimal("2.0")

    def description(self) -> str:
        return "Simple coffee"


class CoffeeDecorator(Coffee):
    extra_cost = Decimal("0")
    extra_name = ""

    def __init__(self, coffee: Coffee):
        self.coffee = coffee

    def cost(self) -> Decimal:
        return self.coffee.cost() + self.extra_cost

    def description(self) -> str:
        return f"{self.coffee.description()}, {self.extra_name}"


class MilkDecorator(CoffeeDecorator):
    extra_cost = Decimal("0.5")
    extra_name = "milk"


class SugarDecorator(CoffeeDecorator):
    extra_cost = Decimal("0.2")
    extra_name = "sugar"


def demo() -> List[str]:
    coffee = SugarDecorator(MilkDecorator(SimpleCoffee()))
    return ["Decorator:", f"  {coffee.description()} costs {coffee.cost()}"]
