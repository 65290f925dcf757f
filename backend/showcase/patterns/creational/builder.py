"""Builder: assemble a ``House`` step by step with a fluent interface."""

from dataclasses import dataclass, replace
from typing import List


@dataclass(frozen=True)
class House:
    windows: int = 0
    doors: int = 0
    floors: int = 0
    has_garage: bool = False
    has_pool: bool = False


class HouseBuilder:
    def __init__(self):
        self._house = House()

    def with_windows(self, count: int) -> "HouseBuilder":
        self._house = replace(self._house, windows=count)
        return self

    def with_doors(self, count: int) -> "HouseBuilder":
        self._house = replace(self._house, doors=count)
        return self

    def with_floors(self, count: int) -> "HouseBuilder":
        self._house = replace(self._house, floors=count)
        return self

    def with_garage(self) -> "HouseBuilder":
        self._house = replace(self._house, has_garage=True)
        return self

    def with_pool(self) -> "HouseBuilder":
        self._house = replace(self._house, has_pool=True)
        return self

    def build(self) -> House:
        return self._house


def demo() -> List[str]:
    house = (
        HouseBuilder().with_windows(8).with_doors(2).with_floors(2).with_garage().build()
    )
    return ["Builder: fluent construction", f"  {house}"]
