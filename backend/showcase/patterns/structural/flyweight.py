"""
Flyweight: share the heavy, immutable part of many small objects.

Thousands of trees share a handful of ``TreeType`` instances; characters
of a document share ``CharacterStyle`` instances.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class TreeType:
    name: str
    color: str
    texture: str

    def draw(self, x: int, y: int) -> str:
        return f"{self.name} tree ({self.color}) at ({x}, {y})"


class TreeFactory:
    def __init__(self):
        self._types: Dict[Tuple[str, str, str], TreeType] = {}

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        if key not in self._types:
            self._types[key] = TreeType(name, color, texture)
        return self._types[key]

    def total_types(self) -> int:
        return len(self._types)


@dataclass
class Tree:
    x: int
    y: int
    tree_type: TreeType

    def draw(self) -> str:
        return self.tree_type.draw(self.x, self.y)


class Forest:
    def __init__(self, factory: TreeFactory = None):
        self.factory = factory or TreeFactory()
        self.trees: List[Tree] = []

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, self.factory.get_tree_type(name, color, texture))
        self.trees.append(tree)
        return tree

    def stats(self) -> str:
        return f"{len(self.trees)} trees share {self.factory.total_types()} tree types"


@dataclass(frozen=True)
class CharacterStyle:
    font: str
    size: int
    color: str
    bold: bool = False
    italic: bool = False


class StyleFactory:
    def __init__(self):
        self._styles: Dict[tuple, CharacterStyle] = {}

    def get_style(
        self, font: str, size: int, color: str, bold: bool = False, italic: bool = False
    ) -> CharacterStyle:
        key = (font, size, color, bold, italic)
        if key not in self._styles:
            self._styles[key] = CharacterStyle(*key)
        return self._styles[key]

    def total_styles(self) -> int:
        return len(self._styles)


@dataclass
class Character:
    char: str
    style: CharacterStyle


def demo() -> List[str]:
    forest = Forest()
    for i in range(1000):
        if i % 2:
            forest.plant_tree(i, i * 2, "Oak", "green", "rough")
        else:
            forest.plant_tree(i, i * 3, "Pine", "dark green", "needles")

    styles = StyleFactory()
    text = [Character(c, styles.get_style("Arial", 12, "black")) for c in "Hello"]
    text.append(Character("!", styles.get_style("Arial", 12, "red", bold=True)))

    return [
        "Flyweight:",
        f"  {forest.stats()}",
        f"  {forest.trees[0].draw()}",
        f"  {len(text)} characters share {styles.total_styles()} styles",
    ]
