"""
Memento: capture an editor's state so it can be restored later without
exposing its internals.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Memento:
    content: str


class Editor:
    def __init__(self):
        self._content = ""

    def type(self, words: str) -> None:
        self._content += words

    @property
    def content(self) -> str:
        return self._content

    def save(self) -> Memento:
        return Memento(self._content)

    def restore(self, memento: Memento) -> None:
        self._content = memento.content


class History:
    def __init__(self):
        self._stack: List[Memento] = []

    def push(self, memento: Memento) -> None:
        self._stack.append(memento)

    def pop(self) -> Optional[Memento]:
        return self._stack.pop() if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)


def undo(editor: Editor, history: History) -> bool:
    """Restore the last saved state; False when there is nothing to undo."""
    memento = history.pop()
    if memento is None:
        return False
    editor.restore(memento)
    return True


def demo() -> List[str]:
    editor = Editor()
    history = History()

    editor.type("This is the first sentence.")
    history.push(editor.save())
    editor.type(" This is the second.")
    history.push(editor.save())
    editor.type(" And this is the third.")

    lines = ["Memento:", f"  current: {editor.content}"]
    while undo(editor, history):
        lines.append(f"  undo -> {editor.content}")
    lines.append(f"  undo with empty history: {undo(editor, history)}")
    return lines
