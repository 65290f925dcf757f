"""
Command: requests as objects, so they can be queued and undone.

A remote control toggles a light with an undo history, and a text editor
undoes writes in reverse order.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class Command(ABC):
    @abstractmethod
    def execute(self) -> None: ...

    @abstractmethod
    def undo(self) -> None: ...


class Light:
    def __init__(self):
        self.is_on = False

    def on(self) -> None:
        self.is_on = True

    def off(self) -> None:
        self.is_on = False


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.on()

    def undo(self) -> None:
        self.light.off()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.off()

    def undo(self) -> None:
        self.light.on()


class RemoteControl:
    def __init__(self):
        self.command: Optional[Command] = None
        self.history: List[Command] = []

    def set_command(self, command: Command) -> None:
        self.command = command

    def press_button(self) -> None:
        if self.command is None:
            return
        self.command.execute()
        self.history.append(self.command)

    def press_undo(self) -> bool:
        if not self.history:
            return False
        self.history.pop().undo()
        return True


class TextEditor:
    def __init__(self):
        self.text = ""

    def write(self, text: str) -> None:
        self.text += text

    def delete(self, length: int) -> None:
        self.text = self.text[: max(0, len(self.text) - length)]


class WriteCommand(Command):
    def __init__(self, editor: TextEditor, text: str):
        self.editor = editor
        self.text = text

    def execute(self) -> None:
        self.editor.write(self.text)

    def undo(self) -> None:
        self.editor.delete(len(self.text))


def demo() -> List[str]:
    light = Light()
    remote = RemoteControl()
    remote.set_command(LightOnCommand(light))
    remote.press_button()
    lines = ["Command:", f"  light on: {light.is_on}"]
    remote.press_undo()
    lines.append(f"  after undo light on: {light.is_on}")

    editor = TextEditor()
    commands = [WriteCommand(editor, "Hello"), WriteCommand(editor, " World")]
    for command in commands:
        command.execute()
    lines.append(f"  editor: {editor.text!r}")
    for command in reversed(commands):
        command.undo()
        lines.append(f"  undo -> {editor.text!r}")
    return lines
