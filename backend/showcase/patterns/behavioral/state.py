"""
State: a vending machine whose behaviour depends on its current state
(no coin, has coin, sold, sold out). Each action returns the machine's
response message.
"""

from abc import ABC, abstractmethod
from typing import List


class State(ABC):
    @abstractmethod
    def insert_coin(self, machine: "VendingMachine") -> str: ...

    @abstractmethod
    def eject_coin(self, machine: "VendingMachine") -> str: ...

    @abstractmethod
    def press_button(self, machine: "VendingMachine") -> str: ...

    @abstractmethod
    def dispense(self, machine: "VendingMachine") -> str: ...


class NoCoinState(State):
    def insert_coin(self, machine):
        machine.state = machine.has_coin
        return "Coin inserted"

    def eject_coin(self, machine):
        return "No coin to eject"

    def press_button(self, machine):
        return "Insert coin first"

    def dispense(self, machine):
        return "Pay first"


class HasCoinState(State):
    def insert_coin(self, machine):
        return "Coin already inserted"

    def eject_coin(self, machine):
        machine.state = machine.no_coin
        return "Coin ejected"

    def press_button(self, machine):
        machine.state = machine.sold
        return "Button pressed"

    def dispense(self, machine):
        return "Press button first"


class SoldState(State):
    def insert_coin(self, machine):
        return "Please wait, dispensing item"

    def eject_coin(self, machine):
        return "Too late, item being dispensed"

    def press_button(self, machine):
        return "Dispensing..."

    def dispense(self, machine):
        machine.release_item()
        if machine.count > 0:
            machine.state = machine.no_coin
            return "Item dispensed"
        machine.state = machine.sold_out
        return "Item dispensed. Machine sold out"


class SoldOutState(State):
    def insert_coin(self, machine):
        return "Machine sold out"

    def eject_coin(self, machine):
        return "No coin to eject"

    def press_button(self, machine):
        return "Machine sold out"

    def dispense(self, machine):
        return "No item to dispense"


class VendingMachine:
    def __init__(self, count: int):
        self.no_coin = NoCoinState()
        self.has_coin = HasCoinState()
        self.sold = SoldState()
        self.sold_out = SoldOutState()
        self.count = count
        self.state: State = self.no_coin if count > 0 else self.sold_out

    def insert_coin(self) -> str:
        return self.state.insert_coin(self)

    def eject_coin(self) -> str:
        return self.state.eject_coin(self)

    def press_button(self) -> List[str]:
        """Pressing the button also triggers dispensing when a sale happens."""
        messages = [self.state.press_button(self)]
        if self.state is self.sold:
            messages.append(self.state.dispense(self))
        return messages

    def release_item(self) -> None:
        if self.count > 0:
            self.count -= 1


def demo() -> List[str]:
    machine = VendingMachine(2)
    lines = ["State:"]
    lines.append(f"  {machine.press_button()[0]}")
    for _ in range(2):
        lines.append(f"  {machine.insert_coin()}")
        lines += [f"  {m}" for m in machine.press_button()]
    lines.append(f"  {machine.insert_coin()}")
    return lines
