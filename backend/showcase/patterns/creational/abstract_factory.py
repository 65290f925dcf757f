"""
Abstract Factory: families of related objects that must be used together.

Two families are shown: GUI widgets (Windows/Mac) and database drivers
(PostgreSQL/MySQL).
"""

from abc import ABC, abstractmethod
from typing import List


# ------------------- GUI widgets -------------------


class Button(ABC):
    def __init__(self, text: str):
        self.text = text

    @abstractmethod
    def render(self) -> str: ...

    @abstractmethod
    def on_click(self) -> str: ...


class Checkbox(ABC):
    def __init__(self, label: str):
        self.label = label
        self.checked = False

    @abstractmethod
    def render(self) -> str: ...

    def toggle(self) -> None:
        self.checked = not self.checked


class WindowsButton(Button):
    def render(self) -> str:
        return f"[Windows Button: {self.text}]"

    def on_click(self) -> str:
        return "Windows button clicked with sound effect"


class WindowsCheckbox(Checkbox):
    def render(self) -> str:
        return f"[{'X' if self.checked else ' '}] {self.label}"


class MacButton(Button):
    def render(self) -> str:
        return f"◉ {self.text} ◉"

    def on_click(self) -> str:
        return "Mac button clicked with elegant animation"


class MacCheckbox(Checkbox):
    def render(self) -> str:
        return f"{'●' if self.checked else '○'} {self.label}"


class GUIFactory(ABC):
    @abstractmethod
    def create_button(self, text: str) -> Button: ...

    @abstractmethod
    def create_checkbox(self, label: str) -> Checkbox: ...


class WindowsFactory(GUIFactory):
    def create_button(self, text: str) -> Button:
        return WindowsButton(text)

    def create_checkbox(self, label: str) -> Checkbox:
        return WindowsCheckbox(label)


class MacFactory(GUIFactory):
    def create_button(self, text: str) -> Button:
        return MacButton(text)

    def create_checkbox(self, label: str) -> Checkbox:
        return MacCheckbox(label)


class Application:
    def __init__(self, factory: GUIFactory):
        self.factory = factory

    def render_ui(self) -> List[str]:
        button = self.factory.create_button("Submit")
        checkbox = self.factory.create_checkbox("Accept terms")
        lines = [button.render(), checkbox.render(), button.on_click()]
        checkbox.toggle()
        lines.append(checkbox.render())
        return lines


# ------------------- Database drivers -------------------


class Connection(ABC):
    def __init__(self, host: str):
        self.host = host

    @abstractmethod
    def connect(self) -> str: ...

    @abstractmethod
    def query(self, sql: str) -> str: ...


class Transaction(ABC):
    @abstractmethod
    def begin(self) -> str: ...

    @abstractmethod
    def commit(self) -> str: ...

    @abstractmethod
    def rollback(self) -> str: ...


class PostgresConnection(Connection):
    def connect(self) -> str:
        return f"Connected to PostgreSQL at {self.host}"

    def query(self, sql: str) -> str:
        return f"PostgreSQL executing: {sql}"


class PostgresTransaction(Transaction):
    def begin(self) -> str:
        return "PostgreSQL: BEGIN"

    def commit(self) -> str:
        return "PostgreSQL: COMMIT"

    def rollback(self) -> str:
        return "PostgreSQL: ROLLBACK"


class MySQLConnection(Connection):
    def connect(self) -> str:
        return f"Connected to MySQL at {self.host}"

    def query(self, sql: str) -> str:
        return f"MySQL executing: {sql}"


class MySQLTransaction(Transaction):
    def begin(self) -> str:
        return "MySQL: START TRANSACTION"

    def commit(self) -> str:
        return "MySQL: COMMIT"

    def rollback(self) -> str:
        return "MySQL: ROLLBACK"


class DatabaseFactory(ABC):
    @abstractmethod
    def create_connection(self, host: str) -> Connection: ...

    @abstractmethod
    def create_transaction(self) -> Transaction: ...


class PostgresFactory(DatabaseFactory):
    def create_connection(self, host: str) -> Connection:
        return PostgresConnection(host)

    def create_transaction(self) -> Transaction:
        return PostgresTransaction()


class MySQLFactory(DatabaseFactory):
    def create_connection(self, host: str) -> Connection:
        return MySQLConnection(host)

    def create_transaction(self) -> Transaction:
        return MySQLTransaction()


def run_queries(factory: DatabaseFactory, host: str) -> List[str]:
    conn = factory.create_connection(host)
    tx = factory.create_transaction()
    return [conn.connect(), conn.query("SELECT * FROM users"), tx.begin(), tx.commit()]


def demo() -> List[str]:
    lines = ["Abstract Factory:"]
    for name, factory in (("Windows", WindowsFactory()), ("Mac", MacFactory())):
        lines.append(f"  {name} UI:")
        lines += [f"    {line}" for line in Application(factory).render_ui()]
    for factory, host in ((PostgresFactory(), "localhost:5432"), (MySQLFactory(), "localhost:3306")):
        lines += [f"  {line}" for line in run_queries(factory, host)]
    return lines
