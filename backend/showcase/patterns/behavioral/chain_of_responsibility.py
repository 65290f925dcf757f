"""
Chain of Responsibility: approval requests travel manager -> director -> CEO
until someone is allowed to approve them.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Request:
    request_type: str
    amount: int


class Handler:
    def __init__(self):
        self._next: Optional["Handler"] = None

    def set_next(self, handler: "Handler") -> "Handler":
        self._next = handler
        return handler

    def handle(self, request: Request) -> str:
        if self._next is not None:
            return self._next.handle(request)
        return "Request not handled"


class Manager(Handler):
    def handle(self, request: Request) -> str:
        if request.request_type == "leave" and request.amount <= 3:
            return f"Manager approved {request.amount} day leave"
        return super().handle(request)


class Director(Handler):
    def handle(self, request: Request) -> str:
        if request.request_type == "leave" and request.amount <= 7:
            return f"Director approved {request.amount} day leave"
        if request.request_type == "purchase" and request.amount <= 10000:
            return f"Director approved ${request.amount} purchase"
        return super().handle(request)


class CEO(Handler):
    def handle(self, request: Request) -> str:
        if request.request_type == "leave":
            return f"CEO approved {request.amount} day leave"
        if request.request_type == "purchase":
            return f"CEO approved ${request.amount} purchase"
        return super().handle(request)


def build_chain() -> Handler:
    manager = Manager()
    manager.set_next(Director()).set_next(CEO())
    return manager


def demo() -> List[str]:
    chain = build_chain()
    requests = [
        Request("leave", 2),
        Request("leave", 5),
        Request("leave", 14),
        Request("purchase", 5000),
        Request("purchase", 50000),
        Request("refund", 10),
    ]
    return ["Chain of Responsibility:"] + [f"  {chain.handle(r)}" for r in requests]
