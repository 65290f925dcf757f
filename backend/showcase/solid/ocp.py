"""
Open/Closed Principle.

Adding a channel to ``NotificationServiceBad`` means editing its if-chain;
``NotificationService`` accepts any new ``Notifier`` without modification.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence


class NotificationServiceBad:
    def send(self, kind: str, message: str) -> str:
        if kind == "email":
            return f"Email: {message}"
        elif kind == "sms":
            return f"SMS: {message}"
        elif kind == "push":
            return f"Push: {message}"
        raise ValueError(f"unknown notification type: {kind}")


class Notifier(ABC):
    @abstractmethod
    def send(self, message: str) -> str:
        pass


class EmailNotifier(Notifier):
    def send(self, message: str) -> str:
        return f"Email: {message}"


class SMSNotifier(Notifier):
    def send(self, message: str) -> str:
        return f"SMS: {message}"


class PushNotifier(Notifier):
    def send(self, message: str) -> str:
        return f"Push: {message}"


class NotificationService:
    def __init__(self, notifiers: Sequence[Notifier]):
        self.notifiers = list(notifiers)

    def notify(self, message: str) -> List[str]:
        """Send ``message`` through every notifier, returning what each sent."""
        return [n.send(message) for n in self.notifiers]


def demo() -> List[str]:
    class SlackNotifier(Notifier):
        def send(self, message: str) -> str:
            return f"Slack: {message}"

    service = NotificationService(
        [EmailNotifier(), SMSNotifier(), PushNotifier(), SlackNotifier()]
    )
    lines = ["OCP: new notifier added without touching NotificationService"]
    lines += [f"  {sent}" for sent in service.notify("Order shipped")]
    return lines
