"""
Synchronous in-process event publishing (Observer pattern).

Observers are called in subscription order. A failing observer is logged
and skipped; the remaining observers still receive the event and the
publishing use case is not affected.
"""

import logging
from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List

from showcase.domain.events import Event

logger = logging.getLogger(__name__)


class EventObserver(ABC):
    @abstractmethod
    def on_event(self, event: Event) -> None:
        pass


class EventPublisher:
    def __init__(self):
        self._observers: List[EventObserver] = []

    @property
    def observers(self) -> List[EventObserver]:
        return list(self._observers)

    def subscribe(self, observer: EventObserver) -> None:
        if observer in self._observers:
            logger.warning(
                "Observer already subscribed",
                extra={"context": {"observer": type(observer).__name__}},
            )
            return
        self._observers.append(observer)

    def unsubscribe(self, observer: EventObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def publish(self, event: Event) -> None:
        logger.debug(
            "Publishing event",
            extra={
                "context": {"type": event.type, "observers": len(self._observers)}
            },
        )
        for observer in list(self._observers):
            try:
                observer.on_event(event)
            except Exception as e:
                logger.error(
                    "Error handling event",
                    extra={
                        "context": {
                            "type": event.type,
                            "observer": type(observer).__name__,
                            "error": str(e),
                        }
                    },
                    exc_info=True,
                )


class EmailNotificationHandler(EventObserver):
    """Pretends to send an e-mail; keeps the outbox for inspection."""

    def __init__(self):
        self.outbox: List[str] = []

    def on_event(self, event: Event) -> None:
        message = f"Email notification: {event.type} - {event.data}"
        self.outbox.append(message)
        logger.info(message, extra={"context": {"event": event.type}})


class LoggingHandler(EventObserver):
    def on_event(self, event: Event) -> None:
        logger.info(
            f"Domain event: {event.type}",
            extra={"context": event.to_dict()},
        )


class AnalyticsHandler(EventObserver):
    """Counts events per type."""

    def __init__(self):
        self._counts: Counter = Counter()

    def on_event(self, event: Event) -> None:
        self._counts[event.type] += 1

    def counts(self) -> Dict[str, int]:
        return dict(self._counts)


def build_default_publisher() -> EventPublisher:
    """Publisher wired with the three standard observers."""
    publisher = EventPublisher()
    publisher.subscribe(EmailNotificationHandler())
    publisher.subscribe(LoggingHandler())
    publisher.subscribe(AnalyticsHandler())
    return publisher
