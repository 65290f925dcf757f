"""
Dependency Inversion Principle.

``OrderServiceBad`` constructs a Stripe client itself. ``OrderService``
receives any ``PaymentProcessor``, so switching providers is a wiring change.
"""

from abc import ABC, abstractmethod
from typing import List


class StripePayment:
    def process_payment(self, amount: float) -> str:
        return f"Stripe charged {amount:.2f}"


class OrderServiceBad:
    def __init__(self):
        self.stripe = StripePayment()

    def process_order(self, amount: float) -> str:
        return self.stripe.process_payment(amount)


class PaymentProcessor(ABC):
    @abstractmethod
    def process(self, amount: float) -> str:
        pass


class StripeProcessor(PaymentProcessor):
    def process(self, amount: float) -> str:
        return f"Stripe charged {amount:.2f}"


class PayPalProcessor(PaymentProcessor):
    def process(self, amount: float) -> str:
        return f"PayPal charged {amount:.2f}"


class CryptoProcessor(PaymentProcessor):
    def process(self, amount: float) -> str:
        return f"Crypto charged {amount:.2f}"


class OrderService:
    def __init__(self, processor: PaymentProcessor):
        self.processor = processor

    def process_order(self, amount: float) -> str:
        if amount <= 0:
            raise ValueError("order amount must be positive")
        return self.processor.process(amount)


def demo() -> List[str]:
    lines = ["DIP: OrderService depends on the PaymentProcessor abstraction"]
    for processor in (StripeProcessor(), PayPalProcessor(), CryptoProcessor()):
        lines.append(f"  {OrderService(processor).process_order(49.5)}")
    return lines
