"""
Payment strategies and the factory that picks one by name.

New payment methods are added by writing another ``PaymentStrategy`` and
registering it in ``PaymentFactory`` - ``OrderService`` never changes.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, Type

from showcase.core.exceptions import PaymentFailedError, UnsupportedPaymentTypeError

logger = logging.getLogger(__name__)


class PaymentStrategy(ABC):
    """Interchangeable payment algorithm."""

    name: str = ""

    @abstractmethod
    def process_payment(self, amount: Decimal, order_id: str) -> None:
        """Charge ``amount`` for ``order_id``; raise PaymentFailedError on decline."""
        pass


class _SimulatedPayment(PaymentStrategy):
    def process_payment(self, amount: Decimal, order_id: str) -> None:
        if amount <= 0:
            raise PaymentFailedError(f"{self.name} payment declined: nothing to charge")
        logger.info(
            "Payment processed",
            extra={
                "context": {
                    "method": self.name,
                    "order_id": order_id,
                    "amount": str(amount),
                }
            },
        )


class CreditCardPayment(_SimulatedPayment):
    name = "Credit Card"


class PayPalPayment(_SimulatedPayment):
    name = "PayPal"


class CryptoPayment(_SimulatedPayment):
    name = "Cryptocurrency"


class PaymentFactory:
    """Creates payment strategies from the method name sent by clients."""

    _registry: Dict[str, Type[PaymentStrategy]] = {
        "credit_card": CreditCardPayment,
        "paypal": PayPalPayment,
        "crypto": CryptoPayment,
    }

    def create_payment(self, payment_type: str) -> PaymentStrategy:
        strategy_cls = self._registry.get(payment_type)
        if strategy_cls is None:
            raise UnsupportedPaymentTypeError(payment_type)
        return strategy_cls()

    def supported_types(self):
        return sorted(self._registry)
