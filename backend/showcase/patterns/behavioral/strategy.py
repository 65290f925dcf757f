"""Strategy: the shopping cart's payment algorithm is swapped at runtime."""

from abc import ABC, abstractmethod
from typing import List, Optional


class PaymentStrategy(ABC):
    @abstractmethod
    def pay(self, amount: float) -> str: ...


class CreditCardStrategy(PaymentStrategy):
    def __init__(self, card_number: str):
        self.card_number = card_number

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} with credit card ending {self.card_number[-4:]}"


class PayPalStrategy(PaymentStrategy):
    def __init__(self, email: str):
        self.email = email

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} with PayPal ({self.email})"


class BitcoinStrategy(PaymentStrategy):
    def __init__(self, wallet: str):
        self.wallet = wallet

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} with Bitcoin"


class ShoppingCart:
    def __init__(self):
        self.strategy: Optional[PaymentStrategy] = None

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        self.strategy = strategy

    def checkout(self, amount: float) -> str:
        if self.strategy is None:
            raise ValueError("no payment strategy selected")
        return self.strategy.pay(amount)


def demo() -> List[str]:
    cart = ShoppingCart()
    lines = ["Strategy:"]
    for strategy in (
        CreditCardStrategy("4111111111111111"),
        PayPalStrategy("john@example.com"),
        BitcoinStrategy("1BoatSLRHtKNngkdXEeobR76b53LETtpyT"),
    ):
        cart.set_strategy(strategy)
        lines.append(f"  {cart.checkout(100)}")
    return lines
