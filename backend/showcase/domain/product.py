"""
Product catalogue - DDD aggregate root and its value objects.

Value objects (ProductId, Money, Category) are immutable and compared by
value. The Product aggregate guards its own invariants; state changes go
through its domain methods.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from showcase.core.exceptions import (
    DomainValidationError,
    EmptyCategoryError,
    EmptyProductNameError,
    NegativeAmountError,
    NonPositivePriceError,
)
from showcase.domain.task import utcnow

Number = Union[int, float, str, Decimal]

CENT = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """Convert user input to a finite Decimal without float artefacts."""
    if isinstance(value, bool):
        raise DomainValidationError("amount must be a number")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (ArithmeticError, ValueError):
        raise DomainValidationError("amount must be a number")
    # Decimal accepts "NaN" and "Infinity"
    if not result.is_finite():
        raise DomainValidationError("amount must be a number")
    return result


def to_cents(value: Decimal) -> Decimal:
    """Round half-up to whole cents, the precision amounts are stored with."""
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except ArithmeticError:
        raise DomainValidationError("amount is too large")


@dataclass(frozen=True)
class ProductId:
    value: str

    @classmethod
    def generate(cls) -> "ProductId":
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Amount plus currency. Never negative."""

    amount: Decimal
    currency: str

    @classmethod
    def create(cls, amount: Number, currency: str) -> "Money":
        value = to_decimal(amount)
        if value < 0:
            raise NegativeAmountError()
        return cls(amount=to_cents(value), currency=currency)


@dataclass(frozen=True)
class Category:
    name: str

    @classmethod
    def create(cls, name: str) -> "Category":
        if not name:
            raise EmptyCategoryError()
        return cls(name=name)


class Product:
    """Aggregate root for the product catalogue."""

    def __init__(
        self,
        product_id: ProductId,
        name: str,
        description: str,
        price: Money,
        category: Category,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = product_id
        self._name = name
        self._description = description
        self._price = price
        self._category = category
        now = utcnow()
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(
        cls, name: str, description: str, price: Money, category: Category
    ) -> "Product":
        """Factory for a brand-new product with a fresh identity."""
        if not name:
            raise EmptyProductNameError()
        return cls(ProductId.generate(), name, description or "", price, category)

    @property
    def id(self) -> ProductId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Money:
        return self._price

    @property
    def category(self) -> Category:
        return self._category

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_price(self, new_price: Money) -> None:
        if new_price.amount <= 0:
            raise NonPositivePriceError()
        self._price = new_price
        self._updated_at = utcnow()

    def update_info(self, name: str, description: str) -> None:
        if not name:
            raise EmptyProductNameError()
        self._name = name
        self._description = description or ""
        self._updated_at = utcnow()

    def __eq__(self, other) -> bool:
        return isinstance(other, Product) and other._id == self._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"<Product(id={self._id}, name='{self._name}', price={self._price.amount} {self._price.currency})>"
