"""Pricing domain service: logic that belongs to no single aggregate."""

from decimal import Decimal

from showcase.core.exceptions import InvalidDiscountError
from showcase.domain.product import Money, Number, Product, to_decimal

_HUNDRED = Decimal("100")


class PricingService:
    """Stateless domain service for price calculations."""

    def apply_discount(self, product: Product, discount_percent: Number) -> None:
        """Reduce the product price by ``discount_percent`` (0-100).

        The new price is applied through ``Product.change_price``, so a
        discount that drives the price to zero is rejected by the aggregate.
        """
        percent = to_decimal(discount_percent)
        if percent < 0 or percent > _HUNDRED:
            raise InvalidDiscountError()

        current = product.price
        discount_amount = current.amount * (percent / _HUNDRED)
        new_amount = (current.amount - discount_amount).quantize(Decimal("0.01"))

        product.change_price(Money.create(new_amount, current.currency))
