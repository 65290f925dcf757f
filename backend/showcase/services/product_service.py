"""Application service for the product catalogue."""

import logging
from typing import List, Optional

from showcase.core.exceptions import ProductNotFoundError
from showcase.domain.interfaces import IProductRepository
from showcase.domain.pricing import PricingService
from showcase.domain.product import Category, Money, Number, Product
from showcase.schemas.dtos import CreateProductInput

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(
        self,
        repository: IProductRepository,
        pricing_service: Optional[PricingService] = None,
    ):
        self.repository = repository
        self.pricing_service = pricing_service or PricingService()

    def create_product(self, data: CreateProductInput) -> Product:
        price = Money.create(data.price, data.currency)
        category = Category.create(data.category)
        product = Product.create(data.name, data.description, price, category)
        self.repository.save(product)
        logger.info(
            "Product created",
            extra={"context": {"product_id": product.id.value, "name": product.name}},
        )
        return product

    def get_product(self, product_id: str) -> Product:
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def get_all_products(self) -> List[Product]:
        return self.repository.find_all()

    def apply_discount_to_product(self, product_id: str, percent: Number) -> Product:
        product = self.get_product(product_id)
        self.pricing_service.apply_discount(product, percent)
        self.repository.save(product)
        logger.info(
            "Discount applied",
            extra={"context": {"product_id": product_id, "percent": str(percent)}},
        )
        return product

    def update_product_info(self, product_id: str, name: str, description: str) -> Product:
        product = self.get_product(product_id)
        product.update_info(name, description)
        self.repository.save(product)
        return product

    def delete_product(self, product_id: str) -> None:
        if not self.repository.delete(product_id):
            raise ProductNotFoundError(product_id)
