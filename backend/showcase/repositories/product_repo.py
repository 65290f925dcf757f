"""Product repository: persists the Product aggregate as one row."""

from typing import List, Optional

from sqlalchemy.orm import Session

from showcase.db.base import ProductModel
from showcase.domain.interfaces import IProductRepository
from showcase.domain.product import Category, Money, Product, ProductId
from showcase.repositories.task_repo import as_utc


class ProductRepository(IProductRepository):
    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def save(self, product: Product) -> None:
        db_product = self.db.get(ProductModel, product.id.value)
        if db_product is None:
            db_product = ProductModel(id=product.id.value, created_at=product.created_at)
            self.db.add(db_product)

        db_product.name = product.name
        db_product.description = product.description
        db_product.price_amount = product.price.amount
        db_product.price_currency = product.price.currency
        db_product.category = product.category.name
        db_product.updated_at = product.updated_at
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def find_by_id(self, product_id: str) -> Optional[Product]:
        db_product = self.db.query(ProductModel).filter_by(id=product_id).first()
        return self._to_domain(db_product) if db_product else None

    def find_all(self) -> List[Product]:
        db_products = (
            self.db.query(ProductModel).order_by(ProductModel.created_at.desc()).all()
        )
        return [self._to_domain(p) for p in db_products]

    def delete(self, product_id: str) -> bool:
        db_product = self.db.query(ProductModel).filter_by(id=product_id).first()
        if not db_product:
            return False
        try:
            self.db.delete(db_product)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return True

    def _to_domain(self, db_product: ProductModel) -> Product:
        # Rehydrate without re-running creation rules; stored rows are trusted.
        return Product(
            product_id=ProductId(db_product.id),
            name=db_product.name,
            description=db_product.description or "",
            price=Money(amount=db_product.price_amount, currency=db_product.price_currency),
            category=Category(db_product.category),
            created_at=as_utc(db_product.created_at),
            updated_at=as_utc(db_product.updated_at),
        )
