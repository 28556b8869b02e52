# ezelectronics/repos/product_repo.py
from typing import List, Iterable

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from ezelectronics.data.models.product import ProductModel
from ezelectronics.domain.enums import Category


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, model: str) -> ProductModel | None:
        return self.db.get(ProductModel, model)

    def get_product_for_update(self, model: str) -> ProductModel | None:
        # SELECT ... FOR UPDATE, blokada wiersza do konca transakcji
        stmt = select(ProductModel).where(ProductModel.model == model).with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def get_products_for_update(self, models: Iterable[str]) -> dict[str, ProductModel]:
        # zawsze w tej samej kolejnosci, zeby dwa checkouty sie nie zakleszczyly
        ordered = sorted(set(models))
        if not ordered:
            return {}
        stmt = (
            select(ProductModel)
            .where(ProductModel.model.in_(ordered))
            .order_by(ProductModel.model)
            .with_for_update()
        )
        return {p.model: p for p in self.db.execute(stmt).scalars().all()}

    def list_products(
        self,
        category: Category | None = None,
        model: str | None = None,
        available_only: bool = False,
    ) -> List[ProductModel]:
        stmt = select(ProductModel)
        if category is not None:
            stmt = stmt.where(ProductModel.category == category)
        if model is not None:
            stmt = stmt.where(ProductModel.model == model)
        if available_only:
            stmt = stmt.where(ProductModel.available_quantity > 0)
        stmt = stmt.order_by(ProductModel.model)
        return list(self.db.execute(stmt).scalars().all())

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def change_quantity(self, product: ProductModel, delta: int) -> int:
        product.available_quantity = product.available_quantity + delta
        return product.available_quantity

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.flush()

    def delete_all_products(self) -> None:
        self.db.execute(delete(ProductModel))
