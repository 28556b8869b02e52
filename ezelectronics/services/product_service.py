from datetime import date
from decimal import Decimal
from typing import Dict, Any, List

from sqlalchemy.orm import Session

from ezelectronics.data.database import atomic
from ezelectronics.data.models.product import ProductModel
from ezelectronics.domain.enums import Category, Grouping
from ezelectronics.exceptions import (
    DateBeforeArrivalError,
    DateInFutureError,
    InsufficientStockError,
    InvalidGroupingError,
    OutOfStockError,
    ProductAlreadyExistsError,
    ProductInOpenCartError,
    ProductNotFoundError,
)
from ezelectronics.repos.cart_repo import CartRepo
from ezelectronics.repos.product_repo import ProductRepo
from ezelectronics.repos.review_repo import ReviewRepo
from ezelectronics.utils.logging import get_logger

logger = get_logger(__name__)


def serialize_product(product: ProductModel) -> Dict[str, Any]:
    return {
        "model": product.model,
        "category": product.category,
        "quantity": product.available_quantity,
        "selling_price": Decimal(product.selling_price),
        "details": product.details,
        "arrival_date": product.arrival_date,
    }


class ProductService:
    """
    Katalog produktow: rejestracja, dostawa, sprzedaz, listowanie, usuwanie.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepo(db)
        self.carts = CartRepo(db)
        self.reviews = ReviewRepo(db)

    @staticmethod
    def _check_date(model: str, value: date | None, arrival_date: date | None = None) -> date:
        today = date.today()
        if value is None:
            return today
        if value > today:
            raise DateInFutureError(value)
        if arrival_date is not None and value < arrival_date:
            raise DateBeforeArrivalError(model, value, arrival_date)
        return value

    #commands
    def register_product(
        self,
        model: str,
        category: Category,
        quantity: int,
        selling_price: Decimal,
        details: str | None = None,
        arrival_date: date | None = None,
    ) -> None:
        arrival = self._check_date(model, arrival_date)

        with atomic(self.db):
            if self.repo.get_product(model) is not None:
                raise ProductAlreadyExistsError(model)

            self.repo.create_product(
                ProductModel(
                    model=model,
                    category=category,
                    available_quantity=quantity,
                    selling_price=selling_price,
                    details=details,
                    arrival_date=arrival,
                )
            )

        logger.info(f"Registered product {model} ({category.value}), {quantity} units")

    def change_product_quantity(self, model: str, quantity: int, change_date: date | None = None) -> int:
        with atomic(self.db):
            product = self.repo.get_product_for_update(model)
            if product is None:
                raise ProductNotFoundError(model)

            self._check_date(model, change_date, product.arrival_date)
            new_quantity = self.repo.change_quantity(product, quantity)

        logger.info(f"Restocked {model} by {quantity}, now {new_quantity}")
        return new_quantity

    def sell_product(self, model: str, quantity: int, selling_date: date | None = None) -> int:
        with atomic(self.db):
            product = self.repo.get_product_for_update(model)
            if product is None:
                raise ProductNotFoundError(model)

            self._check_date(model, selling_date, product.arrival_date)

            if product.available_quantity == 0:
                raise OutOfStockError(model)
            if product.available_quantity < quantity:
                raise InsufficientStockError(model, quantity, product.available_quantity)

            new_quantity = self.repo.change_quantity(product, -quantity)

        logger.info(f"Sold {quantity} units of {model}, {new_quantity} left")
        return new_quantity

    def delete_product(self, model: str) -> bool:
        with atomic(self.db):
            product = self.repo.get_product_for_update(model)
            if product is None:
                raise ProductNotFoundError(model)
            if self.carts.is_model_in_open_cart(model):
                raise ProductInOpenCartError(model)

            # recenzje nie przezywaja produktu
            self.reviews.delete_reviews_of_product(model)
            self.repo.delete_product(product)

        logger.info(f"Deleted product {model}")
        return True

    def delete_all_products(self) -> bool:
        with atomic(self.db):
            if self.carts.is_model_in_open_cart():
                raise ProductInOpenCartError()
            self.reviews.delete_all_reviews()
            self.repo.delete_all_products()

        logger.info("All products deleted")
        return True

    #query
    def get_products(
        self,
        grouping: Grouping | None = None,
        category: Category | None = None,
        model: str | None = None,
    ) -> List[Dict[str, Any]]:
        return self._list(grouping, category, model, available_only=False)

    def get_available_products(
        self,
        grouping: Grouping | None = None,
        category: Category | None = None,
        model: str | None = None,
    ) -> List[Dict[str, Any]]:
        return self._list(grouping, category, model, available_only=True)

    def _list(
        self,
        grouping: Grouping | None,
        category: Category | None,
        model: str | None,
        available_only: bool,
    ) -> List[Dict[str, Any]]:
        if grouping is None:
            if category is not None or model is not None:
                raise InvalidGroupingError("category and model require a grouping")
        elif grouping == Grouping.CATEGORY:
            if category is None or model is not None:
                raise InvalidGroupingError("grouping by category needs exactly a category")
        elif grouping == Grouping.MODEL:
            if not model or category is not None:
                raise InvalidGroupingError("grouping by model needs exactly a model")

        if grouping == Grouping.MODEL and self.repo.get_product(model) is None:
            raise ProductNotFoundError(model)

        products = self.repo.list_products(category=category, model=model, available_only=available_only)
        return [serialize_product(p) for p in products]
