# ezelectronics/repos/cart_repo.py
from datetime import date
from decimal import Decimal
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.orm import Session, selectinload

from ezelectronics.data.models.cart import CartModel
from ezelectronics.data.models.cart_line import CartLineModel


class CartRepo:
    """
    Dostep do tabel carts i cart_lines. Repo nie commituje,
    granice transakcji wyznacza serwis (atomic).
    """

    def __init__(self, db: Session):
        self.db = db

    # koszyki
    def get_open_cart(self, customer: str, for_update: bool = False) -> CartModel | None:
        stmt = select(CartModel).where(
            CartModel.customer == customer,
            CartModel.paid.is_(False),
        )
        if for_update:
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def create_cart(self, customer: str) -> CartModel:
        cart = CartModel(customer=customer, paid=False, total=Decimal("0.00"))
        self.db.add(cart)
        # flush odpala unikalny indeks na otwarte koszyki od razu
        self.db.flush()
        return cart

    def get_paid_carts(self, customer: str) -> List[CartModel]:
        stmt = (
            select(CartModel)
            .options(selectinload(CartModel.lines))
            .where(CartModel.customer == customer, CartModel.paid.is_(True))
            .order_by(CartModel.payment_date, CartModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_all_carts(self) -> List[CartModel]:
        stmt = select(CartModel).options(selectinload(CartModel.lines)).order_by(CartModel.id)
        return list(self.db.execute(stmt).scalars().all())

    def add_to_total(self, cart: CartModel, amount: Decimal) -> None:
        cart.total = Decimal(cart.total) + amount

    def reset_total(self, cart: CartModel) -> None:
        cart.total = Decimal("0.00")

    def mark_paid(self, cart: CartModel, payment_date: date) -> None:
        cart.paid = True
        cart.payment_date = payment_date

    def delete_all_carts(self) -> None:
        self.db.execute(delete(CartLineModel))
        self.db.execute(delete(CartModel))

    # linie koszyka
    def get_cart_lines(self, cart_id: int) -> List[CartLineModel]:
        stmt = select(CartLineModel).where(CartLineModel.cart_id == cart_id).order_by(CartLineModel.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_cart_line(self, cart_id: int, model: str) -> CartLineModel | None:
        stmt = select(CartLineModel).where(
            CartLineModel.cart_id == cart_id,
            CartLineModel.model == model,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def add_cart_line(self, line: CartLineModel) -> CartLineModel:
        self.db.add(line)
        self.db.flush()
        return line

    def increment_line(self, line: CartLineModel, by: int = 1) -> None:
        line.quantity = line.quantity + by

    def delete_cart_line(self, line: CartLineModel) -> None:
        self.db.delete(line)
        self.db.flush()

    def delete_cart_lines(self, cart_id: int) -> int:
        result = self.db.execute(delete(CartLineModel).where(CartLineModel.cart_id == cart_id))
        return result.rowcount

    def is_model_in_open_cart(self, model: str | None = None) -> bool:
        stmt = (
            select(CartLineModel.id)
            .join(CartModel, CartModel.id == CartLineModel.cart_id)
            .where(CartModel.paid.is_(False))
            .limit(1)
        )
        if model is not None:
            stmt = stmt.where(CartLineModel.model == model)
        return self.db.execute(stmt).first() is not None
