from datetime import date
from decimal import Decimal
from typing import Dict, Any, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ezelectronics.data.database import atomic
from ezelectronics.data.models.cart import CartModel
from ezelectronics.data.models.cart_line import CartLineModel
from ezelectronics.domain.schemas import Principal
from ezelectronics.exceptions import (
    CartBusyError,
    CartNotFoundError,
    EmptyCartError,
    InsufficientStockError,
    OutOfStockError,
    ProductNotFoundError,
    ProductNotInCartError,
)
from ezelectronics.repos.cart_repo import CartRepo
from ezelectronics.repos.product_repo import ProductRepo
from ezelectronics.services.lock_service import LockService
from ezelectronics.utils.logging import get_logger

logger = get_logger(__name__)


def empty_cart(customer: str) -> Dict[str, Any]:
    #brak koszyka w bazie -> pusty, nigdy None
    return {
        "customer": customer,
        "paid": False,
        "payment_date": None,
        "total": Decimal("0.00"),
        "products": [],
    }


def serialize_cart(cart: CartModel, lines: List[CartLineModel] | None = None) -> Dict[str, Any]:
    lines = cart.lines if lines is None else lines
    return {
        "customer": cart.customer,
        "paid": cart.paid,
        "payment_date": cart.payment_date,
        "total": Decimal(cart.total),
        "products": [
            {
                "model": line.model,
                "category": line.category,
                "quantity": line.quantity,
                "price": Decimal(line.unit_price),
            }
            for line in lines
        ],
    }


class CartService:
    """
    Use case'y dla domeny cart.
    commands (add, checkout, remove, clear, delete all) modyfikuja stan, kazdy w jednej transakcji
    query (get, history, all) tylko odczyt

    Commands jednego klienta ida pod lockiem klienta (redis), zeby dwa rownolegle
    requesty nie utworzyly dwoch koszykow ani nie policzyly totala dwa razy.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
    ):
        self.db = db
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)
        self.lock_service = lock_service

    #query - odczyt
    def get_cart(self, principal: Principal) -> Dict[str, Any]:
        cart = self.repo.get_open_cart(principal.username)
        if cart is None:
            return empty_cart(principal.username)

        lines = self.repo.get_cart_lines(cart.id)
        return serialize_cart(cart, lines)

    def get_customer_carts(self, principal: Principal) -> List[Dict[str, Any]]:
        carts = self.repo.get_paid_carts(principal.username)
        return [serialize_cart(cart) for cart in carts]

    def get_all_carts(self) -> List[Dict[str, Any]]:
        return [serialize_cart(cart) for cart in self.repo.get_all_carts()]

    #commands
    def add_to_cart(self, principal: Principal, model: str) -> bool:
        username = principal.username

        with self.lock_service.customer_lock(username), atomic(self.db):
            product = self.products.get_product(model)
            if product is None:
                raise ProductNotFoundError(model)
            if product.available_quantity == 0:
                raise OutOfStockError(model)

            price = Decimal(product.selling_price)

            cart = self.repo.get_open_cart(username, for_update=True)
            if cart is None:
                try:
                    cart = self.repo.create_cart(username)
                except IntegrityError as e:
                    # ktos inny utworzyl otwarty koszyk w miedzyczasie (unikalny indeks)
                    logger.warning(f"Concurrent cart creation for {username}: {e.orig}")
                    raise CartBusyError(username) from e
                logger.info(f"Created cart {cart.id} for customer {username}")

            line = self.repo.get_cart_line(cart.id, model)
            if line is None:
                self.repo.add_cart_line(
                    CartLineModel(
                        cart_id=cart.id,
                        model=model,
                        quantity=1,
                        category=product.category.value,
                        unit_price=price,
                    )
                )
            else:
                # stan magazynu sprawdzany dopiero przy checkout
                self.repo.increment_line(line)

            self.repo.add_to_total(cart, price)

        logger.info(f"Product {model} added to cart of {username}")
        return True

    def checkout_cart(self, principal: Principal) -> bool:
        username = principal.username

        with self.lock_service.customer_lock(username), atomic(self.db):
            cart = self.repo.get_open_cart(username, for_update=True)
            if cart is None:
                raise CartNotFoundError(username)

            lines = self.repo.get_cart_lines(cart.id)
            if not lines:
                raise EmptyCartError(username)

            # walidacja wszystkich linii przed jakakolwiek zmiana,
            # wiersze produktow zablokowane do konca transakcji
            products = self.products.get_products_for_update(line.model for line in lines)
            for line in lines:
                product = products.get(line.model)
                if product is None:
                    raise ProductNotFoundError(line.model)
                if product.available_quantity == 0:
                    raise OutOfStockError(line.model)
                if product.available_quantity < line.quantity:
                    raise InsufficientStockError(line.model, line.quantity, product.available_quantity)

            self.repo.mark_paid(cart, date.today())
            for line in lines:
                self.products.change_quantity(products[line.model], -line.quantity)

            cart_id = cart.id

        logger.info(f"Cart {cart_id} of {username} checked out ({len(lines)} lines)")
        return True

    def remove_product_from_cart(self, principal: Principal, model: str) -> bool:
        username = principal.username

        with self.lock_service.customer_lock(username), atomic(self.db):
            cart = self.repo.get_open_cart(username, for_update=True)
            if cart is None:
                raise CartNotFoundError(username)

            line = self.repo.get_cart_line(cart.id, model)
            if line is None:
                raise ProductNotInCartError(username, model)

            # total zmniejszamy o cene ze snapshotu, nie o aktualna z katalogu
            unit_price = Decimal(line.unit_price)
            if line.quantity == 1:
                self.repo.delete_cart_line(line)
            else:
                self.repo.increment_line(line, by=-1)

            self.repo.add_to_total(cart, -unit_price)

        logger.info(f"One unit of {model} removed from cart of {username}")
        return True

    def clear_cart(self, principal: Principal) -> bool:
        username = principal.username

        with self.lock_service.customer_lock(username), atomic(self.db):
            cart = self.repo.get_open_cart(username, for_update=True)
            if cart is None:
                raise CartNotFoundError(username)

            removed = self.repo.delete_cart_lines(cart.id)
            self.repo.reset_total(cart)

        logger.info(f"Cart of {username} cleared ({removed} lines removed)")
        return True

    def delete_all_carts(self) -> bool:
        with atomic(self.db):
            self.repo.delete_all_carts()

        logger.info("All carts deleted")
        return True
