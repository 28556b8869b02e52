# ezelectronics/domain/schemas.py
from datetime import date
from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, StringConstraints
from pydantic.alias_generators import to_camel

from ezelectronics.domain.enums import Category, Role

# w JSON kwoty ida jako liczby, nie stringi
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Principal(BaseModel):
    """Zalogowany uzytkownik + rola, dostarczany przez warstwe dostepu."""

    username: str
    role: Role


# carts
class AddToCartIn(CamelModel):
    """Schema dla dodawania produktu do koszyka."""

    model: str = Field(..., min_length=1, description="Model produktu")


class CartLineOut(CamelModel):
    """Linia koszyka (response). Cena i kategoria to snapshot z chwili dodania."""

    model: str
    category: str
    quantity: int
    price: Money


class CartOut(CamelModel):
    """Schema dla koszyka (response)."""

    customer: str
    paid: bool
    payment_date: date | None = None
    total: Money
    products: List[CartLineOut]


# products
class ProductIn(CamelModel):
    """Schema dla rejestracji produktu."""

    model: str = Field(..., min_length=1)
    category: Category
    quantity: int = Field(..., gt=0, description="Ilosc poczatkowa (musi byc > 0)")
    selling_price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    details: str | None = None
    arrival_date: date | None = None


class QuantityChangeIn(CamelModel):
    quantity: int = Field(..., gt=0)
    change_date: date | None = None


class SaleIn(CamelModel):
    quantity: int = Field(..., gt=0)
    selling_date: date | None = None


class QuantityOut(CamelModel):
    quantity: int


class ProductOut(CamelModel):
    model: str
    category: Category
    quantity: int
    selling_price: Money
    details: str | None = None
    arrival_date: date


# users
class UserCreate(CamelModel):
    """Schema dla tworzenia uzytkownika."""

    username: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=100)
    surname: str = Field(..., min_length=1, max_length=100)
    role: Role


class UserRead(CamelModel):
    """Schema dla uzytkownika (response)."""

    username: str
    name: str
    surname: str
    role: Role
    address: str | None = None
    birthdate: date | None = None


class UserUpdate(CamelModel):
    """Schema dla edycji danych uzytkownika. Rola i username sie nie zmieniaja."""

    name: str = Field(..., min_length=1, max_length=100)
    surname: str = Field(..., min_length=1, max_length=100)
    address: str = Field(..., min_length=1)
    birthdate: date


# reviews
class ReviewIn(CamelModel):
    score: int = Field(..., ge=1, le=5)
    comment: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ReviewOut(CamelModel):
    model: str
    user: str
    score: int
    date: date
    comment: str


class HealthOut(BaseModel):
    status: str
    database: str
