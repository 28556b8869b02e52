# ezelectronics/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ezelectronics.api.deps import admin_or_manager, any_user
from ezelectronics.data.database import get_db
from ezelectronics.domain.enums import Category, Grouping
from ezelectronics.domain.schemas import (
    Principal,
    ProductIn,
    ProductOut,
    QuantityChangeIn,
    QuantityOut,
    SaleIn,
)
from ezelectronics.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


@router.post("")
def register_product(
    payload: ProductIn,
    _: Principal = Depends(admin_or_manager),
    svc: ProductService = Depends(get_service),
):
    svc.register_product(
        model=payload.model,
        category=payload.category,
        quantity=payload.quantity,
        selling_price=payload.selling_price,
        details=payload.details,
        arrival_date=payload.arrival_date,
    )
    return None


@router.patch("/{model}", response_model=QuantityOut)
def change_product_quantity(
    model: str,
    payload: QuantityChangeIn,
    _: Principal = Depends(admin_or_manager),
    svc: ProductService = Depends(get_service),
):
    return {"quantity": svc.change_product_quantity(model, payload.quantity, payload.change_date)}


@router.patch("/{model}/sell", response_model=QuantityOut)
def sell_product(
    model: str,
    payload: SaleIn,
    _: Principal = Depends(admin_or_manager),
    svc: ProductService = Depends(get_service),
):
    return {"quantity": svc.sell_product(model, payload.quantity, payload.selling_date)}


@router.get("", response_model=List[ProductOut])
def get_products(
    grouping: Grouping | None = Query(default=None),
    category: Category | None = Query(default=None),
    model: str | None = Query(default=None),
    _: Principal = Depends(admin_or_manager),
    svc: ProductService = Depends(get_service),
):
    return svc.get_products(grouping, category, model)


@router.get("/available", response_model=List[ProductOut])
def get_available_products(
    grouping: Grouping | None = Query(default=None),
    category: Category | None = Query(default=None),
    model: str | None = Query(default=None),
    _: Principal = Depends(any_user),
    svc: ProductService = Depends(get_service),
):
    return svc.get_available_products(grouping, category, model)


@router.delete("/{model}")
def delete_product(
    model: str,
    _: Principal = Depends(admin_or_manager),
    svc: ProductService = Depends(get_service),
):
    svc.delete_product(model)
    return None


@router.delete("")
def delete_all_products(
    _: Principal = Depends(admin_or_manager),
    svc: ProductService = Depends(get_service),
):
    svc.delete_all_products()
    return None
