#ezelectronics/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ezelectronics.api.deps import admin_or_manager, customer_only, get_lock_service
from ezelectronics.data.database import get_db
from ezelectronics.domain.schemas import AddToCartIn, CartOut, Principal
from ezelectronics.services.cart_service import CartService
from ezelectronics.services.lock_service import LockService

router = APIRouter(prefix="/carts", tags=["carts"])


def get_service(
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
) -> CartService:
    return CartService(db=db, lock_service=lock_service)


@router.get("", response_model=CartOut)
def get_cart(
    principal: Principal = Depends(customer_only),
    svc: CartService = Depends(get_service),
):
    return svc.get_cart(principal)


@router.post("")
def add_to_cart(
    payload: AddToCartIn,
    principal: Principal = Depends(customer_only),
    svc: CartService = Depends(get_service),
):
    svc.add_to_cart(principal, payload.model)
    return None


@router.patch("")
def checkout_cart(
    principal: Principal = Depends(customer_only),
    svc: CartService = Depends(get_service),
):
    svc.checkout_cart(principal)
    return None


@router.get("/history", response_model=List[CartOut])
def get_customer_carts(
    principal: Principal = Depends(customer_only),
    svc: CartService = Depends(get_service),
):
    return svc.get_customer_carts(principal)


@router.delete("/products/{model}")
def remove_product_from_cart(
    model: str,
    principal: Principal = Depends(customer_only),
    svc: CartService = Depends(get_service),
):
    svc.remove_product_from_cart(principal, model)
    return None


@router.delete("/current")
def clear_cart(
    principal: Principal = Depends(customer_only),
    svc: CartService = Depends(get_service),
):
    svc.clear_cart(principal)
    return None


@router.delete("")
def delete_all_carts(
    _: Principal = Depends(admin_or_manager),
    svc: CartService = Depends(get_service),
):
    svc.delete_all_carts()
    return None


@router.get("/all", response_model=List[CartOut])
def get_all_carts(
    _: Principal = Depends(admin_or_manager),
    svc: CartService = Depends(get_service),
):
    return svc.get_all_carts()
