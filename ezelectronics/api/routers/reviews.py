# ezelectronics/api/routers/reviews.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ezelectronics.api.deps import admin_or_manager, any_user, customer_only
from ezelectronics.data.database import get_db
from ezelectronics.domain.schemas import Principal, ReviewIn, ReviewOut
from ezelectronics.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])


def get_service(db: Session = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


@router.post("/{model}")
def add_review(
    model: str,
    payload: ReviewIn,
    principal: Principal = Depends(customer_only),
    svc: ReviewService = Depends(get_service),
):
    svc.add_review(principal, model, payload.score, payload.comment)
    return None


@router.get("/{model}", response_model=List[ReviewOut])
def get_product_reviews(
    model: str,
    _: Principal = Depends(any_user),
    svc: ReviewService = Depends(get_service),
):
    return svc.get_product_reviews(model)


@router.delete("/{model}")
def delete_review(
    model: str,
    principal: Principal = Depends(customer_only),
    svc: ReviewService = Depends(get_service),
):
    svc.delete_review(principal, model)
    return None


@router.delete("/{model}/all")
def delete_reviews_of_product(
    model: str,
    _: Principal = Depends(admin_or_manager),
    svc: ReviewService = Depends(get_service),
):
    svc.delete_reviews_of_product(model)
    return None


@router.delete("")
def delete_all_reviews(
    _: Principal = Depends(admin_or_manager),
    svc: ReviewService = Depends(get_service),
):
    svc.delete_all_reviews()
    return None
