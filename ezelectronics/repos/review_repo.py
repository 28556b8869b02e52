# ezelectronics/repos/review_repo.py
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from ezelectronics.data.models.review import ReviewModel


class ReviewRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_review(self, model: str, username: str) -> ReviewModel | None:
        stmt = select(ReviewModel).where(ReviewModel.model == model, ReviewModel.username == username)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_product_reviews(self, model: str) -> List[ReviewModel]:
        stmt = select(ReviewModel).where(ReviewModel.model == model).order_by(ReviewModel.id)
        return list(self.db.execute(stmt).scalars().all())

    def add_review(self, review: ReviewModel) -> ReviewModel:
        self.db.add(review)
        self.db.flush()
        return review

    def delete_review(self, review: ReviewModel) -> None:
        self.db.delete(review)
        self.db.flush()

    def delete_reviews_of_product(self, model: str) -> int:
        result = self.db.execute(delete(ReviewModel).where(ReviewModel.model == model))
        return result.rowcount

    def delete_all_reviews(self) -> int:
        result = self.db.execute(delete(ReviewModel))
        return result.rowcount
