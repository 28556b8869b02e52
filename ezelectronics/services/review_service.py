from datetime import date
from typing import Dict, Any, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ezelectronics.data.database import atomic
from ezelectronics.data.models.review import ReviewModel
from ezelectronics.domain.schemas import Principal
from ezelectronics.exceptions import ProductNotFoundError, ReviewAlreadyExistsError, ReviewNotFoundError
from ezelectronics.repos.product_repo import ProductRepo
from ezelectronics.repos.review_repo import ReviewRepo
from ezelectronics.utils.logging import get_logger

logger = get_logger(__name__)


def serialize_review(review: ReviewModel) -> Dict[str, Any]:
    return {
        "model": review.model,
        "user": review.username,
        "score": review.score,
        "date": review.date,
        "comment": review.comment,
    }


class ReviewService:
    """
    Recenzje produktow. Jeden klient moze miec jedna recenzje danego produktu.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = ReviewRepo(db)
        self.products = ProductRepo(db)

    def _require_product(self, model: str) -> None:
        if self.products.get_product(model) is None:
            raise ProductNotFoundError(model)

    #commands
    def add_review(self, principal: Principal, model: str, score: int, comment: str) -> bool:
        username = principal.username

        with atomic(self.db):
            self._require_product(model)
            if self.repo.get_review(model, username) is not None:
                raise ReviewAlreadyExistsError(username, model)

            try:
                self.repo.add_review(
                    ReviewModel(
                        model=model,
                        username=username,
                        score=score,
                        date=date.today(),
                        comment=comment,
                    )
                )
            except IntegrityError as e:
                # rownolegly request dodal ta sama recenzje
                raise ReviewAlreadyExistsError(username, model) from e

        logger.info(f"Review of {model} by {username} added (score {score})")
        return True

    def delete_review(self, principal: Principal, model: str) -> bool:
        username = principal.username

        with atomic(self.db):
            self._require_product(model)
            review = self.repo.get_review(model, username)
            if review is None:
                raise ReviewNotFoundError(username, model)
            self.repo.delete_review(review)

        logger.info(f"Review of {model} by {username} deleted")
        return True

    def delete_reviews_of_product(self, model: str) -> bool:
        with atomic(self.db):
            self._require_product(model)
            removed = self.repo.delete_reviews_of_product(model)

        logger.info(f"Deleted {removed} reviews of {model}")
        return True

    def delete_all_reviews(self) -> bool:
        with atomic(self.db):
            removed = self.repo.delete_all_reviews()

        logger.info(f"All reviews deleted ({removed})")
        return True

    #query
    def get_product_reviews(self, model: str) -> List[Dict[str, Any]]:
        self._require_product(model)
        return [serialize_review(r) for r in self.repo.get_product_reviews(model)]
