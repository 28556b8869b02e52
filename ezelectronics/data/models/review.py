from sqlalchemy import Column, Integer, String, Date, CheckConstraint, UniqueConstraint

from ezelectronics.data.database import Base


class ReviewModel(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True)
    model = Column(String, nullable=False, index=True)
    username = Column(String, nullable=False)
    score = Column(Integer, nullable=False)
    date = Column(Date, nullable=False)
    comment = Column(String, nullable=False)

    # jedna recenzja na klienta i produkt
    __table_args__ = (
        UniqueConstraint("model", "username", name="uq_reviews_model_user"),
        CheckConstraint("score BETWEEN 1 AND 5", name="ck_reviews_score_range"),
    )
