from sqlalchemy import Column, String, Integer, Numeric, Date, Enum, CheckConstraint

from ezelectronics.data.database import Base
from ezelectronics.domain.enums import Category


class ProductModel(Base):
    __tablename__ = "products"

    model = Column(String, primary_key=True)
    category = Column(
        Enum(Category, values_callable=lambda e: [c.value for c in e], name="product_category"),
        nullable=False,
    )
    available_quantity = Column(Integer, nullable=False, default=0)
    selling_price = Column(Numeric(10, 2), nullable=False)
    details = Column(String, nullable=True)
    arrival_date = Column(Date, nullable=False)

    __table_args__ = (
        CheckConstraint("available_quantity >= 0", name="ck_products_quantity_non_negative"),
        CheckConstraint("selling_price > 0", name="ck_products_price_positive"),
    )
