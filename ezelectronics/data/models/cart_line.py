from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, UniqueConstraint
from sqlalchemy.orm import relationship

from ezelectronics.data.database import Base


class CartLineModel(Base):
    __tablename__ = "cart_lines"

    id = Column(Integer, primary_key=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    model = Column(String, nullable=False)

    quantity = Column(Integer, nullable=False)
    # snapshot z chwili dodania, nie czytamy ponownie z katalogu
    category = Column(String, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)

    cart = relationship("CartModel", back_populates="lines")

    __table_args__ = (UniqueConstraint("cart_id", "model", name="uq_cart_lines_cart_model"),)
