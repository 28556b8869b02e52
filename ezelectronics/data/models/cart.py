# ezelectronics/data/models/cart.py
from sqlalchemy import Column, Integer, String, Boolean, Date, Numeric, Index, text
from sqlalchemy.orm import relationship

from ezelectronics.data.database import Base


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    customer = Column(String, nullable=False, index=True)

    paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column(Date, nullable=True)
    total = Column(Numeric(12, 2), nullable=False, default=0)

    lines = relationship(
        "CartLineModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartLineModel.id",
    )

    # co najwyzej jeden nieoplacony koszyk na klienta
    __table_args__ = (
        Index(
            "uq_carts_open_customer",
            "customer",
            unique=True,
            sqlite_where=text("paid = 0"),
            postgresql_where=text("paid = false"),
        ),
    )
