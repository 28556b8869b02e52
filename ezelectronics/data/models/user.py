from sqlalchemy import Column, String, Enum, Date

from ezelectronics.data.database import Base
from ezelectronics.domain.enums import Role


class UserModel(Base):
    __tablename__ = "users"

    username = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    surname = Column(String, nullable=False)
    role = Column(Enum(Role, values_callable=lambda e: [r.value for r in e], name="user_role"), nullable=False)
    address = Column(String, nullable=True)
    birthdate = Column(Date, nullable=True)
