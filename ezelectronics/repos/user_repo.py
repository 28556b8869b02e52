from typing import List

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from ezelectronics.data.models.user import UserModel
from ezelectronics.domain.enums import Role


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, username: str) -> UserModel | None:
        return self.db.get(UserModel, username)

    def get_users(self) -> List[UserModel]:
        return list(self.db.execute(select(UserModel).order_by(UserModel.username)).scalars().all())

    def get_users_by_role(self, role: Role) -> List[UserModel]:
        stmt = select(UserModel).where(UserModel.role == role).order_by(UserModel.username)
        return list(self.db.execute(stmt).scalars().all())

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        return user

    def delete_user(self, user: UserModel) -> None:
        self.db.delete(user)
        self.db.flush()

    def delete_non_admins(self) -> int:
        result = self.db.execute(delete(UserModel).where(UserModel.role != Role.ADMIN))
        return result.rowcount
