from datetime import date
from typing import List

from sqlalchemy.orm import Session

from ezelectronics.data.database import atomic
from ezelectronics.data.models.user import UserModel
from ezelectronics.domain.enums import Role
from ezelectronics.domain.schemas import Principal, UserCreate, UserRead, UserUpdate
from ezelectronics.exceptions import (
    BirthdateInFutureError,
    ForbiddenError,
    UserAlreadyExistsError,
    UserIsAdminError,
    UserNotFoundError,
)
from ezelectronics.repos.user_repo import UserRepo
from ezelectronics.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepo(db)

    @staticmethod
    def _check_target(principal: Principal, target: UserModel) -> None:
        # kazdy moze zmieniac siebie, admin dodatkowo kazdego kto nie jest adminem
        if principal.username == target.username:
            return
        if principal.role != Role.ADMIN:
            raise ForbiddenError(principal.username, principal.role.value)
        if target.role == Role.ADMIN:
            raise UserIsAdminError(target.username)

    def create_user(self, payload: UserCreate) -> UserRead:
        with atomic(self.db):
            if self.repo.get_user(payload.username):
                raise UserAlreadyExistsError(payload.username)

            user = self.repo.create_user(
                UserModel(
                    username=payload.username,
                    name=payload.name,
                    surname=payload.surname,
                    role=payload.role,
                )
            )

        logger.info(f"Created user {user.username} with role {user.role.value}")
        return UserRead.model_validate(user)

    def update_user_info(self, principal: Principal, username: str, payload: UserUpdate) -> UserRead:
        if payload.birthdate > date.today():
            raise BirthdateInFutureError(payload.birthdate)

        with atomic(self.db):
            user = self.repo.get_user(username)
            if user is None:
                raise UserNotFoundError(username)
            self._check_target(principal, user)

            user.name = payload.name
            user.surname = payload.surname
            user.address = payload.address
            user.birthdate = payload.birthdate

        logger.info(f"User {username} updated by {principal.username}")
        return UserRead.model_validate(user)

    def delete_user(self, principal: Principal, username: str) -> bool:
        with atomic(self.db):
            user = self.repo.get_user(username)
            if user is None:
                raise UserNotFoundError(username)
            self._check_target(principal, user)
            self.repo.delete_user(user)

        logger.info(f"User {username} deleted by {principal.username}")
        return True

    def delete_all_users(self) -> bool:
        with atomic(self.db):
            removed = self.repo.delete_non_admins()

        logger.info(f"Deleted {removed} non-admin users")
        return True

    def get_user(self, username: str) -> UserRead:
        user = self.repo.get_user(username)
        if not user:
            raise UserNotFoundError(username)
        return UserRead.model_validate(user)

    def get_users(self) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.get_users()]

    def get_users_by_role(self, role: Role) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.get_users_by_role(role)]
