# ezelectronics/api/deps.py
from functools import lru_cache
from typing import Callable

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from ezelectronics.data.database import get_db
from ezelectronics.data.models.user import UserModel
from ezelectronics.domain.enums import Role
from ezelectronics.domain.schemas import Principal
from ezelectronics.exceptions import ForbiddenError, UnauthenticatedError
from ezelectronics.repos.user_repo import UserRepo
from ezelectronics.services.lock_service import LockService


@lru_cache
def get_lock_service() -> LockService:
    return LockService()


def get_current_user(
    x_username: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> Principal:
    # gateway uwierzytelnia i ustawia X-Username, tu tylko rozwiazujemy role
    if not x_username:
        raise UnauthenticatedError()

    user: UserModel | None = UserRepo(db).get_user(x_username)
    if user is None:
        raise UnauthenticatedError()

    return Principal(username=user.username, role=user.role)


def require_roles(*roles: Role) -> Callable[..., Principal]:
    allowed = frozenset(roles)

    def dependency(principal: Principal = Depends(get_current_user)) -> Principal:
        if principal.role not in allowed:
            raise ForbiddenError(principal.username, principal.role.value)
        return principal

    return dependency


customer_only = require_roles(Role.CUSTOMER)
admin_or_manager = require_roles(Role.ADMIN, Role.MANAGER)
admin_only = require_roles(Role.ADMIN)
any_user = require_roles(Role.CUSTOMER, Role.MANAGER, Role.ADMIN)
