from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ezelectronics.api.deps import admin_only, any_user, get_current_user
from ezelectronics.data.database import get_db
from ezelectronics.domain.enums import Role
from ezelectronics.domain.schemas import Principal, UserCreate, UserRead, UserUpdate
from ezelectronics.exceptions import ForbiddenError
from ezelectronics.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).create_user(payload)


@router.get("", response_model=List[UserRead])
def get_users(_: Principal = Depends(admin_only), db: Session = Depends(get_db)):
    return UserService(db).get_users()


@router.get("/roles/{role}", response_model=List[UserRead])
def get_users_by_role(role: Role, _: Principal = Depends(admin_only), db: Session = Depends(get_db)):
    return UserService(db).get_users_by_role(role)


@router.get("/{username}", response_model=UserRead)
def get_user(
    username: str,
    principal: Principal = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    # admin widzi kazdego, reszta tylko siebie
    if principal.role != Role.ADMIN and principal.username != username:
        raise ForbiddenError(principal.username, principal.role.value)
    return UserService(db).get_user(username)


@router.patch("/{username}", response_model=UserRead)
def update_user_info(
    username: str,
    payload: UserUpdate,
    principal: Principal = Depends(any_user),
    db: Session = Depends(get_db),
):
    return UserService(db).update_user_info(principal, username, payload)


@router.delete("/{username}")
def delete_user(
    username: str,
    principal: Principal = Depends(any_user),
    db: Session = Depends(get_db),
):
    UserService(db).delete_user(principal, username)
    return None


@router.delete("")
def delete_all_users(_: Principal = Depends(admin_only), db: Session = Depends(get_db)):
    UserService(db).delete_all_users()
    return None
