"""
Tests for the user registry and the access layer.
"""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from ezelectronics.data.models import UserModel
from ezelectronics.domain.enums import Role
from ezelectronics.domain.schemas import Principal, UserCreate, UserUpdate
from ezelectronics.exceptions import (
    BirthdateInFutureError,
    ForbiddenError,
    UserAlreadyExistsError,
    UserIsAdminError,
    UserNotFoundError,
)
from ezelectronics.services.user_service import UserService

ALICE_P = Principal(username="alice", role=Role.CUSTOMER)
ROOT_P = Principal(username="root", role=Role.ADMIN)

UPDATE = UserUpdate(name="Alicia", surname="Rossi", address="Via Roma 1, Torino", birthdate=date(1990, 5, 17))


class TestUserService:

    def test_create_and_get(self, db):
        svc = UserService(db)
        created = svc.create_user(UserCreate(username="carol", name="Carol", surname="White", role=Role.CUSTOMER))

        assert created.username == "carol"
        assert svc.get_user("carol").role == Role.CUSTOMER

    def test_duplicate(self, db, users):
        with pytest.raises(UserAlreadyExistsError):
            UserService(db).create_user(UserCreate(username="alice", name="A", surname="B", role=Role.ADMIN))

    def test_missing(self, db):
        with pytest.raises(UserNotFoundError):
            UserService(db).get_user("nobody")

    def test_users_by_role(self, db, users):
        svc = UserService(db)
        assert [u.username for u in svc.get_users_by_role(Role.CUSTOMER)] == ["alice", "bob"]
        assert [u.username for u in svc.get_users_by_role(Role.MANAGER)] == ["martha"]

    def test_update_own_info(self, db, users):
        svc = UserService(db)
        updated = svc.update_user_info(ALICE_P, "alice", UPDATE)

        assert updated.address == "Via Roma 1, Torino"
        assert svc.get_user("alice").birthdate == date(1990, 5, 17)

    def test_update_birthdate_in_future(self, db, users):
        payload = UPDATE.model_copy(update={"birthdate": date.today() + timedelta(days=1)})
        with pytest.raises(BirthdateInFutureError):
            UserService(db).update_user_info(ALICE_P, "alice", payload)

    def test_update_someone_else(self, db, users):
        svc = UserService(db)
        with pytest.raises(ForbiddenError):
            svc.update_user_info(ALICE_P, "bob", UPDATE)

        # admin moze edytowac kazdego poza innymi adminami
        assert svc.update_user_info(ROOT_P, "bob", UPDATE).name == "Alicia"

    def test_admin_cannot_touch_other_admin(self, db, users):
        db.add(UserModel(username="root2", name="Root", surname="Two", role=Role.ADMIN))
        db.commit()
        svc = UserService(db)

        with pytest.raises(UserIsAdminError):
            svc.update_user_info(ROOT_P, "root2", UPDATE)
        with pytest.raises(UserIsAdminError):
            svc.delete_user(ROOT_P, "root2")

        # siebie admin moze usunac
        svc.delete_user(ROOT_P, "root")
        with pytest.raises(UserNotFoundError):
            svc.get_user("root")

    def test_delete_user(self, db, users):
        svc = UserService(db)
        with pytest.raises(ForbiddenError):
            svc.delete_user(ALICE_P, "bob")
        with pytest.raises(UserNotFoundError):
            svc.delete_user(ROOT_P, "ghost")

        svc.delete_user(ALICE_P, "alice")
        assert [u.username for u in svc.get_users()] == ["bob", "martha", "root"]

    def test_delete_all_keeps_admins(self, db, users):
        svc = UserService(db)
        svc.delete_all_users()
        assert [u.username for u in svc.get_users()] == ["root"]


class TestUserRoutes:

    def test_register_then_use_cart(self, client: TestClient):
        response = client.post(
            "/users",
            json={"username": "carol", "name": "Carol", "surname": "White", "role": "Customer"},
        )
        assert response.status_code == 200
        assert response.json()["role"] == "Customer"

        response = client.get("/carts", headers={"X-Username": "carol"})
        assert response.status_code == 200

    def test_unknown_role_rejected(self, client: TestClient):
        response = client.post(
            "/users",
            json={"username": "eve", "name": "Eve", "surname": "X", "role": "Superuser"},
        )
        assert response.status_code == 422

    def test_list_requires_admin(self, client: TestClient, users):
        assert client.get("/users", headers={"X-Username": "martha"}).status_code == 403

        response = client.get("/users", headers={"X-Username": "root"})
        assert [u["username"] for u in response.json()] == ["alice", "bob", "martha", "root"]

    def test_get_self_or_admin(self, client: TestClient, users):
        assert client.get("/users/alice", headers={"X-Username": "alice"}).status_code == 200
        assert client.get("/users/alice", headers={"X-Username": "bob"}).status_code == 403
        assert client.get("/users/alice", headers={"X-Username": "root"}).status_code == 200
        assert client.get("/users/ghost", headers={"X-Username": "root"}).status_code == 404

    def test_users_by_role_route(self, client: TestClient, users):
        response = client.get("/users/roles/Manager", headers={"X-Username": "root"})
        assert [u["username"] for u in response.json()] == ["martha"]

        assert client.get("/users/roles/Pilot", headers={"X-Username": "root"}).status_code == 422
        assert client.get("/users/roles/Manager", headers={"X-Username": "alice"}).status_code == 403

    def test_update_info_route(self, client: TestClient, users):
        body = {"name": "Alicia", "surname": "Rossi", "address": "Via Roma 1", "birthdate": "1990-05-17"}

        response = client.patch("/users/alice", json=body, headers={"X-Username": "alice"})
        assert response.status_code == 200
        assert response.json()["birthdate"] == "1990-05-17"

        assert client.patch("/users/alice", json=body, headers={"X-Username": "bob"}).status_code == 403

        future = dict(body, birthdate=(date.today() + timedelta(days=3)).isoformat())
        response = client.patch("/users/alice", json=future, headers={"X-Username": "alice"})
        assert response.status_code == 400
        assert response.json()["error"] == "BirthdateInFutureError"

    def test_delete_user_route(self, client: TestClient, users):
        assert client.delete("/users/bob", headers={"X-Username": "alice"}).status_code == 403
        assert client.delete("/users/bob", headers={"X-Username": "root"}).status_code == 200
        assert client.get("/users/bob", headers={"X-Username": "root"}).status_code == 404

        assert client.delete("/users", headers={"X-Username": "martha"}).status_code == 403
        assert client.delete("/users", headers={"X-Username": "root"}).status_code == 200
        response = client.get("/users", headers={"X-Username": "root"})
        assert [u["username"] for u in response.json()] == ["root"]


class TestHealth:

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "connected"}
        assert "X-Request-ID" in response.headers

    def test_request_id_is_propagated(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"
