"""
Tests for product reviews: service rules and the /reviews routes.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from ezelectronics.domain.enums import Role
from ezelectronics.domain.schemas import Principal
from ezelectronics.exceptions import ProductNotFoundError, ReviewAlreadyExistsError, ReviewNotFoundError

ALICE = {"X-Username": "alice"}
BOB = {"X-Username": "bob"}
MANAGER = {"X-Username": "martha"}

BOB_PRINCIPAL = Principal(username="bob", role=Role.CUSTOMER)


class TestReviewService:

    def test_add_and_list(self, review_service, customer, make_product):
        make_product("iPhone13")
        review_service.add_review(customer, "iPhone13", 4, "Solid phone")

        assert review_service.get_product_reviews("iPhone13") == [
            {"model": "iPhone13", "user": "alice", "score": 4, "date": date.today(), "comment": "Solid phone"}
        ]

    def test_second_review_by_same_customer(self, review_service, customer, make_product):
        make_product("iPhone13")
        review_service.add_review(customer, "iPhone13", 4, "Solid phone")

        with pytest.raises(ReviewAlreadyExistsError):
            review_service.add_review(customer, "iPhone13", 1, "Changed my mind")

        # pierwsza recenzja bez zmian
        [review] = review_service.get_product_reviews("iPhone13")
        assert review["score"] == 4

    def test_concurrent_duplicate_is_rejected_by_constraint(self, review_service, customer, make_product, monkeypatch):
        make_product("iPhone13")
        review_service.add_review(customer, "iPhone13", 4, "Solid phone")
        # sprawdzenie istnienia przepuszcza, unikalny constraint nie
        monkeypatch.setattr(review_service.repo, "get_review", lambda *args, **kwargs: None)

        with pytest.raises(ReviewAlreadyExistsError):
            review_service.add_review(customer, "iPhone13", 1, "Changed my mind")

        monkeypatch.undo()
        assert [r["score"] for r in review_service.get_product_reviews("iPhone13")] == [4]

    def test_review_unknown_product(self, review_service, customer):
        with pytest.raises(ProductNotFoundError):
            review_service.add_review(customer, "ghost", 5, "?")
        with pytest.raises(ProductNotFoundError):
            review_service.get_product_reviews("ghost")

    def test_delete_own_review_only(self, review_service, customer, make_product):
        make_product("iPhone13")
        review_service.add_review(customer, "iPhone13", 4, "Solid phone")
        review_service.add_review(BOB_PRINCIPAL, "iPhone13", 2, "Meh")

        review_service.delete_review(customer, "iPhone13")

        assert [r["user"] for r in review_service.get_product_reviews("iPhone13")] == ["bob"]

    def test_delete_missing_review(self, review_service, customer, make_product):
        make_product("iPhone13")
        with pytest.raises(ReviewNotFoundError):
            review_service.delete_review(customer, "iPhone13")

    def test_delete_reviews_of_product(self, review_service, customer, make_product):
        make_product("iPhone13")
        make_product("XPS15")
        review_service.add_review(customer, "iPhone13", 4, "Solid phone")
        review_service.add_review(BOB_PRINCIPAL, "iPhone13", 2, "Meh")
        review_service.add_review(customer, "XPS15", 5, "Great screen")

        review_service.delete_reviews_of_product("iPhone13")

        assert review_service.get_product_reviews("iPhone13") == []
        assert len(review_service.get_product_reviews("XPS15")) == 1

        with pytest.raises(ProductNotFoundError):
            review_service.delete_reviews_of_product("ghost")

    def test_delete_all_reviews(self, review_service, customer, make_product):
        make_product("iPhone13")
        make_product("XPS15")
        review_service.add_review(customer, "iPhone13", 4, "Solid phone")
        review_service.add_review(customer, "XPS15", 5, "Great screen")

        review_service.delete_all_reviews()

        assert review_service.get_product_reviews("iPhone13") == []
        assert review_service.get_product_reviews("XPS15") == []

    def test_deleting_product_drops_its_reviews(self, review_service, product_service, customer, make_product):
        make_product("iPhone13")
        review_service.add_review(customer, "iPhone13", 4, "Solid phone")

        product_service.delete_product("iPhone13")
        make_product("iPhone13")

        # ten sam model zarejestrowany ponownie zaczyna bez recenzji
        assert review_service.get_product_reviews("iPhone13") == []
        review_service.add_review(customer, "iPhone13", 3, "Second generation")


class TestReviewRoutes:

    def test_customer_reviews_and_anyone_reads(self, client: TestClient, users, make_product):
        make_product("iPhone13")

        response = client.post("/reviews/iPhone13", json={"score": 5, "comment": "Love it"}, headers=ALICE)
        assert response.status_code == 200

        response = client.get("/reviews/iPhone13", headers=MANAGER)
        assert response.status_code == 200
        assert response.json() == [
            {
                "model": "iPhone13",
                "user": "alice",
                "score": 5,
                "date": date.today().isoformat(),
                "comment": "Love it",
            }
        ]

    def test_manager_cannot_review(self, client: TestClient, users, make_product):
        make_product("iPhone13")
        response = client.post("/reviews/iPhone13", json={"score": 5, "comment": "Love it"}, headers=MANAGER)
        assert response.status_code == 403

    @pytest.mark.parametrize(
        "body",
        [
            {"score": 0, "comment": "too low"},
            {"score": 6, "comment": "too high"},
            {"score": 3, "comment": "   "},
            {"score": 3},
        ],
    )
    def test_invalid_body(self, client: TestClient, users, make_product, body):
        make_product("iPhone13")
        response = client.post("/reviews/iPhone13", json=body, headers=ALICE)
        assert response.status_code == 422

    def test_duplicate_is_409_and_missing_product_is_404(self, client: TestClient, users, make_product):
        make_product("iPhone13")
        client.post("/reviews/iPhone13", json={"score": 5, "comment": "Love it"}, headers=ALICE)

        response = client.post("/reviews/iPhone13", json={"score": 1, "comment": "Again"}, headers=ALICE)
        assert response.status_code == 409
        assert response.json()["error"] == "ReviewAlreadyExistsError"

        response = client.post("/reviews/ghost", json={"score": 1, "comment": "?"}, headers=ALICE)
        assert response.status_code == 404

    def test_delete_own_review(self, client: TestClient, users, make_product):
        make_product("iPhone13")
        client.post("/reviews/iPhone13", json={"score": 5, "comment": "Love it"}, headers=ALICE)

        assert client.delete("/reviews/iPhone13", headers=BOB).status_code == 404
        assert client.delete("/reviews/iPhone13", headers=ALICE).status_code == 200
        assert client.get("/reviews/iPhone13", headers=ALICE).json() == []

    def test_bulk_deletes_need_admin_or_manager(self, client: TestClient, users, make_product):
        make_product("iPhone13")
        client.post("/reviews/iPhone13", json={"score": 5, "comment": "Love it"}, headers=ALICE)
        client.post("/reviews/iPhone13", json={"score": 3, "comment": "Fine"}, headers=BOB)

        assert client.delete("/reviews/iPhone13/all", headers=ALICE).status_code == 403
        assert client.delete("/reviews", headers=ALICE).status_code == 403

        assert client.delete("/reviews/iPhone13/all", headers=MANAGER).status_code == 200
        assert client.get("/reviews/iPhone13", headers=ALICE).json() == []

        client.post("/reviews/iPhone13", json={"score": 4, "comment": "Back again"}, headers=ALICE)
        assert client.delete("/reviews", headers=MANAGER).status_code == 200
        assert client.get("/reviews/iPhone13", headers=ALICE).json() == []
