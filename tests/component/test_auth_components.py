"""
Component tests for registration and login

The mobile client registers or logs in, stores the returned token and userId,
and uses them for every cart request.
"""
from fastapi.testclient import TestClient

import pytest


REGISTRATION = {"name": "Aigerim", "email": "aigerim@svdmebel.kz", "password": "divan-2024"}


def _register(test_client: TestClient, **overrides):
    return test_client.post("/auth/register", json={**REGISTRATION, **overrides})


class TestRegister:

    def test_register_returns_token_and_user_id(self, test_client: TestClient):
        response = _register(test_client)

        assert response.status_code == 201
        data = response.json()
        assert isinstance(data["userId"], int)
        assert data["name"] == "Aigerim"
        assert data["token"]
        assert "password" not in data

    def test_registered_token_opens_own_cart(self, test_client: TestClient):
        data = _register(test_client).json()
        headers = {"Authorization": f"Bearer {data['token']}"}

        response = test_client.get(f"/cart/{data['userId']}", headers=headers)

        assert response.status_code == 200
        assert response.json() == []

    def test_duplicate_email_is_rejected(self, test_client: TestClient):
        _register(test_client)

        response = _register(test_client, email="AIGERIM@svdmebel.kz", name="Other")

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    @pytest.mark.parametrize("overrides", [
        {"email": "not-an-email"},
        {"password": "123"},
        {"name": "   "},
        {"name": ""},
    ])
    def test_invalid_registration(self, test_client: TestClient, overrides):
        assert _register(test_client, **overrides).status_code == 422


class TestLogin:

    def test_login_returns_fresh_token(self, test_client: TestClient):
        registered = _register(test_client).json()

        response = test_client.post(
            "/auth/login", json={"email": "Aigerim@svdmebel.kz", "password": "divan-2024"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == registered["userId"]
        assert data["token"]

    def test_wrong_password(self, test_client: TestClient):
        _register(test_client)

        response = test_client.post(
            "/auth/login", json={"email": "aigerim@svdmebel.kz", "password": "wrong-password"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_unknown_email(self, test_client: TestClient):
        response = test_client.post(
            "/auth/login", json={"email": "nobody@svdmebel.kz", "password": "divan-2024"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"


def test_register_login_and_shop(test_client: TestClient):
    """The client flow: register, log in, add to cart, read the cart back."""
    _register(test_client)
    login = test_client.post(
        "/auth/login", json={"email": "aigerim@svdmebel.kz", "password": "divan-2024"}
    ).json()
    headers = {"Authorization": f"Bearer {login['token']}"}

    added = test_client.post("/cart/add", json={"productId": 7, "quantity": 1}, headers=headers)
    assert added.status_code == 201
    assert added.json()["user_id"] == login["userId"]

    cart = test_client.get(f"/cart/{login['userId']}", headers=headers).json()
    assert [item["product_id"] for item in cart] == [7]
