"""
Tests for the authentication endpoints.

Covers:
- Login with stored users and the claims embedded into credentials
- Password reset request for known and unknown emails
- Password reset completion and its error mapping
- Request validation and key discovery
"""

import logging

import jwt
import pytest

from keyforge_auth import PasswordHashingService, User
from tests.shared.fixtures.api import (  # noqa: F401
    API_V1_PREFIX,
    api_client,
    database_url,
    notifier,
    seed_users,
)

TEST_EMAIL = "u1@example.com"
TEST_PASSWORD = "p0"

PASSWORD_SERVICE = PasswordHashingService(rounds=4)


@pytest.fixture
def registered_user(seed_users) -> User:
    user = User(
        email=TEST_EMAIL,
        password_hash=PASSWORD_SERVICE.hash(TEST_PASSWORD),
        claims={"role": "admin", "name": "Ada"},
    )
    seed_users(user)
    return user


class TestLogin:
    """Tests for POST /v1/auth/login."""

    def test_login_success(self, registered_user, api_client):
        """Valid credentials return an ES512 token with the user's claims."""
        response = api_client.post(
            f"{API_V1_PREFIX}/auth/login",
            json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        token = response.json()["access_token"]

        public_key = api_client.get(f"{API_V1_PREFIX}/auth/public-key").json()
        decoded = jwt.decode(
            token,
            public_key["public_key"],
            algorithms=[public_key["algorithm"]],
        )
        assert decoded["email"] == TEST_EMAIL
        assert decoded["role"] == "admin"
        assert decoded["name"] == "Ada"

    def test_login_wrong_password(self, registered_user, api_client, caplog):
        """A wrong password is 401 and the password never reaches the log."""
        with caplog.at_level(logging.WARNING):
            response = api_client.post(
                f"{API_V1_PREFIX}/auth/login",
                json={"email": TEST_EMAIL, "password": "wrong-secret"},
            )

        assert response.status_code == 401
        assert response.json() == {"detail": "invalid credentials"}
        assert TEST_EMAIL in caplog.text
        assert "wrong-secret" not in caplog.text

    def test_login_unknown_user(self, api_client):
        """Unknown users get the same 401 as wrong passwords."""
        response = api_client.post(
            f"{API_V1_PREFIX}/auth/login",
            json={"email": "nobody@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json() == {"detail": "invalid credentials"}

    @pytest.mark.parametrize(
        "body",
        [
            {"email": "", "password": TEST_PASSWORD},
            {"email": TEST_EMAIL, "password": ""},
            {"email": TEST_EMAIL},
        ],
    )
    def test_login_rejects_empty_fields(self, api_client, body):
        """Missing or empty fields are validation errors."""
        response = api_client.post(f"{API_V1_PREFIX}/auth/login", json=body)

        assert response.status_code == 422


class TestPasswordResetRequest:
    """Tests for POST /v1/auth/password-reset-request."""

    def test_known_email_sends_token(self, registered_user, api_client, notifier):
        """A reset token is delivered to the user."""
        response = api_client.post(
            f"{API_V1_PREFIX}/auth/password-reset-request",
            json={"email": TEST_EMAIL},
        )

        assert response.status_code == 201
        assert len(notifier.sent) == 1
        assert notifier.sent[0].recipient == TEST_EMAIL
        assert len(notifier.last_token) == 64
        assert notifier.sent[0].claims["name"] == "Ada"

    def test_unknown_email_looks_the_same(self, api_client, notifier, caplog):
        """Unknown emails also answer 201 and send nothing."""
        with caplog.at_level(logging.WARNING):
            response = api_client.post(
                f"{API_V1_PREFIX}/auth/password-reset-request",
                json={"email": "nobody@example.com"},
            )

        assert response.status_code == 201
        assert notifier.sent == []
        assert "nobody@example.com" in caplog.text

    def test_token_is_not_logged(self, registered_user, api_client, notifier, caplog):
        """The token value never appears in the log."""
        with caplog.at_level(logging.DEBUG):
            api_client.post(
                f"{API_V1_PREFIX}/auth/password-reset-request",
                json={"email": TEST_EMAIL},
            )

        assert notifier.last_token not in caplog.text


class TestPasswordReset:
    """Tests for POST /v1/auth/password-reset."""

    def _request_token(self, api_client, notifier) -> str:
        response = api_client.post(
            f"{API_V1_PREFIX}/auth/password-reset-request",
            json={"email": TEST_EMAIL},
        )
        assert response.status_code == 201
        return notifier.last_token

    def _login(self, api_client, password: str) -> int:
        return api_client.post(
            f"{API_V1_PREFIX}/auth/login",
            json={"email": TEST_EMAIL, "password": password},
        ).status_code

    def test_reset_success(self, registered_user, api_client, notifier):
        """The new password works and the old one stops working."""
        token = self._request_token(api_client, notifier)

        response = api_client.post(
            f"{API_V1_PREFIX}/auth/password-reset",
            json={"email": TEST_EMAIL, "reset_token": token, "password": "p1"},
        )

        assert response.status_code == 204
        assert self._login(api_client, "p1") == 200
        assert self._login(api_client, TEST_PASSWORD) == 401

    def test_reused_token_is_rejected(self, registered_user, api_client, notifier):
        """Tokens are single use."""
        token = self._request_token(api_client, notifier)
        url = f"{API_V1_PREFIX}/auth/password-reset"
        body = {"email": TEST_EMAIL, "reset_token": token, "password": "p1"}
        assert api_client.post(url, json=body).status_code == 204

        response = api_client.post(url, json=body)

        assert response.status_code == 400
        assert response.json() == {
            "detail": "reset-token is invalid or token email combination is not correct",
        }

    def test_wrong_email_is_rejected(self, registered_user, api_client, notifier):
        """A token does not work for another email."""
        token = self._request_token(api_client, notifier)

        response = api_client.post(
            f"{API_V1_PREFIX}/auth/password-reset",
            json={"email": "other@example.com", "reset_token": token, "password": "p1"},
        )

        assert response.status_code == 400
        assert self._login(api_client, TEST_PASSWORD) == 200

    def test_unknown_token_is_rejected(self, registered_user, api_client):
        """Made-up tokens are rejected."""
        response = api_client.post(
            f"{API_V1_PREFIX}/auth/password-reset",
            json={"email": TEST_EMAIL, "reset_token": "0" * 64, "password": "p1"},
        )

        assert response.status_code == 400

    def test_empty_password_is_rejected(self, registered_user, api_client, notifier):
        """An empty new password is a validation error."""
        token = self._request_token(api_client, notifier)

        response = api_client.post(
            f"{API_V1_PREFIX}/auth/password-reset",
            json={"email": TEST_EMAIL, "reset_token": token, "password": ""},
        )

        assert response.status_code == 422

    def test_password_over_72_bytes_is_rejected(
        self,
        registered_user,
        api_client,
        notifier,
    ):
        """The length limit counts UTF-8 bytes, so 72 two-byte characters fail."""
        token = self._request_token(api_client, notifier)

        response = api_client.post(
            f"{API_V1_PREFIX}/auth/password-reset",
            json={"email": TEST_EMAIL, "reset_token": token, "password": "é" * 72},
        )

        assert response.status_code == 422
        assert "72 bytes" in response.text
        assert self._login(api_client, TEST_PASSWORD) == 200

    def test_multibyte_password_at_limit(self, registered_user, api_client, notifier):
        """A 72 byte multibyte password is accepted and works for login."""
        token = self._request_token(api_client, notifier)

        response = api_client.post(
            f"{API_V1_PREFIX}/auth/password-reset",
            json={"email": TEST_EMAIL, "reset_token": token, "password": "é" * 36},
        )

        assert response.status_code == 204
        assert self._login(api_client, "é" * 36) == 200


class TestDiscovery:
    """Tests for unauthenticated informational endpoints."""

    def test_health(self, api_client):
        """Health is unversioned."""
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_public_key(self, api_client):
        """The verification key is published as PEM."""
        response = api_client.get(f"{API_V1_PREFIX}/auth/public-key")

        assert response.status_code == 200
        body = response.json()
        assert body["algorithm"] == "ES512"
        assert body["public_key"].startswith("-----BEGIN PUBLIC KEY-----")
