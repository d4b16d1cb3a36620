"""Application tests for registration, login and session tokens."""

from datetime import timedelta

import pytest
from protean.utils.globals import current_domain
from storefront.errors import ErrorCode, StorefrontError
from storefront.identity.credentials import decode_token, hash_password, issue_token, verify_password
from storefront.identity.registration import LogIn, RegisterUser
from storefront.identity.user import User
from storefront.ordering.cart import Cart


def _register(**overrides):
    defaults = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "password": "analytical-engine",
        "age": 36,
    }
    defaults.update(overrides)
    return current_domain.process(RegisterUser(**defaults), asynchronous=False)


def _log_in(email="ada@example.com", password="analytical-engine"):
    return current_domain.process(LogIn(email=email, password=password), asynchronous=False)


class TestRegisterUser:
    def test_register_creates_user_and_cart(self):
        user = _register()

        stored = current_domain.repository_for(User).get(user["id"])
        assert stored.email == "ada@example.com"
        assert stored.password != "analytical-engine"
        cart = current_domain.repository_for(Cart).get(user["cart_id"])
        assert cart.owner_email == "ada@example.com"

    def test_register_returns_public_fields_only(self):
        user = _register()
        assert "password" not in user
        assert user["role"] == "user"

    def test_duplicate_email(self):
        _register()
        with pytest.raises(StorefrontError) as exc_info:
            _register(email="ADA@example.com")
        assert exc_info.value.code == ErrorCode.USER_ALREADY_EXISTS


class TestLogIn:
    def test_valid_credentials(self):
        registered = _register()
        user = _log_in()
        assert user["id"] == registered["id"]
        assert current_domain.repository_for(User).get(registered["id"]).last_login_at is not None

    def test_wrong_password(self):
        _register()
        with pytest.raises(StorefrontError) as exc_info:
            _log_in(password="wrong")
        assert exc_info.value.code == ErrorCode.INVALID_CREDENTIALS

    def test_unknown_user(self):
        with pytest.raises(StorefrontError) as exc_info:
            _log_in(email="nobody@example.com")
        assert exc_info.value.status == 401

    def test_configured_admin(self, settings_env):
        settings_env(ADMIN_EMAIL="admin@example.com", ADMIN_PASSWORD="s3cret")
        user = _log_in(email="admin@example.com", password="s3cret")
        assert user["role"] == "admin"
        assert user["id"] is None

    def test_configured_admin_wrong_password(self, settings_env):
        settings_env(ADMIN_EMAIL="admin@example.com", ADMIN_PASSWORD="s3cret")
        with pytest.raises(StorefrontError):
            _log_in(email="admin@example.com", password="guess")


class TestCredentials:
    def test_hash_and_verify(self):
        password_hash = hash_password("analytical-engine")
        assert verify_password("analytical-engine", password_hash)
        assert not verify_password("difference-engine", password_hash)

    def test_verify_rejects_malformed_hash(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False

    def test_token_round_trip_keeps_claims(self):
        claims = decode_token(issue_token({"id": "u-1", "email": "ada@example.com", "role": "user"}))
        assert claims["email"] == "ada@example.com"
        assert claims["sub"] == "u-1"

    def test_expired_token(self):
        token = issue_token({"id": "u-1", "email": "ada@example.com"}, expires_in=timedelta(seconds=-1))
        with pytest.raises(StorefrontError) as exc_info:
            decode_token(token)
        assert exc_info.value.code == ErrorCode.NOT_AUTHENTICATED

    def test_tampered_token(self):
        token = issue_token({"id": "u-1", "email": "ada@example.com"})
        with pytest.raises(StorefrontError):
            decode_token(token[:-2] + "xx")
