"""Unit tests for CredentialsIdentityProvider"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import OperationalError

from src.app.services.identity_provider import AuthError
from src.app.services.navigator import RedirectSignal
from src.adapter.services.identity_provider import CredentialsIdentityProvider, safe_redirect_path
from src.adapter.services.navigator import HttpNavigator
from src.adapter.services.password_hasher import hash_password
from src.domain.user import User


@pytest.fixture
def sample_user():
    return User(
        id="user_1",
        name="User",
        email="user@nextmail.com",
        password=hash_password("123456", iterations=1000),
    )


@pytest.fixture
def mock_user_repo(sample_user):
    repo = MagicMock()
    repo.get_by_email = AsyncMock(
        side_effect=lambda email: sample_user if email == sample_user.email else None
    )
    return repo


@pytest.fixture
def provider(mock_user_repo):
    return CredentialsIdentityProvider(mock_user_repo, HttpNavigator())


@pytest.mark.asyncio
class TestCredentialsIdentityProvider:

    async def test_valid_credentials_redirect_to_dashboard(self, provider):
        with pytest.raises(RedirectSignal) as redirect:
            await provider.sign_in("credentials", {"email": "user@nextmail.com", "password": "123456"})

        assert redirect.value.path == "/dashboard"

    async def test_valid_credentials_redirect_to_requested_path(self, provider):
        with pytest.raises(RedirectSignal) as redirect:
            await provider.sign_in(
                "credentials",
                {"email": "user@nextmail.com", "password": "123456", "redirectTo": "/dashboard/invoices"},
            )

        assert redirect.value.path == "/dashboard/invoices"

    async def test_wrong_password(self, provider):
        with pytest.raises(AuthError) as error:
            await provider.sign_in("credentials", {"email": "user@nextmail.com", "password": "wrong-pass"})

        assert error.value.type == "CredentialsSignin"

    async def test_unknown_user(self, provider):
        with pytest.raises(AuthError) as error:
            await provider.sign_in("credentials", {"email": "nobody@nextmail.com", "password": "123456"})

        assert error.value.type == "CredentialsSignin"

    @pytest.mark.parametrize(
        "form",
        [
            {},
            {"email": "not-an-email", "password": "123456"},
            {"email": "user@nextmail.com", "password": "123"},
        ],
    )
    async def test_malformed_form(self, provider, mock_user_repo, form):
        with pytest.raises(AuthError) as error:
            await provider.sign_in("credentials", form)

        assert error.value.type == "CredentialsSignin"
        mock_user_repo.get_by_email.assert_not_called()

    async def test_unknown_provider(self, provider):
        with pytest.raises(AuthError) as error:
            await provider.sign_in("github", {"email": "user@nextmail.com", "password": "123456"})

        assert error.value.type == "InvalidProvider"

    async def test_lookup_failure_is_provider_error(self, provider, mock_user_repo):
        mock_user_repo.get_by_email = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("db down"))
        )

        with pytest.raises(AuthError) as error:
            await provider.sign_in("credentials", {"email": "user@nextmail.com", "password": "123456"})

        assert error.value.type == "CallbackRouteError"


class TestSafeRedirectPath:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("/dashboard/invoices", "/dashboard/invoices"),
            (None, "/dashboard"),
            ("", "/dashboard"),
            ("https://evil.example", "/dashboard"),
            ("//evil.example", "/dashboard"),
        ],
    )
    def test_only_local_paths(self, value, expected):
        assert safe_redirect_path(value, "/dashboard") == expected
