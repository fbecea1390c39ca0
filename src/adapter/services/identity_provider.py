"""Identity Provider Implementations

Credentials sign-in backed by the users table.
"""

import logging
from typing import Any, Mapping, Optional
from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from src.app.repositories.user_repository import UserRepository
from src.app.services.identity_provider import IdentityProvider, AuthError
from src.app.services.navigator import Navigator
from src.adapter.services.password_hasher import verify_password

logger = logging.getLogger(__name__)


class CredentialsSchema(BaseModel):
    """Shape of a credentials login form"""

    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6)


def safe_redirect_path(value: Optional[Any], default: str) -> str:
    """Only local paths are accepted as redirect targets"""
    if isinstance(value, str) and value.startswith("/") and not value.startswith("//"):
        return value
    return default


class CredentialsIdentityProvider(IdentityProvider):
    """
    Checks email and password against stored users

    Failure kinds:
    - CredentialsSignin: malformed form, unknown email or wrong password
    - InvalidProvider: provider id other than "credentials"
    - CallbackRouteError: the user lookup itself failed

    On success the caller is redirected to the form's redirectTo (local
    paths only) or to the default path.
    """

    provider_id = "credentials"

    def __init__(self, user_repo: UserRepository, navigator: Navigator, default_redirect: str = "/dashboard"):
        self.user_repo = user_repo
        self.navigator = navigator
        self.default_redirect = default_redirect

    async def sign_in(self, provider: str, form: Mapping[str, Any]) -> None:
        if provider != self.provider_id:
            raise AuthError("InvalidProvider", f"Unknown provider: {provider}")

        try:
            credentials = CredentialsSchema(
                email=form.get("email"),
                password=form.get("password"),
            )
        except ValidationError:
            raise AuthError("CredentialsSignin", "Malformed credentials")

        try:
            user = await self.user_repo.get_by_email(credentials.email)
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch user: {e}")
            raise AuthError("CallbackRouteError", "Failed to fetch user") from e

        if user is None or not verify_password(credentials.password, user.password):
            raise AuthError("CredentialsSignin", "Invalid email or password")

        logger.info(f"User {user.id} signed in")
        self.navigator.redirect(safe_redirect_path(form.get("redirectTo"), self.default_redirect))
