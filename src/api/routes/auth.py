"""Authentication API Routes"""

from fastapi import APIRouter, Depends, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.app.use_cases.auth import Authenticate, GENERIC_FAILURE_MESSAGE
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.identity_provider import CredentialsIdentityProvider
from src.adapter.services.navigator import HttpNavigator
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    status_code=status.HTTP_303_SEE_OTHER,
    responses={
        303: {"description": "Signed in, redirect to redirectTo or the dashboard"},
        401: {
            "description": "Sign in rejected",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "AUTHENTICATION_FAILED",
                            "message": "Invalid credentials."
                        }
                    }
                }
            }
        }
    }
)
async def login(request: Request, session: AsyncSession = Depends(get_session)):
    """
    Sign in with a credentials form.

    **Form fields:**
    - `email` (required)
    - `password` (required, at least 6 characters)
    - `redirectTo` (optional): local path to land on after sign in
    """
    form = await request.form()
    identity_provider = CredentialsIdentityProvider(
        SqlAlchemyUserRepository(session),
        HttpNavigator(),
        default_redirect=ApplicationConfig.LOGIN_REDIRECT_PATH,
    )
    # The provider redirects on success, so reaching this point is a rejection
    message = await Authenticate(identity_provider).execute(form)
    raise ClientError(
        Error(code="AUTHENTICATION_FAILED", message=message or GENERIC_FAILURE_MESSAGE),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )
