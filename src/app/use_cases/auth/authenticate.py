"""Authenticate Use Case

Forwards a login form to the identity provider and maps provider failures to
messages shown on the login form.
"""

import logging
from typing import Any, Mapping, Optional
from src.app.services.identity_provider import IdentityProvider, AuthError

logger = logging.getLogger(__name__)

CREDENTIALS_SIGNIN = "CredentialsSignin"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_FAILURE_MESSAGE = "Something went wrong."


class Authenticate:
    """
    Use Case: Sign in with submitted credentials

    - Accepted: the provider redirects the caller; nothing is returned here
    - Rejected with CredentialsSignin: "Invalid credentials."
    - Rejected with any other AuthError type: "Something went wrong."
    - Any other exception propagates unchanged
    """

    def __init__(self, identity_provider: IdentityProvider, provider: str = "credentials"):
        self.identity_provider = identity_provider
        self.provider = provider

    async def execute(self, form: Mapping[str, Any]) -> Optional[str]:
        try:
            await self.identity_provider.sign_in(self.provider, form)
        except AuthError as e:
            if e.type == CREDENTIALS_SIGNIN:
                logger.info("Sign in rejected: invalid credentials")
                return INVALID_CREDENTIALS_MESSAGE
            logger.warning(f"Sign in failed with provider error {e.type}: {e}")
            return GENERIC_FAILURE_MESSAGE
        return None
