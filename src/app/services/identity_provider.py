"""Identity Provider Interface

Defines the contract for checking submitted credentials.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping


class AuthError(Exception):
    """
    Provider-originated authentication failure

    `type` names the failure kind, e.g. "CredentialsSignin" for rejected
    credentials or "CallbackRouteError" for a provider-side fault.
    """

    def __init__(self, type: str, message: str = ""):
        super().__init__(message or type)
        self.type = type


class IdentityProvider(ABC):

    @abstractmethod
    async def sign_in(self, provider: str, form: Mapping[str, Any]) -> None:
        """
        Check credentials with the named provider

        On acceptance the provider redirects the caller itself (raises
        RedirectSignal). On rejection it raises AuthError.

        Args:
            provider: Provider id, e.g. "credentials"
            form: Raw submitted form fields
        """
        pass
