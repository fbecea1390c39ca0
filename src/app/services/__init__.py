from .unit_of_work import UnitOfWork
from .view_cache import ViewCache
from .navigator import Navigator, RedirectSignal
from .identity_provider import IdentityProvider, AuthError

__all__ = [
    "UnitOfWork",
    "ViewCache",
    "Navigator",
    "RedirectSignal",
    "IdentityProvider",
    "AuthError",
]
