from .unit_of_work import SqlAlchemyUnitOfWork
from .view_cache import InMemoryViewCache
from .navigator import HttpNavigator
from .identity_provider import CredentialsIdentityProvider
from .password_hasher import hash_password, verify_password

__all__ = [
    "SqlAlchemyUnitOfWork",
    "InMemoryViewCache",
    "HttpNavigator",
    "CredentialsIdentityProvider",
    "hash_password",
    "verify_password",
]
