"""Authentication use cases"""
from .authenticate import (
    Authenticate,
    CREDENTIALS_SIGNIN,
    INVALID_CREDENTIALS_MESSAGE,
    GENERIC_FAILURE_MESSAGE,
)
from .register_user import RegisterUser
from .dtos import RegisterUserCommandDTO, UserResponseDTO

__all__ = [
    "Authenticate",
    "CREDENTIALS_SIGNIN",
    "INVALID_CREDENTIALS_MESSAGE",
    "GENERIC_FAILURE_MESSAGE",
    "RegisterUser",
    "RegisterUserCommandDTO",
    "UserResponseDTO",
]
