"""Data Transfer Objects for Authentication Use Cases"""

from pydantic import BaseModel, Field


class RegisterUserCommandDTO(BaseModel):
    """
    Command DTO for provisioning a dashboard user

    Used as input to RegisterUser use case.
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Display name"
    )

    email: str = Field(
        ...,
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="Login email (unique)"
    )

    password: str = Field(
        ...,
        min_length=6,
        description="Raw password (at least 6 characters), hashed before storage"
    )


class UserResponseDTO(BaseModel):
    """
    Response DTO for a provisioned user

    Never carries the password hash.
    """

    user_id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email")
