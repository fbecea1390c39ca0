"""RegisterUser Use Case

Provisions an account that can sign in through the credentials provider.
"""

import logging
from typing import Callable
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.user_repository import UserRepository
from src.domain.user import User
from .dtos import RegisterUserCommandDTO, UserResponseDTO

logger = logging.getLogger(__name__)


class RegisterUser:
    """
    Use Case: Create a dashboard user

    Business Rules:
    1. Email must not belong to an existing user
    2. Only the password hash is stored

    Flow:
    1. Check for an existing user with the same email
    2. Hash the password
    3. Create user and commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        password_hasher: Callable[[str], str],
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.password_hasher = password_hasher

    async def execute(self, command: RegisterUserCommandDTO) -> Result[UserResponseDTO]:
        try:
            existing = await self.user_repo.get_by_email(command.email)
            if existing is not None:
                return Return.err(
                    Error(
                        code="USER_ALREADY_EXISTS",
                        message=f"User with email {command.email} already exists",
                    )
                )

            user = User(
                name=command.name,
                email=command.email,
                password=self.password_hasher(command.password),
            )
            created = await self.user_repo.create(user)
            await self.uow.commit()

        except Exception as e:
            logger.error(f"Failed to create user {command.email}: {e}")
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_USER_FAILED",
                    message="Failed to create user",
                    reason=str(e),
                )
            )

        logger.info(f"Created user {created.id}")
        return Return.ok(
            UserResponseDTO(user_id=created.id, name=created.name, email=created.email)
        )
