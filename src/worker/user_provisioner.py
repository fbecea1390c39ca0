"""User Provisioning Worker

Creates dashboard users so they can sign in through POST /login.
Run as a standalone script against the configured database.
"""

import asyncio
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Result
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.password_hasher import hash_password
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.auth import RegisterUser, RegisterUserCommandDTO, UserResponseDTO
import src.domain  # noqa: F401

logger = logging.getLogger(__name__)


class UserProvisionerWorker:
    """
    Worker that provisions dashboard users

    Usage:
        worker = UserProvisionerWorker()
        await worker.create_tables()
        result = await worker.create_user(command)
        await worker.shutdown()
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        hash_iterations: Optional[int] = None,
    ):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            hash_iterations: PBKDF2 rounds (defaults to ApplicationConfig.PASSWORD_HASH_ITERATIONS)
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.hash_iterations = hash_iterations or ApplicationConfig.PASSWORD_HASH_ITERATIONS

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    async def create_tables(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    def hash_password(self, password: str) -> str:
        return hash_password(password, iterations=self.hash_iterations)

    async def create_user(self, command: RegisterUserCommandDTO) -> Result[UserResponseDTO]:
        async with self.async_session_factory() as session:
            use_case = RegisterUser(
                uow=SqlAlchemyUnitOfWork(session),
                user_repo=SqlAlchemyUserRepository(session),
                password_hasher=self.hash_password,
            )
            return await use_case.execute(command)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        python -m src.worker.user_provisioner --name "User" --email user@nextmail.com

    The password is prompted for when --password is omitted.
    """
    import argparse
    import getpass
    import sys
    from pydantic import ValidationError

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Create a dashboard user")
    parser.add_argument("--name", required=True, help="Display name")
    parser.add_argument("--email", required=True, help="Login email")
    parser.add_argument("--password", help="Password (prompted when omitted)")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")

    try:
        command = RegisterUserCommandDTO(name=args.name, email=args.email, password=password)
    except ValidationError as e:
        print(f"Invalid user: {e}")
        sys.exit(2)

    worker = UserProvisionerWorker()
    try:
        await worker.create_tables()
        result = await worker.create_user(command)
    finally:
        await worker.shutdown()

    if result.is_err():
        print(f"Failed to create user: {result.error.message}")
        sys.exit(1)

    print(f"Created user {result.value.email} ({result.value.user_id})")


if __name__ == "__main__":
    asyncio.run(main())
