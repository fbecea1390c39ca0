"""User Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.user import User


class UserRepository(ABC):

    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve user by login email

        Returns:
            User if found, None otherwise
        """
        pass
