from abc import abstractmethod
from typing import Optional

from ..models.user import User
from .entity_repository import EntityRepository


class UserRepository(EntityRepository[User]):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address (None when absent)"""
        pass
