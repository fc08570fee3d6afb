# Standard library imports
import logging
from typing import Any, Dict, Mapping, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_entity_repository import MongoEntityRepository
from .single_table import EntitySchema, SingleTableStore

logger = logging.getLogger(__name__)


def user_schema(service: str) -> EntitySchema:
    """Single-table layout of the User entity, with an email secondary index"""
    return EntitySchema(
        entity=UserFields.ENTITY,
        service=service,
        identity=UserFields.USER_ID,
        attributes=(
            UserFields.USER_ID,
            UserFields.NAME,
            UserFields.EMAIL,
            UserFields.PASSWORD_HASH,
        ),
        pk_composite=(UserFields.USER_ID,),
        gsi1_pk_composite=(UserFields.EMAIL,),
        nullable=(UserFields.PASSWORD_HASH,),
    )


class MongoUserRepository(MongoEntityRepository[User], UserRepository):
    """MongoDB single-table implementation of UserRepository"""

    def __init__(self, table_collection: AsyncIOMotorCollection, service: str = "ton-service") -> None:
        super().__init__(SingleTableStore(table_collection, user_schema(service)))

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address through the secondary index

        Args:
            email: Email address to search for (case-sensitive)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            items = await self.store.query_index({UserFields.EMAIL: email}, limit=1)
        except PyMongoError as e:
            logger.error(f"Error finding user by email: {e}", exc_info=True)
            raise

        if not items:
            return None
        return self._load_entity(items[0])

    def _to_entity(self, attributes: Mapping[str, Any]) -> User:
        return User(
            user_id=attributes.get(UserFields.USER_ID) or "",
            name=attributes.get(UserFields.NAME) or "",
            email=attributes.get(UserFields.EMAIL) or "",
            password_hash=attributes.get(UserFields.PASSWORD_HASH),
        )

    def _to_attributes(self, user: User) -> Dict[str, Any]:
        return {
            UserFields.USER_ID: user.user_id,
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD_HASH: user.password_hash,
        }
