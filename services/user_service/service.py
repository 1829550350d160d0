from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from .models import User
from .repository import UserRepository

logger = structlog.get_logger(__name__)


class UserService:

    # No uniqueness or schema rules: registration stores the document verbatim
    @staticmethod
    async def register_user(db: AsyncSession, info: dict[str, Any]) -> User:
        user = await UserRepository.create(db, User(info=info))
        logger.info("user_registered", user_id=user.id)
        return user
