from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.errors import StoreError

from .schemas import InsertResult
from .service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=InsertResult)
async def register_user(info: dict[str, Any] = Body(...), db: AsyncSession = Depends(get_db)):
    try:
        user = await UserService.register_user(db, info)
    except SQLAlchemyError as e:
        raise StoreError("Failed to register user") from e
    return InsertResult(insertedId=user.id)
