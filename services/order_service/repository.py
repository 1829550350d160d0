from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Order


class OrderRepository:
    @staticmethod
    async def add_order(db: AsyncSession, order: Order) -> Order:
        """Stages the order in the current transaction without committing."""
        db.add(order)
        await db.flush()
        return order

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str) -> Optional[Order]:
        result = await db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    @staticmethod
    async def list_by_buyer(db: AsyncSession, buyer_email: str) -> list[Order]:
        result = await db.execute(select(Order).where(Order.buyer_email == buyer_email))
        return list(result.scalars().all())

    @staticmethod
    async def delete_order(db: AsyncSession, order_id: str) -> bool:
        """
        Deletes the order row. Returns False when another request got there
        first. Does not commit.
        """
        result = await db.execute(
            delete(Order)
            .where(Order.id == order_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
