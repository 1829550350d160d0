from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Product


class ProductRepository:

    @staticmethod
    async def create_product(db: AsyncSession, product: Product) -> Product:
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def list_products(
        db: AsyncSession,
        category: Optional[str] = None,
        owner_email: Optional[str] = None,
    ) -> list[Product]:
        stmt = select(Product)
        if category:
            stmt = stmt.where(Product.category == category)
        if owner_email:
            stmt = stmt.where(Product.owner_email == owner_email)
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: str) -> Optional[Product]:
        result = await db.execute(select(Product).where(Product.id == product_id))
        return result.scalars().first()

    @staticmethod
    async def update_product(db: AsyncSession, product_id: str, changes: dict) -> int:
        """Applies a partial update and returns the number of matched rows."""
        if not changes:
            product = await ProductRepository.get_product_by_id(db, product_id)
            return 1 if product else 0
        result = await db.execute(
            update(Product).where(Product.id == product_id).values(**changes)
        )
        await db.commit()
        return result.rowcount

    @staticmethod
    async def reserve_stock(db: AsyncSession, product_id: str, quantity: int) -> bool:
        """
        Takes `quantity` units in a single conditional UPDATE.

        The stock check is part of the WHERE clause, so two concurrent callers
        can never both succeed against the same units. Does not commit: the
        caller owns the transaction.
        """
        result = await db.execute(
            update(Product)
            .where(Product.id == product_id, Product.main_quantity >= quantity)
            .values(main_quantity=Product.main_quantity - quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    @staticmethod
    async def restore_stock(db: AsyncSession, product_id: str, quantity: int) -> bool:
        """Gives `quantity` units back. Does not commit."""
        result = await db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(main_quantity=Product.main_quantity + quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
