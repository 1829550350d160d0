import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from services.product_service.repository import ProductRepository
from services.product_service.service import ensure_product_id
from shared.errors import NotFoundError, ValidationError
from shared.identifiers import is_valid_object_id
from shared.observability import (
    b2b_order_cancellations_total,
    b2b_orders_total,
    b2b_stock_reserved_units_total,
    b2b_stock_restored_units_total,
)

from .models import Order
from .repository import OrderRepository
from .schemas import OrderCreate

logger = structlog.get_logger(__name__)


class OrderService:
    @staticmethod
    async def place_order(db: AsyncSession, data: OrderCreate) -> Order:
        """
        Reserves stock and records the order in one transaction.

        The stock check that decides is the conditional decrement in
        ProductRepository.reserve_stock; the earlier read only supplies the
        snapshot, the minimum-quantity rule and an early rejection of
        quantities that cannot fit. Any failure rolls back both
        the reservation and the order row.
        """
        ensure_product_id(data.product_id)
        try:
            product = await ProductRepository.get_product_by_id(db, data.product_id)
            if not product:
                raise NotFoundError("Product not found or not added yet")

            if data.quantity < product.min_qty:
                raise ValidationError(f"Minimum order is {product.min_qty}")

            # Keeps oversized integers away from the driver; reserve_stock still decides
            if data.quantity > product.main_quantity:
                raise ValidationError("Not enough stock")

            if not await ProductRepository.reserve_stock(db, product.id, data.quantity):
                raise ValidationError("Not enough stock")

            order = Order(
                product_id=product.id,
                product_name=product.name,
                product_image=product.image,
                category=product.category,
                description=product.description,
                min_buy_qty=product.min_qty,
                quantity=data.quantity,
                buyer_name=data.buyer_name,
                buyer_email=data.buyer_email,
                phone=data.phone,
                address=data.address,
                total=product.price * data.quantity,
            )
            await OrderRepository.add_order(db, order)
            await db.commit()
        except (NotFoundError, ValidationError) as e:
            await db.rollback()
            b2b_orders_total.labels(status="rejected").inc()
            logger.info("order_rejected", product_id=data.product_id, quantity=data.quantity, reason=e.message)
            raise
        except Exception:
            await db.rollback()
            b2b_orders_total.labels(status="failed").inc()
            raise

        b2b_orders_total.labels(status="success").inc()
        b2b_stock_reserved_units_total.inc(data.quantity)
        logger.info(
            "order_placed",
            order_id=order.id,
            product_id=order.product_id,
            quantity=order.quantity,
            total=order.total,
        )
        return order

    @staticmethod
    async def cancel_order(db: AsyncSession, order_id: str) -> None:
        """Deletes the order and gives its units back to the product."""
        if not is_valid_object_id(order_id):
            raise ValidationError("Invalid order id")
        try:
            order = await OrderRepository.get_order(db, order_id)
            # Only the request whose DELETE removed the row may restore stock
            if not order or not await OrderRepository.delete_order(db, order_id):
                raise NotFoundError("Order not found")

            await ProductRepository.restore_stock(db, order.product_id, order.quantity)
            await db.commit()
        except NotFoundError:
            await db.rollback()
            b2b_order_cancellations_total.labels(status="not_found").inc()
            raise
        except Exception:
            await db.rollback()
            raise

        b2b_order_cancellations_total.labels(status="success").inc()
        b2b_stock_restored_units_total.inc(order.quantity)
        logger.info("order_cancelled", order_id=order_id, product_id=order.product_id, quantity=order.quantity)

    @staticmethod
    async def list_cart(db: AsyncSession, buyer_email: str) -> list[Order]:
        return await OrderRepository.list_by_buyer(db, buyer_email)
