from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from services.product_service.schemas import MessageResponse
from shared.config.database import get_db
from shared.errors import StoreError

from .schemas import OrderCreate, OrderPlaced, OrderResponse
from .service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

# A buyer's "cart" is the list of orders they have already placed
cart_router = APIRouter(prefix="/cart", tags=["Cart"])


@router.post("", response_model=OrderPlaced)
async def place_order(order: OrderCreate, db: AsyncSession = Depends(get_db)):
    try:
        placed = await OrderService.place_order(db, order)
    except SQLAlchemyError as e:
        raise StoreError("Failed to place order") from e
    return OrderPlaced(message="Order placed successfully", orderId=placed.id)


@cart_router.get("/{email}", response_model=list[OrderResponse])
async def get_cart(email: str, db: AsyncSession = Depends(get_db)):
    try:
        return await OrderService.list_cart(db, email)
    except SQLAlchemyError as e:
        raise StoreError("Failed to fetch orders") from e


@cart_router.delete("/{order_id}", response_model=MessageResponse)
async def cancel_order(order_id: str, db: AsyncSession = Depends(get_db)):
    try:
        await OrderService.cancel_order(db, order_id)
    except SQLAlchemyError as e:
        raise StoreError("Failed to remove order") from e
    return MessageResponse(message="Order removed and stock updated")
