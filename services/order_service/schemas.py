from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from services.product_service.schemas import CamelModel


class OrderCreate(CamelModel):
    product_id: str
    quantity: int
    buyer_name: str
    buyer_email: str
    phone: Optional[str] = None
    address: Optional[str] = None


class OrderPlaced(BaseModel):
    message: str
    orderId: str


class OrderResponse(CamelModel):
    id: str
    product_id: str
    product_name: Optional[str] = None
    product_image: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    min_buy_qty: int
    quantity: int
    buyer_name: str
    buyer_email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    total: float
    date: Optional[datetime] = None
