from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from shared.config.database import Base
from shared.identifiers import new_object_id


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(24), primary_key=True, default=new_object_id)
    # Plain reference, no FK: orders outlive catalog changes
    product_id = Column(String(24), nullable=False, index=True)

    # Snapshot of the product at order time
    product_name = Column(String, nullable=True)
    product_image = Column(String, nullable=True)
    category = Column(String, nullable=True)
    description = Column(String, nullable=True)
    min_buy_qty = Column(Integer, nullable=False)

    quantity = Column(Integer, nullable=False)
    buyer_name = Column(String, nullable=False)
    buyer_email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    total = Column(Float, nullable=False) # price * quantity, fixed at creation
    date = Column(DateTime(timezone=True), server_default=func.now())
