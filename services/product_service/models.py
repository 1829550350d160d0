from sqlalchemy import CheckConstraint, Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from shared.config.database import Base
from shared.identifiers import new_object_id


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("main_quantity >= 0", name="ck_products_main_quantity_non_negative"),
        CheckConstraint("min_qty >= 1", name="ck_products_min_qty_positive"),
    )

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String, nullable=False)
    brand = Column(String, nullable=True)
    category = Column(String, nullable=True, index=True)
    description = Column(String, nullable=True)
    image = Column(String, nullable=True)
    price = Column(Float, nullable=False)
    rating = Column(Float, nullable=True)
    min_qty = Column(Integer, nullable=False, default=1)
    main_quantity = Column(Integer, nullable=False) # live stock, decremented by orders
    stock = Column(Integer, nullable=False) # stock at creation time, never adjusted
    owner_email = Column(String, nullable=False, default="anonymous", index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
