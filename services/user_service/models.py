from sqlalchemy import JSON, Column, DateTime, String
from sqlalchemy.sql import func

from shared.config.database import Base
from shared.identifiers import new_object_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_object_id)
    # Whatever the client registered with, stored as-is
    info = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
