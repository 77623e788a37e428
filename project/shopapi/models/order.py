# shopapi/models/order.py

from sqlalchemy import Column, String, Text, Float, DateTime, JSON
from shopapi.utils.database import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(String, primary_key=True, index=True)

    customer_id   = Column(String, nullable=False, index=True)
    items         = Column(JSON, nullable=False)                     # [{productId, variantId, quantity, price}]
    total         = Column(Float, nullable=False)
    status        = Column(String, nullable=False, default="processing")
    delivery_type = Column(String, nullable=False, default="delivery")
    notes         = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
