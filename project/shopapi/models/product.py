# shopapi/models/product.py

from sqlalchemy import Column, Integer, String, Text, Float, DateTime, JSON
from shopapi.utils.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True, index=True)

    name        = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    price       = Column(Float, nullable=False)
    images      = Column(JSON, nullable=False, default=list)    # список URL по порядку
    variants    = Column(JSON, nullable=False, default=list)    # [{id, name, stock}]
    category_id = Column(String, nullable=True, index=True)
    total_stock = Column(Integer, nullable=False, default=0)    # сумма по вариантам или вручную

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
