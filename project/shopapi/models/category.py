# shopapi/models/category.py

from sqlalchemy import Column, String, DateTime
from shopapi.utils.database import Base

class Category(Base):
    __tablename__ = "categories"

    id         = Column(String, primary_key=True, index=True)
    name       = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
