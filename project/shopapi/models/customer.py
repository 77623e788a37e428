# shopapi/models/customer.py

from sqlalchemy import Column, String, DateTime
from shopapi.utils.database import Base

class Customer(Base):
    __tablename__ = "customers"

    id = Column(String, primary_key=True, index=True)

    name    = Column(String, nullable=False)               # Имя
    phone   = Column(String, nullable=False)               # Телефон
    address = Column(String, nullable=False)               # Адрес одной строкой
    home    = Column(String, nullable=True)                # Дом
    road    = Column(String, nullable=True)                # Улица
    block   = Column(String, nullable=True)                # Квартал
    town    = Column(String, nullable=True)                # Город

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
