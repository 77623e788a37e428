# shopapi/schemas/customer.py

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from datetime import datetime

# ────────────── Базовая схема ──────────────
class CustomerBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    # адрес по частям (Бахрейн: дом / улица / квартал / город)
    home: Optional[str] = None
    road: Optional[str] = None
    block: Optional[str] = None
    town: Optional[str] = None

    def compose_address(self) -> Optional[str]:
        if not any([self.home, self.road, self.block, self.town]):
            return None
        return (
            f"House {self.home or ''}, Road {self.road or ''}, "
            f"Block {self.block or ''}, {self.town or ''}"
        ).strip()

# ────────────── Схема для CREATE ──────────────
class CustomerCreate(CustomerBase):
    @model_validator(mode="after")
    def require_contact(self):
        if not self.address:
            self.address = self.compose_address()
        if not (self.name and self.phone and self.address):
            raise ValueError("Name, phone, and address are required")
        return self

# ────────────── Схема для UPDATE ──────────────
class CustomerUpdate(CustomerBase):
    """Передаются только те поля, которые нужно изменить."""
    pass

# ────────────── Схема для RESPONSE ──────────────
class Customer(CustomerBase):
    id: str
    name: str
    phone: str
    address: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
