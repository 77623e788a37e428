# shopapi/schemas/order.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional
from datetime import datetime

OrderStatus = Literal["processing", "ready", "delivered", "picked-up"]
DeliveryType = Literal["delivery", "pickup"]


class OrderItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId", min_length=1)
    variant_id: Optional[str] = Field(None, alias="variantId")
    quantity: int = Field(..., gt=0)
    price: float = Field(..., ge=0)


class OrderBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: Optional[str] = Field(None, alias="customerId")
    items: Optional[List[OrderItem]] = Field(None, min_length=1)
    status: Optional[OrderStatus] = None
    delivery_type: Optional[DeliveryType] = Field(None, alias="deliveryType")
    notes: Optional[str] = None


class OrderCreate(OrderBase):
    customer_id: str = Field(..., alias="customerId", min_length=1)
    items: List[OrderItem] = Field(..., min_length=1)
    status: OrderStatus = "processing"
    delivery_type: DeliveryType = Field("delivery", alias="deliveryType")


class OrderUpdate(OrderBase):
    pass


class Order(BaseModel):
    id: str
    customer_id: str = Field(..., alias="customerId")
    items: List[OrderItem]
    total: float
    status: str
    delivery_type: str = Field(..., alias="deliveryType")
    notes: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
