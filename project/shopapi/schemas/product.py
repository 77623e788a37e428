# shopapi/schemas/product.py

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime


class Variant(BaseModel):
    """Вариант товара (цвет, размер...) со своим остатком."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    stock: int = Field(0, ge=0)
    image: Optional[str] = None

    @field_validator("stock", mode="before")
    @classmethod
    def empty_stock_is_zero(cls, value):
        return 0 if value in (None, "") else value


class ProductBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    images: Optional[List[str]] = None
    variants: Optional[List[Variant]] = None
    category_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("category_id", "categoryId")
    )
    # без вариантов остаток задаётся вручную; старые клиенты шлют stock
    total_stock: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("total_stock", "totalStock", "stock")
    )


class ProductCreate(ProductBase):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    images: List[str] = Field(default_factory=list)
    variants: List[Variant] = Field(default_factory=list)


class ProductUpdate(ProductBase):
    """Частичное обновление: применяются только переданные поля."""
    pass


class Product(BaseModel):
    id: str
    name: str
    description: str = ""
    price: float
    images: List[str] = Field(default_factory=list)
    variants: List[Variant] = Field(default_factory=list)
    category_id: Optional[str] = None
    total_stock: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
