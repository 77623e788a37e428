# shopapi/schemas/dashboard.py

from pydantic import BaseModel
from typing import List

from shopapi.schemas.order import Order
from shopapi.schemas.product import Product

class DashboardSummary(BaseModel):
    total_revenue: float
    total_orders: int
    avg_order_value: float
    processing_orders: int
    total_customers: int
    total_products: int
    low_stock_products: List[Product]
    recent_orders: List[Order]
