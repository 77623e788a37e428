# shopapi/services/dashboard.py

from datetime import datetime, timezone
from fastapi import Request

from shopapi.config import settings
from shopapi.services.customer import read_customers_service
from shopapi.services.order import read_orders_service
from shopapi.services.product import read_products_service

RECENT_ORDERS = 5


def _created(order: dict) -> datetime:
    created = order.get("created_at")
    if created is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    # SQLite возвращает naive datetime
    return created if created.tzinfo else created.replace(tzinfo=timezone.utc)


def summarize(orders: list[dict], customers: list[dict], products: list[dict], low_stock_threshold: int) -> dict:
    """Сводка для главной страницы админки."""
    total_revenue = round(sum(float(o.get("total") or 0) for o in orders), 2)
    total_orders = len(orders)

    return {
        "total_revenue": total_revenue,
        "total_orders": total_orders,
        "avg_order_value": round(total_revenue / total_orders, 2) if total_orders else 0.0,
        "processing_orders": sum(1 for o in orders if o.get("status") == "processing"),
        "total_customers": len(customers),
        "total_products": len(products),
        "low_stock_products": [
            p for p in products if int(p.get("total_stock") or 0) <= low_stock_threshold
        ],
        "recent_orders": sorted(orders, key=_created, reverse=True)[:RECENT_ORDERS],
    }


async def read_dashboard_service(request: Request) -> dict:
    orders = await read_orders_service(request)
    customers = await read_customers_service(request)
    products = await read_products_service(request)

    summary = summarize(orders, customers, products, settings.LOW_STOCK_THRESHOLD)
    await request.app.state.log.log_info("dashboard", "Сводка собрана", {
        "orders": summary["total_orders"], "revenue": summary["total_revenue"],
    })
    return summary
