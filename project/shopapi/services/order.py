# shopapi/services/order.py

from collections import defaultdict
from fastapi import HTTPException, Request

from shopapi.config import settings
from shopapi.models.order import Order as OrderModel
from shopapi.schemas.order import OrderCreate, OrderItem, OrderUpdate
from shopapi.services import storage
from shopapi.services.product import available_stock, find_product, has_variants, apply_stock_change_service
from shopapi.utils.ids import generate_id, utcnow

COLLECTION = "orders"


def calculate_total(items: list[OrderItem], delivery_type: str) -> float:
    """Сумма позиций плюс фиксированная доставка."""
    total = sum(item.price * item.quantity for item in items)
    if delivery_type == "delivery":
        total += settings.DELIVERY_FEE
    return round(total, 2)


def dump_items(items: list[OrderItem]) -> list[dict]:
    return [item.model_dump(by_alias=True) for item in items]


async def check_stock(items: list[OrderItem], request: Request) -> dict[str, dict]:
    """
    Проверка остатков по каждой позиции.
    Одинаковые позиции суммируются. Возвращает товары по ID.
    """
    log = request.app.state.log

    requested = defaultdict(int)
    for item in items:
        requested[(item.product_id, item.variant_id)] += item.quantity

    products = {}
    for (product_id, variant_id), quantity in requested.items():
        if product_id not in products:
            product = await find_product(product_id, request)
            if product is None:
                await log.log_error("order", "Товар из заказа не найден", {"product_id": product_id})
                raise HTTPException(status_code=400, detail=f"Product {product_id} not found")
            products[product_id] = product

        product = products[product_id]
        if has_variants(product) and not variant_id:
            await log.log_error("order", "Не указан вариант товара", {"product_id": product_id})
            raise HTTPException(status_code=400, detail=f"Variant required for product {product['name']}")

        stock = available_stock(product, variant_id)
        if stock is None:
            await log.log_error("order", "Вариант не найден", {"product_id": product_id, "variant_id": variant_id})
            raise HTTPException(
                status_code=400,
                detail=f"Variant {variant_id} of product {product['name']} not found",
            )
        if quantity > stock:
            await log.log_warning("order", "Недостаточно товара", {
                "product_id": product_id, "variant_id": variant_id,
                "requested": quantity, "available": stock,
            })
            raise HTTPException(
                status_code=400,
                detail=f"Insufficient stock for {product['name']}: requested {quantity}, available {stock}",
            )

    return products


async def read_orders_service(request: Request) -> list[dict]:
    """
    Получение списка заказов
    """
    orders = await storage.fetch_all(request, OrderModel, COLLECTION, "order")
    await request.app.state.log.log_info("order", f"{len(orders)} заказов загружено")
    return orders


async def create_order_service(order: OrderCreate, request: Request) -> dict:
    """
    Оформление заказа:
      1. проверка остатков по каждой позиции
      2. подсчёт суммы (с доставкой)
      3. сохранение заказа
      4. списание остатков
    Шаги идут последовательно, без транзакции; внутри процесса
    оформление заказов сериализуется блокировкой.
    """
    log = request.app.state.log

    async with request.app.state.order_lock:
        await check_stock(order.items, request)

        now = utcnow()
        record = {
            "id": generate_id(),
            "customer_id": order.customer_id,
            "items": dump_items(order.items),
            "total": calculate_total(order.items, order.delivery_type),
            "status": order.status,
            "delivery_type": order.delivery_type,
            "notes": order.notes,
            "created_at": now,
            "updated_at": now,
        }
        created = await storage.insert(request, OrderModel, COLLECTION, record, "order")
        await log.log_info("order", "Заказ создан", {"id": created["id"], "total": created["total"]})

        # остаток перечитываем: в заказе может быть несколько вариантов одного товара
        for item in order.items:
            product = await find_product(item.product_id, request)
            if product is None:
                await log.log_warning("order", "Товар удалён до списания", {"product_id": item.product_id})
                continue
            await apply_stock_change_service(product, item.variant_id, item.quantity, request)

    return created


async def read_order_service(id: str, request: Request) -> dict:
    """
    Чтение заказа по ID.
    """
    log = request.app.state.log

    order = await storage.fetch_one(request, OrderModel, COLLECTION, id, "order")
    if order is None:
        await log.log_error("order", "Заказ не найден", {"id": id})
        raise HTTPException(status_code=404, detail="Order not found")

    await log.log_info("order", "Заказ загружен", {"id": id})
    return order


async def update_order_service(id: str, order_update: OrderUpdate, request: Request) -> dict:
    """
    Обновление заказа по ID. При новых позициях или смене типа доставки
    сумма пересчитывается.
    Остатки не меняются.
    """
    log = request.app.state.log

    current = await read_order_service(id, request)

    values = {
        key: value
        for key, value in order_update.model_dump(exclude_unset=True).items()
        if value is not None or key == "notes"
    }
    if order_update.items is not None:
        values["items"] = dump_items(order_update.items)
    if "items" in values or "delivery_type" in values:
        items = order_update.items
        if items is None:
            items = [OrderItem.model_validate(item) for item in current["items"]]
        delivery_type = values.get("delivery_type", current["delivery_type"])
        values["total"] = calculate_total(items, delivery_type)
    values["updated_at"] = utcnow()

    updated = await storage.update(request, OrderModel, COLLECTION, id, values, "order")
    if updated is None:
        await log.log_error("order", "Заказ не найден для обновления", {"id": id})
        raise HTTPException(status_code=404, detail="Order not found")

    await log.log_info("order", "Заказ обновлён", {"id": id})
    return updated


async def delete_order_service(id: str, request: Request) -> None:
    """
    Удаление заказа по ID.
    """
    log = request.app.state.log

    deleted = await storage.delete(request, OrderModel, COLLECTION, id, "order")
    if not deleted:
        await log.log_error("order", "Заказ не найден для удаления", {"id": id})
        raise HTTPException(status_code=404, detail="Order not found")

    await log.log_info("order", "Заказ удалён", {"id": id})
