# shopapi/services/customer.py

from fastapi import HTTPException, Request

from shopapi.models.customer import Customer as CustomerModel
from shopapi.schemas.customer import CustomerCreate, CustomerUpdate
from shopapi.services import storage
from shopapi.utils.ids import generate_id, utcnow

COLLECTION = "customers"


async def read_customers_service(request: Request) -> list[dict]:
    """
    Получение списка клиентов
    """
    log = request.app.state.log

    customers = await storage.fetch_all(request, CustomerModel, COLLECTION, "customer")
    await log.log_info("customer", f"{len(customers)} клиентов загружено")
    return customers


async def read_customer_service(id: str, request: Request) -> dict:
    """
    Чтение клиента по ID.
    """
    log = request.app.state.log

    customer = await storage.fetch_one(request, CustomerModel, COLLECTION, id, "customer")
    if customer is None:
        await log.log_error("customer", "Клиент не найден", {"id": id})
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


async def create_customer_service(customer: CustomerCreate, request: Request) -> dict:
    """
    Создание нового клиента.
    """
    log = request.app.state.log

    now = utcnow()
    record = {
        **customer.model_dump(),
        "id": generate_id(),
        "created_at": now,
        "updated_at": now,
    }
    created = await storage.insert(request, CustomerModel, COLLECTION, record, "customer")

    await log.log_info("customer", "Клиент создан", {"id": created["id"]})
    return created


async def update_customer_service(id: str, customer_update: CustomerUpdate, request: Request) -> dict:
    """
    Обновление клиента по ID.
    """
    log = request.app.state.log

    values = customer_update.model_dump(exclude_unset=True)
    # пустые обязательные поля не затираем
    for key in ("name", "phone", "address"):
        if key in values and not values[key]:
            del values[key]
    values["updated_at"] = utcnow()

    updated = await storage.update(request, CustomerModel, COLLECTION, id, values, "customer")
    if updated is None:
        await log.log_error("customer", "Клиент не найден для обновления", {"id": id})
        raise HTTPException(status_code=404, detail="Customer not found")

    await log.log_info("customer", "Клиент обновлён", {"id": id})
    return updated


async def delete_customer_service(id: str, request: Request) -> None:
    """
    Удаление клиента по ID.
    """
    log = request.app.state.log

    deleted = await storage.delete(request, CustomerModel, COLLECTION, id, "customer")
    if not deleted:
        await log.log_error("customer", "Клиент не найден для удаления", {"id": id})
        raise HTTPException(status_code=404, detail="Customer not found")

    await log.log_info("customer", "Клиент удалён", {"id": id})
