# shopapi/routes/customer.py

from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import List

from shopapi.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from shopapi.services.customer import (
    create_customer_service,
    read_customers_service,
    read_customer_service,
    update_customer_service,
    delete_customer_service,
)
from shopapi.routes.auth import require_admin

router = APIRouter()

# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Customer,
    status_code=status.HTTP_201_CREATED,
    summary="Создать клиента",
    response_description="Возвращает созданного клиента",
    responses={
        201: {"description": "Клиент успешно создан"},
        400: {"description": "Не указаны имя, телефон или адрес"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def create_customer(request: Request, customer: CustomerCreate):
    # публичный маршрут: клиента создаёт витрина при оформлении заказа
    try:
        return await create_customer_service(customer, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("customer", f"Ошибка при создании клиента: {e}")
        raise HTTPException(status_code=500, detail="Failed to create customer")


# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Customer],
    status_code=status.HTTP_200_OK,
    summary="Получить список клиентов",
    responses={
        200: {"description": "Список клиентов успешно получен"},
        401: {"description": "Некорректный токен"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def read_customers(request: Request, _=Depends(require_admin)):
    try:
        return await read_customers_service(request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("customer", f"Ошибка при получении списка клиентов: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch customers")


# ────────────── READ ONE ──────────────
@router.get(
    "/{id}",
    response_model=Customer,
    status_code=status.HTTP_200_OK,
    summary="Получить клиента по ID",
    responses={
        200: {"description": "Клиент найден"},
        401: {"description": "Некорректный токен"},
        404: {"description": "Клиент не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def read_customer(id: str, request: Request, _=Depends(require_admin)):
    try:
        return await read_customer_service(id, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("customer", f"Ошибка при получении клиента: {e}", {"id": id})
        raise HTTPException(status_code=500, detail="Failed to fetch customer")


# ────────────── UPDATE ──────────────
@router.put(
    "/{id}",
    response_model=Customer,
    status_code=status.HTTP_200_OK,
    summary="Обновить клиента",
    responses={
        200: {"description": "Клиент успешно обновлён"},
        400: {"description": "Неверные данные запроса"},
        401: {"description": "Некорректный токен"},
        404: {"description": "Клиент не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def update_customer(id: str, customer_update: CustomerUpdate, request: Request, _=Depends(require_admin)):
    try:
        return await update_customer_service(id, customer_update, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("customer", f"Ошибка при обновлении клиента: {e}", {"id": id})
        raise HTTPException(status_code=500, detail=f"Failed to update customer: {e}")


# ────────────── DELETE ──────────────
@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Удалить клиента",
    response_description="Клиент удалён, тело ответа отсутствует",
    responses={
        204: {"description": "Клиент успешно удалён"},
        401: {"description": "Некорректный токен"},
        404: {"description": "Клиент не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def delete_customer(id: str, request: Request, _=Depends(require_admin)):
    try:
        await delete_customer_service(id, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("customer", f"Ошибка при удалении клиента: {e}", {"id": id})
        raise HTTPException(status_code=500, detail="Failed to delete customer")
