# shopapi/routes/order.py

from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import List

from shopapi.schemas.order import Order, OrderCreate, OrderUpdate
from shopapi.services.order import (
    create_order_service,
    read_orders_service,
    read_order_service,
    update_order_service,
    delete_order_service,
)
from shopapi.routes.auth import require_admin

router = APIRouter()

# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    summary="Оформить заказ",
    response_description="Возвращает созданный заказ с итоговой суммой",
    responses={
        201: {"description": "Заказ успешно создан, остатки списаны"},
        400: {"description": "Нет клиента или позиций, товар не найден или его недостаточно"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def create_order(request: Request, order: OrderCreate):
    try:
        return await create_order_service(order, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при создании заказа: {e}")
        raise HTTPException(status_code=500, detail="Failed to create order")


# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Order],
    status_code=status.HTTP_200_OK,
    summary="Получить список заказов",
    response_description="Возвращает список всех заказов, новые сверху",
    responses={
        200: {"description": "Список заказов успешно получен"},
        401: {"description": "Некорректный токен"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def read_orders(request: Request, _=Depends(require_admin)):
    try:
        orders = await read_orders_service(request)
        await request.app.state.log.log_info("order", "Список заказов загружен", {"count": len(orders)})
        return orders
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при получении списка заказов: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch orders")


# ────────────── READ ONE ──────────────
@router.get(
    "/{id}",
    response_model=Order,
    status_code=status.HTTP_200_OK,
    summary="Получить заказ по ID",
    responses={
        200: {"description": "Заказ найден и возвращён"},
        401: {"description": "Некорректный токен"},
        404: {"description": "Заказ не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def read_order(id: str, request: Request, _=Depends(require_admin)):
    try:
        return await read_order_service(id, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при получении заказа: {e}", {"id": id})
        raise HTTPException(status_code=500, detail="Failed to fetch order")


# ────────────── UPDATE ──────────────
@router.put(
    "/{id}",
    response_model=Order,
    status_code=status.HTTP_200_OK,
    summary="Обновить заказ",
    response_description="Заказ успешно обновлён",
    responses={
        200: {"description": "Заказ успешно обновлён"},
        400: {"description": "Неверные данные запроса"},
        401: {"description": "Некорректный токен"},
        404: {"description": "Заказ не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def update_order(id: str, order_update: OrderUpdate, request: Request, _=Depends(require_admin)):
    try:
        return await update_order_service(id, order_update, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при обновлении заказа: {e}", {"id": id})
        raise HTTPException(status_code=500, detail=f"Failed to update order: {e}")


# ────────────── DELETE ──────────────
@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Удалить заказ",
    response_description="Заказ успешно удалён, тело ответа отсутствует",
    responses={
        204: {"description": "Заказ успешно удалён"},
        401: {"description": "Некорректный токен"},
        404: {"description": "Заказ не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def delete_order(id: str, request: Request, _=Depends(require_admin)):
    try:
        await delete_order_service(id, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при удалении заказа: {e}", {"id": id})
        raise HTTPException(status_code=500, detail="Failed to delete order")
