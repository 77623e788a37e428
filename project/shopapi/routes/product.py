# shopapi/routes/product.py

from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import List

from shopapi.schemas.product import Product, ProductCreate, ProductUpdate
from shopapi.services.product import (
    create_product_service,
    read_products_service,
    read_product_service,
    update_product_service,
    delete_product_service,
)
from shopapi.routes.auth import require_admin

router = APIRouter()

# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Создать товар",
    responses={
        201: {"description": "Товар успешно создан"},
        400: {"description": "Не указаны название, описание или цена"},
        401: {"description": "Некорректный токен"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def create_product(request: Request, product: ProductCreate, _=Depends(require_admin)):
    try:
        return await create_product_service(product, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при создании товара: {e}")
        raise HTTPException(status_code=500, detail="Failed to create product")


# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Product],
    summary="Каталог товаров",
    responses={
        200: {"description": "Список товаров"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def read_products(request: Request):
    try:
        return await read_products_service(request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при получении каталога: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch products")


# ────────────── READ ONE ──────────────
@router.get(
    "/{id}",
    response_model=Product,
    summary="Получить товар по ID",
    responses={
        200: {"description": "Товар найден"},
        404: {"description": "Товар не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def read_product(id: str, request: Request):
    try:
        return await read_product_service(id, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при получении товара: {e}", {"id": id})
        raise HTTPException(status_code=500, detail="Failed to fetch product")


# ────────────── UPDATE ──────────────
@router.put(
    "/{id}",
    response_model=Product,
    summary="Обновить товар",
    response_description="Товар после слияния изменений",
    responses={
        200: {"description": "Товар успешно обновлён"},
        400: {"description": "Неверные данные запроса"},
        401: {"description": "Некорректный токен"},
        404: {"description": "Товар не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def update_product(id: str, product_update: ProductUpdate, request: Request, _=Depends(require_admin)):
    try:
        return await update_product_service(id, product_update, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при обновлении товара: {e}", {"id": id})
        raise HTTPException(status_code=500, detail=f"Failed to update product: {e}")


# ────────────── DELETE ──────────────
@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Удалить товар",
    responses={
        204: {"description": "Товар успешно удалён"},
        401: {"description": "Некорректный токен"},
        404: {"description": "Товар не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def delete_product(id: str, request: Request, _=Depends(require_admin)):
    try:
        await delete_product_service(id, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при удалении товара: {e}", {"id": id})
        raise HTTPException(status_code=500, detail="Failed to delete product")
