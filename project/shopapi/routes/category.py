# shopapi/routes/category.py

from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import List

from shopapi.schemas.category import Category, CategoryCreate, CategoryUpdate
from shopapi.services.category import (
    create_category_service,
    read_categories_service,
    read_category_service,
    update_category_service,
    delete_category_service,
)
from shopapi.routes.auth import require_admin

router = APIRouter()


@router.post(
    "",
    response_model=Category,
    status_code=status.HTTP_201_CREATED,
    summary="Создать категорию",
    responses={400: {"description": "Не указано название"}, 401: {"description": "Некорректный токен"}},
)
async def create_category(request: Request, category: CategoryCreate, _=Depends(require_admin)):
    try:
        return await create_category_service(category, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("category", f"Ошибка при создании категории: {e}")
        raise HTTPException(status_code=500, detail="Failed to create category")


@router.get("", response_model=List[Category], summary="Список категорий")
async def read_categories(request: Request):
    try:
        return await read_categories_service(request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("category", f"Ошибка при получении категорий: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")


@router.get(
    "/{id}",
    response_model=Category,
    summary="Получить категорию по ID",
    responses={404: {"description": "Категория не найдена"}},
)
async def read_category(id: str, request: Request):
    try:
        return await read_category_service(id, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("category", f"Ошибка при получении категории: {e}", {"id": id})
        raise HTTPException(status_code=500, detail="Failed to fetch category")


@router.put(
    "/{id}",
    response_model=Category,
    summary="Переименовать категорию",
    responses={401: {"description": "Некорректный токен"}, 404: {"description": "Категория не найдена"}},
)
async def update_category(id: str, category_update: CategoryUpdate, request: Request, _=Depends(require_admin)):
    try:
        return await update_category_service(id, category_update, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("category", f"Ошибка при обновлении категории: {e}", {"id": id})
        raise HTTPException(status_code=500, detail=f"Failed to update category: {e}")


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Удалить категорию",
    responses={401: {"description": "Некорректный токен"}, 404: {"description": "Категория не найдена"}},
)
async def delete_category(id: str, request: Request, _=Depends(require_admin)):
    try:
        await delete_category_service(id, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("category", f"Ошибка при удалении категории: {e}", {"id": id})
        raise HTTPException(status_code=500, detail="Failed to delete category")
