# shopapi/services/category.py

from fastapi import HTTPException, Request

from shopapi.models.category import Category as CategoryModel
from shopapi.schemas.category import CategoryCreate, CategoryUpdate
from shopapi.services import storage
from shopapi.utils.ids import generate_id, utcnow

COLLECTION = "categories"


async def read_categories_service(request: Request) -> list[dict]:
    categories = await storage.fetch_all(request, CategoryModel, COLLECTION, "category")
    await request.app.state.log.log_info("category", f"{len(categories)} категорий загружено")
    return categories


async def read_category_service(id: str, request: Request) -> dict:
    category = await storage.fetch_one(request, CategoryModel, COLLECTION, id, "category")
    if category is None:
        await request.app.state.log.log_error("category", "Категория не найдена", {"id": id})
        raise HTTPException(status_code=404, detail="Category not found")
    return category


async def create_category_service(category: CategoryCreate, request: Request) -> dict:
    record = {"id": generate_id(), "name": category.name, "created_at": utcnow()}
    created = await storage.insert(request, CategoryModel, COLLECTION, record, "category")
    await request.app.state.log.log_info("category", "Категория создана", {"id": created["id"]})
    return created


async def update_category_service(id: str, category_update: CategoryUpdate, request: Request) -> dict:
    values = category_update.model_dump(exclude_unset=True, exclude_none=True)
    updated = await storage.update(request, CategoryModel, COLLECTION, id, values, "category")
    if updated is None:
        await request.app.state.log.log_error("category", "Категория не найдена для обновления", {"id": id})
        raise HTTPException(status_code=404, detail="Category not found")

    await request.app.state.log.log_info("category", "Категория обновлена", {"id": id})
    return updated


async def delete_category_service(id: str, request: Request) -> None:
    deleted = await storage.delete(request, CategoryModel, COLLECTION, id, "category")
    if not deleted:
        await request.app.state.log.log_error("category", "Категория не найдена для удаления", {"id": id})
        raise HTTPException(status_code=404, detail="Category not found")

    await request.app.state.log.log_info("category", "Категория удалена", {"id": id})
