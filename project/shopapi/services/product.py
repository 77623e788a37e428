# shopapi/services/product.py

from fastapi import HTTPException, Request

from shopapi.models.product import Product as ProductModel
from shopapi.schemas.product import ProductCreate, ProductUpdate, Variant
from shopapi.services import storage
from shopapi.utils.ids import generate_id, utcnow

COLLECTION = "products"

# поля, которые можно обнулить через PUT
NULLABLE_FIELDS = {"category_id"}


def normalize_variants(variants: list[Variant]) -> list[dict]:
    """Варианты в формат хранения; без id получают новый."""
    result = []
    for variant in variants:
        data = variant.model_dump(exclude_none=True)
        data["id"] = variant.id or generate_id()
        result.append(data)
    return result


def compute_total_stock(variants: list[dict], manual: int | None) -> int:
    """Сумма остатков по вариантам; без вариантов берётся значение вручную."""
    if variants:
        return sum(int(v.get("stock") or 0) for v in variants)
    return manual or 0


def has_variants(product: dict) -> bool:
    return bool(product.get("variants"))


def available_stock(product: dict, variant_id: str | None) -> int | None:
    """
    Остаток товара или его варианта. None, если варианта нет.
    У товара без вариантов variantId игнорируется (витрина шлёт "default").
    """
    if not has_variants(product):
        return int(product.get("total_stock") or 0)
    variant = next((v for v in product["variants"] if str(v.get("id")) == str(variant_id)), None)
    return None if variant is None else int(variant.get("stock") or 0)


def decrement_stock(product: dict, variant_id: str | None, quantity: int) -> dict:
    """Значения для update после списания quantity единиц."""
    if not has_variants(product):
        total = max(0, int(product.get("total_stock") or 0) - quantity)
        return {"total_stock": total, "updated_at": utcnow()}

    variants = [dict(v) for v in product["variants"]]
    for v in variants:
        if str(v.get("id")) == str(variant_id):
            v["stock"] = max(0, int(v.get("stock") or 0) - quantity)
    return {"variants": variants, "total_stock": compute_total_stock(variants, None), "updated_at": utcnow()}


async def read_products_service(request: Request) -> list[dict]:
    """
    Получение списка товаров
    """
    products = await storage.fetch_all(request, ProductModel, COLLECTION, "product")
    await request.app.state.log.log_info("product", f"{len(products)} товаров загружено")
    return products


async def find_product(id: str, request: Request) -> dict | None:
    """Товар по ID без 404, для проверок заказа."""
    return await storage.fetch_one(request, ProductModel, COLLECTION, id, "product")


async def read_product_service(id: str, request: Request) -> dict:
    """
    Чтение товара по ID.
    """
    product = await find_product(id, request)
    if product is None:
        await request.app.state.log.log_error("product", "Товар не найден", {"id": id})
        raise HTTPException(status_code=404, detail="Product not found")
    return product


async def create_product_service(product: ProductCreate, request: Request) -> dict:
    """
    Создание товара. total_stock считается по вариантам.
    """
    log = request.app.state.log

    variants = normalize_variants(product.variants)
    now = utcnow()
    record = {
        "id": generate_id(),
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "images": list(product.images),
        "variants": variants,
        "category_id": product.category_id,
        "total_stock": compute_total_stock(variants, product.total_stock),
        "created_at": now,
        "updated_at": now,
    }
    created = await storage.insert(request, ProductModel, COLLECTION, record, "product")

    await log.log_info("product", "Товар создан", {"id": created["id"], "total_stock": created["total_stock"]})
    return created


async def update_product_service(id: str, product_update: ProductUpdate, request: Request) -> dict:
    """
    Частичное обновление товара по ID.
    Если после слияния у товара есть варианты, total_stock пересчитывается.
    """
    log = request.app.state.log

    current = await read_product_service(id, request)

    values = {
        key: value
        for key, value in product_update.model_dump(exclude_unset=True).items()
        if value is not None or key in NULLABLE_FIELDS
    }
    if product_update.variants is not None:
        values["variants"] = normalize_variants(product_update.variants)

    variants = values.get("variants", current.get("variants") or [])
    if variants:
        values["total_stock"] = compute_total_stock(variants, None)
    elif current.get("variants") and "total_stock" not in values:
        # варианты убраны, а остаток вручную не задан
        values["total_stock"] = 0
    values["updated_at"] = utcnow()

    updated = await storage.update(request, ProductModel, COLLECTION, id, values, "product")
    if updated is None:
        await log.log_error("product", "Товар не найден для обновления", {"id": id})
        raise HTTPException(status_code=404, detail="Product not found")

    await log.log_info("product", "Товар обновлён", {"id": id, "fields": sorted(values)})
    return updated


async def apply_stock_change_service(product: dict, variant_id: str | None, quantity: int, request: Request) -> dict | None:
    """Списывает остаток после оформления заказа."""
    values = decrement_stock(product, variant_id, quantity)
    updated = await storage.update(request, ProductModel, COLLECTION, product["id"], values, "product")
    await request.app.state.log.log_info(
        "product", "Остаток списан",
        {"id": product["id"], "variant_id": variant_id, "quantity": quantity},
    )
    return updated


async def delete_product_service(id: str, request: Request) -> None:
    """
    Удаление товара по ID.
    """
    deleted = await storage.delete(request, ProductModel, COLLECTION, id, "product")
    if not deleted:
        await request.app.state.log.log_error("product", "Товар не найден для удаления", {"id": id})
        raise HTTPException(status_code=404, detail="Product not found")

    await request.app.state.log.log_info("product", "Товар удалён", {"id": id})
