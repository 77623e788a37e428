# shopapi/services/storage.py
#
# Общий доступ к данным: сначала база (если настроена), при любой ошибке
# хранилища откатываем сессию, пишем предупреждение и повторяем операцию
# на хранилище в памяти. Клиенту ошибки базы не отдаются.

from fastapi import Request
from sqlalchemy.future import select

from shopapi.utils.database import PERSISTENCE_ERRORS, row_to_dict


async def _degrade(request: Request, target: str, action: str, error: Exception):
    db = request.state.db
    log = request.app.state.log
    try:
        await db.rollback()
    except PERSISTENCE_ERRORS as rollback_error:
        await log.log_warning(target, "Откат сессии не удался", {"error": str(rollback_error)})
    await log.log_warning(
        target,
        "Ошибка базы, переключаемся на хранилище в памяти",
        {"action": action, "error": str(error)},
    )


async def fetch_all(request: Request, model, collection: str, target: str) -> list[dict]:
    """Все записи, новые сверху."""
    db = request.state.db
    fallback = request.app.state.fallback
    if db is None:
        return fallback.all(collection)

    try:
        result = await db.execute(select(model).order_by(model.created_at.desc()))
        return [row_to_dict(row) for row in result.scalars().all()]
    except PERSISTENCE_ERRORS as e:
        await _degrade(request, target, "fetch_all", e)
        return fallback.all(collection)


async def fetch_one(request: Request, model, collection: str, id: str, target: str) -> dict | None:
    db = request.state.db
    fallback = request.app.state.fallback
    if db is None:
        return fallback.get(collection, id)

    try:
        result = await db.execute(select(model).where(model.id == id))
        row = result.scalar_one_or_none()
        return row_to_dict(row) if row is not None else None
    except PERSISTENCE_ERRORS as e:
        await _degrade(request, target, "fetch_one", e)
        return fallback.get(collection, id)


async def insert(request: Request, model, collection: str, record: dict, target: str) -> dict:
    db = request.state.db
    fallback = request.app.state.fallback
    if db is None:
        return fallback.insert(collection, record)

    try:
        row = model(**record)
        db.add(row)
        await db.commit()
        return row_to_dict(row)
    except PERSISTENCE_ERRORS as e:
        await _degrade(request, target, "insert", e)
        return fallback.insert(collection, record)


async def update(request: Request, model, collection: str, id: str, values: dict, target: str) -> dict | None:
    """Сливает values с записью. None, если записи нет."""
    db = request.state.db
    fallback = request.app.state.fallback
    if db is None:
        return fallback.update(collection, id, values)

    try:
        result = await db.execute(select(model).where(model.id == id))
        row = result.scalar_one_or_none()
        if row is None:
            return None
        for key, value in values.items():
            setattr(row, key, value)
        db.add(row)
        await db.commit()
        return row_to_dict(row)
    except PERSISTENCE_ERRORS as e:
        await _degrade(request, target, "update", e)
        return fallback.update(collection, id, values)


async def delete(request: Request, model, collection: str, id: str, target: str) -> bool:
    db = request.state.db
    fallback = request.app.state.fallback
    if db is None:
        return fallback.delete(collection, id)

    try:
        result = await db.execute(select(model).where(model.id == id))
        row = result.scalar_one_or_none()
        if row is None:
            return False
        await db.delete(row)
        await db.commit()
        return True
    except PERSISTENCE_ERRORS as e:
        await _degrade(request, target, "delete", e)
        return fallback.delete(collection, id)
