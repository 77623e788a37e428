# shopapi/routes/system.py

from fastapi import APIRouter

from shopapi.config import settings

router = APIRouter()


@router.get("/ping", summary="Проверка доступности")
async def ping():
    return {"message": settings.PING_MESSAGE}


@router.get("/demo", summary="Демо-ответ")
async def demo():
    return {"message": "Hello from the shop API"}
