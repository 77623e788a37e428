# shopapi/main.py

import os
import asyncio
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from shopapi.config import settings
from shopapi.utils.log import Log
from shopapi.utils.database import init_db, dispose_db
from shopapi.utils.fallback import FallbackStorage
from shopapi.utils.security import hash_password
from shopapi.services.upload import create_object_store
from shopapi.middleware.db_middleware import DBSessionMiddleware

# --- загрузка переменных окружения ---
load_dotenv()

# --- sync логгер для раннего старта ---
boot_log = Log()

# ────────────── Lifespan ──────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    boot_log.log_info_sync(target="startup", message="lifespan: startup начат")

    # База (или работа на памяти, если её нет)
    app.state.db_ready = await init_db(settings.DATABASE_URL, boot_log)
    app.state.fallback = FallbackStorage()
    boot_log.log_info_sync(target="startup", message="Хранилище готово", data={"db_ready": app.state.db_ready})

    app.state.order_lock = asyncio.Lock()
    app.state.admin_password_hash = hash_password(settings.ADMIN_PASSWORD)
    app.state.object_store = create_object_store(boot_log)

    app.state.log = Log()
    await app.state.log.log_info(target="startup", message="Async Log инициализирован")

    yield

    # shutdown
    await app.state.log.log_info(target="shutdown", message="Остановка приложения")
    await app.state.log.shutdown()
    await dispose_db()
    boot_log.log_info_sync(target="shutdown", message="Log корректно завершён")

# ────────────── Создаём FastAPI приложение ──────────────
app = FastAPI(title="Shop Admin & Storefront API", lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# DB middleware для request.state.db
app.add_middleware(DBSessionMiddleware)


# Ошибки валидации тела запроса отдаём как 400
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    log = getattr(request.app.state, "log", None)
    if log:
        await log.log_warning("validation", "Неверные данные запроса", {"path": request.url.path, "errors": exc.errors()})
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# ────────────── Статика загруженных изображений ──────────────
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")

# ────────────── Подключение роутов ──────────────
from shopapi.routes import system, auth, customer, product, order, category, upload, dashboard

app.include_router(system.router, prefix="/api", tags=["system"])
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(customer.router, prefix="/api/customers", tags=["customers"])
app.include_router(product.router, prefix="/api/products", tags=["products"])
app.include_router(order.router, prefix="/api/orders", tags=["orders"])
app.include_router(category.router, prefix="/api/categories", tags=["categories"])
app.include_router(upload.router, prefix="/api/upload", tags=["upload"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])

# ────────────── Запуск uvicorn ──────────────
if __name__ == "__main__":
    boot_log.log_info_sync(target="startup", message="Запуск uvicorn.run")
    uvicorn.run(
        "shopapi.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info",
        reload=True
    )
