# shopapi/services/upload.py

"""
Хранение изображений товаров.

Если настроен Supabase (SUPABASE_URL + service key), файл уходит в
бакет STORAGE_BUCKET и клиенту возвращается публичный URL.
Иначе (или при ошибке облака) файл пишется на диск в UPLOAD_DIR
и раздаётся статикой по /uploads/<имя>.
"""

import os
import time
import random
import aiofiles
from fastapi import HTTPException, Request, UploadFile
from starlette.concurrency import run_in_threadpool
from supabase import create_client

from shopapi.config import settings

PLACEHOLDER_VALUES = {"your_supabase_project_url", "your_supabase_service_role_key"}

READ_CHUNK_SIZE = 1024 * 1024


def supabase_configured(url: str, key: str) -> bool:
    return bool(
        url and key
        and url not in PLACEHOLDER_VALUES
        and key not in PLACEHOLDER_VALUES
        and url.startswith("http")
    )


def create_object_store(log=None):
    """Клиент Supabase или None, если облако не настроено."""
    if not supabase_configured(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY):
        if log:
            log.log_warning_sync("startup", "Supabase не настроен, изображения хранятся на диске")
        return None
    try:
        client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
    except Exception as e:
        if log:
            log.log_error_sync("startup", "Не удалось создать клиент Supabase", {"error": str(e)})
        return None
    if log:
        log.log_info_sync("startup", "Клиент Supabase создан", {"bucket": settings.STORAGE_BUCKET})
    return client


def generate_file_name(original_name: str | None) -> str:
    ext = os.path.splitext(original_name or "")[1].lower() or ".jpg"
    return f"image-{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"


def upload_dir() -> str:
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    return settings.UPLOAD_DIR


def local_path(file_name: str) -> str:
    """Путь внутри UPLOAD_DIR; выход за его пределы -> 400."""
    root = os.path.realpath(upload_dir())
    path = os.path.realpath(os.path.join(root, file_name))
    if not path.startswith(root + os.sep):
        raise HTTPException(status_code=400, detail="Invalid file name")
    return path


async def read_image(file: UploadFile) -> bytes:
    """Проверка типа и размера, возвращает содержимое. Читает частями до лимита."""
    if not (file.content_type or "").startswith("image/"):
        raise HTTPException(status_code=400, detail="Only image files are allowed")

    chunks = []
    size = 0
    while True:
        chunk = await file.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        size += len(chunk)
        if size > settings.UPLOAD_MAX_SIZE:
            max_mb = settings.UPLOAD_MAX_SIZE // (1024 * 1024)
            raise HTTPException(status_code=400, detail=f"File too large. Maximum size: {max_mb}MB")
        chunks.append(chunk)

    if not size:
        raise HTTPException(status_code=400, detail="No file uploaded")
    return b"".join(chunks)


async def save_local(data: bytes, file_name: str) -> dict:
    path = local_path(file_name)
    async with aiofiles.open(path, mode="wb") as f:
        await f.write(data)
    return {"url": f"/uploads/{file_name}", "fileName": file_name}


async def save_hosted(client, data: bytes, file_path: str, content_type: str) -> dict:
    bucket = client.storage.from_(settings.STORAGE_BUCKET)
    await run_in_threadpool(
        bucket.upload,
        file_path,
        data,
        {"content-type": content_type, "cache-control": "3600", "upsert": "false"},
    )
    url = await run_in_threadpool(bucket.get_public_url, file_path)
    return {"url": url, "fileName": file_path}


async def upload_image_service(file: UploadFile, request: Request, folder: str | None = None) -> dict:
    """
    Сохраняет изображение в облако или на диск.
    Возвращает {"url", "fileName"}.
    """
    log = request.app.state.log
    client = getattr(request.app.state, "object_store", None)

    data = await read_image(file)
    file_name = generate_file_name(file.filename)

    if client is not None:
        folder = (folder or "").strip("/")
        file_path = f"{folder}/{file_name}" if folder else file_name
        try:
            result = await save_hosted(client, data, file_path, file.content_type)
            await log.log_info("upload", "Изображение загружено в облако", result)
            return result
        except Exception as e:
            await log.log_warning("upload", "Ошибка облака, сохраняем на диск", {"error": str(e)})

    result = await save_local(data, file_name)
    await log.log_info("upload", "Изображение сохранено на диск", {**result, "size": len(data)})
    return result


async def delete_image_service(file_name: str, request: Request) -> None:
    """
    Удаляет изображение с диска, а если его там нет, из облака.
    404, если файл не найден нигде.
    """
    log = request.app.state.log
    client = getattr(request.app.state, "object_store", None)

    path = local_path(file_name)
    if os.path.isfile(path):
        os.remove(path)
        await log.log_info("upload", "Изображение удалено с диска", {"file": file_name})
        return

    if client is not None:
        bucket = client.storage.from_(settings.STORAGE_BUCKET)
        try:
            removed = await run_in_threadpool(bucket.remove, [file_name])
        except Exception as e:
            await log.log_warning("upload", "Облако не удалило файл", {"file": file_name, "error": str(e)})
            removed = None
        if removed:
            await log.log_info("upload", "Изображение удалено из облака", {"file": file_name})
            return

    await log.log_error("upload", "Файл не найден", {"file": file_name})
    raise HTTPException(status_code=404, detail="File not found")
