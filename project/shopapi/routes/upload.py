# shopapi/routes/upload.py

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status
from typing import Optional

from shopapi.services.upload import upload_image_service, delete_image_service
from shopapi.routes.auth import require_admin

router = APIRouter()


@router.post(
    "",
    summary="Загрузить изображение товара",
    responses={
        200: {
            "description": "Файл сохранён",
            "content": {"application/json": {"example": {"url": "/uploads/image-1700000000000-42.png", "fileName": "image-1700000000000-42.png"}}},
        },
        400: {"description": "Нет файла, не изображение или слишком большой"},
        401: {"description": "Некорректный токен"},
        500: {"description": "Ошибка сохранения файла"},
    },
)
async def upload_image(
    request: Request,
    image: UploadFile = File(...),
    folder: Optional[str] = Form(None),
    _=Depends(require_admin),
):
    try:
        return await upload_image_service(image, request, folder)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("upload", f"Ошибка загрузки изображения: {e}")
        raise HTTPException(status_code=500, detail="Failed to upload image")


@router.delete(
    "/{filename:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Удалить изображение",
    responses={
        204: {"description": "Файл удалён"},
        400: {"description": "Недопустимое имя файла"},
        401: {"description": "Некорректный токен"},
        404: {"description": "Файл не найден"},
        500: {"description": "Ошибка удаления файла"},
    },
)
async def delete_image(filename: str, request: Request, _=Depends(require_admin)):
    try:
        await delete_image_service(filename, request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("upload", f"Ошибка удаления изображения: {e}", {"file": filename})
        raise HTTPException(status_code=500, detail="Failed to delete file")
