# shopapi/routes/auth.py

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from jwt import ExpiredSignatureError, InvalidTokenError
from datetime import timedelta
from typing import Optional

from shopapi.config import settings
from shopapi.schemas.user import AdminUser, TokenResponse
from shopapi.utils.security import create_access_token, decode_access_token, verify_password

router = APIRouter()

# auto_error=False: без токена решает require_admin, а не схема
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)


async def get_current_user(request: Request, token: Optional[str] = Depends(oauth2_scheme)) -> AdminUser:
    """
    Проверяет JWT токен и возвращает администратора.

    **Статусы:**
    - 401 Unauthorized: токена нет, он истёк или выдан не администратору
    """
    log = request.app.state.log
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_access_token(token, settings.AUTH_SECRET_KEY)
    except ExpiredSignatureError:
        await log.log_warning("auth", "Токен истёк")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expired")
    except InvalidTokenError:
        await log.log_warning("auth", "Неверный токен")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token invalid")

    login = payload.get("sub")
    if login != settings.ADMIN_LOGIN:
        await log.log_error("auth", "Токен не для администратора", {"sub": login})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    return AdminUser(login=login)


async def require_admin(request: Request, token: Optional[str] = Depends(oauth2_scheme)) -> Optional[AdminUser]:
    """Защита админских маршрутов; включается ADMIN_AUTH_REQUIRED."""
    if not settings.ADMIN_AUTH_REQUIRED:
        return None
    return await get_current_user(request, token)


# ────────────── TOKEN ──────────────
@router.post(
    "/token",
    response_model=TokenResponse,
    summary="Получение JWT токена администратора",
    responses={
        200: {
            "description": "Токен успешно получен",
            "content": {
                "application/json": {
                    "example": {
                        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "user": {"login": "admin", "is_admin": True},
                    }
                }
            },
        },
        401: {"description": "Неверный логин или пароль"},
        422: {"description": "Пустой username или password"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def login_for_access_token(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
):
    """
    Вход в админку.

    **Входные данные (form-data):**
    - `username`: логин администратора
    - `password`: пароль
    """
    log = request.app.state.log
    try:
        password_hash = request.app.state.admin_password_hash
        if form_data.username != settings.ADMIN_LOGIN or not verify_password(form_data.password, password_hash):
            await log.log_warning("auth", "Неудачная попытка входа", {"username": form_data.username})
            raise HTTPException(
                status_code=401,
                detail="Invalid login or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        access_token = create_access_token(
            data={"sub": settings.ADMIN_LOGIN},
            secret=settings.AUTH_SECRET_KEY,
            expires_delta=timedelta(minutes=settings.AUTH_TOKEN_EXPIRE_MINUTES),
        )
        await log.log_info("auth", "Администратор вошёл", {"username": form_data.username})

        return {
            "access_token": access_token,
            "token_type": "bearer",
            "user": {"login": settings.ADMIN_LOGIN, "is_admin": True},
        }

    except HTTPException:
        raise
    except Exception as e:
        await log.log_error("auth", f"Ошибка при получении токена: {e}", {"username": form_data.username})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "/me",
    response_model=AdminUser,
    summary="Текущий администратор",
    responses={401: {"description": "Токен отсутствует или невалиден"}},
)
async def read_me(user: AdminUser = Depends(get_current_user)):
    return user
