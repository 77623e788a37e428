# shopapi/schemas/user.py

from pydantic import BaseModel

class AdminUser(BaseModel):
    """
    Администратор магазина. Пользователь один, данные из настроек.
    """
    login: str
    is_admin: bool = True

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: AdminUser
