# shopapi/utils/security.py

"""
Пароль администратора и JWT-токены админки.
Пароль хранится только в виде хэша (passlib, sha256_crypt),
токены подписываются HS256 (PyJWT).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jwt import encode, decode
from passlib.context import CryptContext

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["sha256_crypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    :param plain_password: пароль из формы входа
    :param hashed_password: хэш, посчитанный при старте
    :return: True если пароль совпадает с хэшем
    """
    if not plain_password or not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, secret: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    JWT на основе data (например {"sub": "admin"}), по умолчанию на 15 минут.
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=15))
    to_encode.update({"exp": expire})
    return encode(to_encode, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> dict:
    """Бросает ExpiredSignatureError / InvalidTokenError из PyJWT."""
    return decode(token, secret, algorithms=[ALGORITHM])
