# shopapi/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = ""          # пусто -> работаем только с памятью

    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""
    STORAGE_BUCKET: str = "product-images"
    UPLOAD_DIR: str = "uploads"
    UPLOAD_MAX_SIZE: int = 10 * 1024 * 1024

    PING_MESSAGE: str = "ping"
    DELIVERY_FEE: float = 1.5
    LOW_STOCK_THRESHOLD: int = 5

    ADMIN_LOGIN: str = "admin"
    ADMIN_PASSWORD: str = "admin"
    ADMIN_AUTH_REQUIRED: bool = False
    AUTH_SECRET_KEY: str = "change-me"
    AUTH_TOKEN_EXPIRE_MINUTES: int = 60

    LOG_DIR: str = "shopapi/log"
    LOG_PRINT: str = "1"

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

settings = Settings()
