# Файл конфігурації, завантажує змінні з .env
from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    model_config = ConfigDict(extra="ignore", env_file=".env")

    # 1. Застосунок
    APP_TITLE: str = "Salary Tax Distribution"
    APP_VERSION: str = "1.0.0"

    # 2. CORS
    # Кома-сепарейтед список; порожньо -> localhost за замовчуванням
    FRONTEND_ORIGIN: str = ""

    # 3. Логування
    LOG_LEVEL: str = "INFO"

    # 4. Відображення сум на сторінці
    CURRENCY_SYMBOL: str = "€"


settings = Settings()
