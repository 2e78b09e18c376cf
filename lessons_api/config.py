# lessons_api/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    MONGO_URI: str = "mongodb://localhost:27017"    # строка подключения к MongoDB
    DB_NAME: str = "lessons_app"                    # имя базы
    MONGO_TIMEOUT_MS: int = 5000                    # таймаут выбора сервера

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    CORS_ORIGINS: str = "*"     # через запятую

    LOG_DIR: str = "lessons_api/log"
    LOG_PRINT: str = "1"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def log_print(self) -> bool:
        return self.LOG_PRINT.lower() in ("1", "true", "yes")

settings = Settings()
