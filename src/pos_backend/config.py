from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_NAME: str = ""
    DB_DRIVER: str = "postgresql+asyncpg"
    DATABASE_URL: str | None = None

    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: float = 30
    DB_ECHO: bool = False
    DB_CREATE_SCHEMA: bool = False  # создать таблицы при старте (локальный запуск)

    PORT: int = 3003
    CORS_ORIGINS: str = "*"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        """
        DATABASE_URL имеет приоритет, иначе собираем из DB_* переменных.
        Пароль экранируется, поэтому спецсимволы в нём допустимы.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            drivername=self.DB_DRIVER,
            username=self.DB_USER or None,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME or None,
        )
        return url.render_as_string(hide_password=False)

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
