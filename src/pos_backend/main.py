import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pos_backend.api import health
from pos_backend.api.routes.catalog import router as catalog_router
from pos_backend.api.routes.orders import router as orders_router
from pos_backend.config import settings
from pos_backend.db.session import Database, create_database

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Тело запроса не прошло схему: отвечаем 400 {error}, как и при проверке заказа."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"error": f"{location}: {message}" if location else message},
    )


def create_app(database: Database | None = None) -> FastAPI:
    """
    Собирает приложение.
    Если database не передан, пул создаётся из настроек при старте и закрывается при остановке.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_database = database is None
        if owns_database:
            app.state.db = create_database(
                settings.database_url,
                pool_size=settings.DB_POOL_SIZE,
                pool_timeout=settings.DB_POOL_TIMEOUT,
                echo=settings.DB_ECHO,
            )
            if settings.DB_CREATE_SCHEMA:
                await app.state.db.create_schema()
                logger.info("Database schema created")
        logger.info("Application started")
        yield
        if owns_database:
            await app.state.db.dispose()
        logger.info("Application stopped")

    app = FastAPI(title="POS Backend", lifespan=lifespan)
    if database is not None:
        app.state.db = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Подключаем роуты
    app.include_router(health.router)
    app.include_router(catalog_router)
    app.include_router(orders_router)

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
