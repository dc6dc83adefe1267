import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rawpasta.api.http import documents_router, health_router, keys_router
from rawpasta.core.config import settings
from rawpasta.core.db import engine, init_models
from rawpasta.core.errors import register_exception_handlers
from rawpasta.core.logging_setup import setup_logging

setup_logging(settings.log_level, settings.timezone)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    if not settings.totp_secret:
        logger.warning("TOTP_SECRET is not set, API keys cannot be issued")
    logger.info("RawPasta API ready, database %s", engine.url.render_as_string(hide_password=True))
    yield
    await engine.dispose()
    logger.info("RawPasta API shut down")


app = FastAPI(
    title="RawPasta",
    description="Хранилище текстовых документов с доступом по API-ключам",
    version=settings.app_version,
    lifespan=lifespan
)

# CORS для любых клиентов
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(keys_router)
app.include_router(documents_router)


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting RawPasta API on port %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
