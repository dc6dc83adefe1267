import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rawpasta.core.config import settings
from rawpasta.core.db import get_db
from rawpasta.core.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

STARTED_AT = time.monotonic()


@router.get("/health", response_model=HealthResponse)
async def health(db: AsyncSession = Depends(get_db)):
    """Состояние сервиса и доступность хранилища"""
    try:
        await db.execute(text("SELECT 1"))
        status = "healthy"
    except (SQLAlchemyError, OSError):
        logger.exception("Health check: database is unreachable")
        status = "degraded"

    now = datetime.now(timezone.utc)
    uptime = time.monotonic() - STARTED_AT

    return HealthResponse(
        timestamp=int(now.timestamp() * 1000),
        date=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        status=status,
        uptime=f"{uptime:.2f} seconds"
    )


@router.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "RawPasta API",
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health"
    }
