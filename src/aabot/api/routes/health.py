"""Health check and version endpoints."""

import sqlalchemy as sa
import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from aabot import __version__
from aabot.api.deps import get_db
from aabot.api.schemas import VersionInfo

logger = structlog.get_logger()

router = APIRouter()


@router.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/health/db")
async def health_db(db: AsyncSession = Depends(get_db)):
    """Run ``SELECT 1`` against the configured database."""
    try:
        await db.execute(sa.text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("database_health_check_failed", error_type=type(exc).__name__)
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ok"}


@router.get("/api/version", response_model=VersionInfo)
async def version() -> VersionInfo:
    return VersionInfo(
        name="AABot",
        version=__version__,
        description="Apache Answer Slack Integration",
    )
