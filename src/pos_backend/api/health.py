import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text

from pos_backend.db.deps import get_database
from pos_backend.db.session import STORE_ERRORS, Database

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health", summary="Health check")
async def health_check(db: Database = Depends(get_database)):
    """
    Health-check: приложение живо и пул отдаёт соединение.
    """
    try:
        await db.fetch_all(text("SELECT 1"))
    except STORE_ERRORS:
        logger.exception("Health check: database unavailable")
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "timestamp": datetime.now().isoformat()},
        )
    return {
        "status": "ok",
        "timestamp": datetime.now()
    }
