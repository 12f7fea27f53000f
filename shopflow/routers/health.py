from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from ..core.config import settings
from ..db import get_db

router = APIRouter(tags=["health"])


@router.get("/health", operation_id="health_v1")
def health(db: Session = Depends(get_db)):
    products = db.execute(text("SELECT COUNT(*) FROM products")).scalar()
    return {
        "status": "ok",
        "app": settings.app_name,
        "version": settings.app_version,
        "products": int(products or 0),
        "time": datetime.now(timezone.utc).isoformat(),
    }
