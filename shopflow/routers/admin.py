from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..core.schemas import QueryIn
from ..db import get_db
from ..services import reports
from ..services.query import run_query

router = APIRouter(prefix="/api", tags=["admin"])


@router.get("/dashboard")
def dashboard(db: Session = Depends(get_db)):
    return reports.dashboard(db)


@router.post("/query")
def query(body: Optional[QueryIn] = None, db: Session = Depends(get_db)):
    # OJO: sin autorización ni sanitización (solo para administración/debug)
    if body is None or not (body.sql or "").strip():
        return JSONResponse(status_code=400, content={"error": "SQL query is required"})
    return {"results": run_query(db, body.sql)}


@router.post("/reset/daily")
def reset_daily(day: Optional[date] = None, db: Session = Depends(get_db)):
    reports.reset_day(db, day.isoformat() if day else None)
    return {"success": True}


@router.post("/reset/monthly")
def reset_monthly(month: Optional[str] = Query(default=None, pattern=r"^\d{4}-(0[1-9]|1[0-2])$"), db: Session = Depends(get_db)):
    reports.reset_month(db, month)
    return {"success": True}
