from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..core.schemas import SaleCreate
from ..db import get_db
from ..services import reports
from ..services import sales as svc

router = APIRouter(prefix="/api/sales", tags=["sales"])


@router.post("")
def create_sale(body: SaleCreate, db: Session = Depends(get_db)):
    sale_id = svc.record_sale(db, body.items)
    return {"success": True, "saleId": sale_id}


# /daily y /monthly antes de /{sale_id}
@router.get("/daily")
def sales_history(day: Optional[date] = None, db: Session = Depends(get_db)):
    return svc.list_sales(db, day.isoformat() if day else None)


@router.get("/monthly")
def sales_monthly(db: Session = Depends(get_db)):
    return reports.monthly(db)


@router.get("/{sale_id}")
def sale_detail(sale_id: int, db: Session = Depends(get_db)):
    sale = svc.get_sale(db, sale_id)
    if sale is None:
        return JSONResponse(status_code=404, content={"error": "Sale not found"})
    return sale


@router.delete("/{sale_id}")
def undo_sale(sale_id: int, db: Session = Depends(get_db)):
    svc.undo_sale(db, sale_id)
    return {"success": True}
