from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.schemas import StockArrivalIn
from ..db import get_db
from ..services import stock as svc

router = APIRouter(prefix="/api/stock-arrivals", tags=["stock"])


@router.get("")
def list_arrivals(db: Session = Depends(get_db)):
    return svc.list_stock_arrivals(db)


@router.post("")
def create_arrival(body: StockArrivalIn, db: Session = Depends(get_db)):
    aid = svc.record_stock_arrival(db, body.product_id, body.quantity, body.cost_price)
    return {"success": True, "id": aid}


@router.delete("/{arrival_id}")
def undo_arrival(arrival_id: int, db: Session = Depends(get_db)):
    svc.undo_stock_arrival(db, arrival_id)
    return {"success": True}
