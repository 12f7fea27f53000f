from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.schemas import WithdrawalIn
from ..db import get_db
from ..services import withdrawals as svc

router = APIRouter(prefix="/api/withdrawals", tags=["withdrawals"])


@router.get("")
def list_withdrawals(db: Session = Depends(get_db)):
    return svc.list_withdrawals(db)


@router.post("")
def create_withdrawal(body: WithdrawalIn, db: Session = Depends(get_db)):
    wid = svc.record_withdrawal(db, body.type, body.product_id, body.amount, body.description)
    return {"success": True, "id": wid}


@router.delete("/{withdrawal_id}")
def undo_withdrawal(withdrawal_id: int, db: Session = Depends(get_db)):
    svc.undo_withdrawal(db, withdrawal_id)
    return {"success": True}
