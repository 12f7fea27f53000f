from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.schemas import ProductIn, ProductPatch
from ..db import get_db
from ..services import products as svc

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def list_products(db: Session = Depends(get_db)):
    return svc.list_products(db)


@router.post("")
def create_product(body: ProductIn, db: Session = Depends(get_db)):
    return {"id": svc.create_product(db, **body.model_dump())}


@router.patch("/{product_id}")
def update_product(product_id: int, body: ProductPatch, db: Session = Depends(get_db)):
    svc.update_product(db, product_id, body.model_dump(exclude_unset=True))
    return {"success": True}


@router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    svc.delete_product(db, product_id)
    return {"success": True}
