import logging

from sqlalchemy import text

from ..db import atomic
from ..models.product import Product

log = logging.getLogger("shopflow")

PATCHABLE = ("cost_price", "selling_price", "quantity", "min_stock")


def list_products(db):
    return [p.to_dict() for p in db.query(Product).order_by(Product.name.asc()).all()]


def create_product(db, **fields) -> int:
    with atomic(db):
        p = Product(**fields)
        db.add(p)
        db.flush()
        pid = p.id
    log.info("[API] Product %s created: %s", pid, fields.get("name"))
    return pid


def update_product(db, product_id: int, changes: dict) -> None:
    values = {k: v for k, v in changes.items() if k in PATCHABLE}
    if not values:
        return
    with atomic(db):
        db.query(Product).filter(Product.id == product_id).update(values, synchronize_session=False)


def delete_product(db, product_id: int) -> None:
    """
    Borra el producto y todo lo que lo referencia (sale_items, withdrawals,
    stock_arrivals); luego elimina las ventas que quedaron sin líneas.
    No revierte stock ni recalcula totales de ventas.
    """
    log.info("[API] Deleting product: %s", product_id)
    with atomic(db):
        params = {"pid": product_id}
        db.execute(text("DELETE FROM sale_items WHERE product_id = :pid"), params)
        db.execute(text("DELETE FROM withdrawals WHERE product_id = :pid"), params)
        db.execute(text("DELETE FROM stock_arrivals WHERE product_id = :pid"), params)
        db.execute(text("DELETE FROM products WHERE id = :pid"), params)
        # ventas huérfanas
        db.execute(text("""
            DELETE FROM sales
            WHERE id NOT IN (SELECT DISTINCT sale_id FROM sale_items WHERE sale_id IS NOT NULL)
        """))
