import logging

from sqlalchemy import text

from ..db import atomic, row_to_dict

log = logging.getLogger("shopflow")


def record_stock_arrival(db, product_id: int, quantity: float, cost_price: float) -> int:
    """Suma la cantidad y SOBRESCRIBE cost_price con el de la entrada (sin promedio)."""
    with atomic(db):
        res = db.execute(
            text("""
                INSERT INTO stock_arrivals (product_id, quantity, cost_price)
                VALUES (:pid, :qty, :cost)
            """),
            {"pid": product_id, "qty": quantity, "cost": cost_price},
        )
        arrival_id = res.lastrowid
        db.execute(
            text("UPDATE products SET quantity = quantity + :qty, cost_price = :cost WHERE id = :pid"),
            {"qty": quantity, "cost": cost_price, "pid": product_id},
        )

    log.info("[API] Stock arrival %s: product=%s qty=%s cost=%s", arrival_id, product_id, quantity, cost_price)
    return arrival_id


def undo_stock_arrival(db, arrival_id: int) -> None:
    """Resta la cantidad recibida. El cost_price anterior NO se restaura."""
    log.info("[API] Deleting stock arrival: %s", arrival_id)
    with atomic(db):
        a = db.execute(
            text("SELECT product_id, quantity FROM stock_arrivals WHERE id = :aid"), {"aid": arrival_id}
        ).fetchone()
        if a is None:
            return
        db.execute(
            text("UPDATE products SET quantity = quantity - :qty WHERE id = :pid"),
            {"qty": a.quantity, "pid": a.product_id},
        )
        db.execute(text("DELETE FROM stock_arrivals WHERE id = :aid"), {"aid": arrival_id})


def list_stock_arrivals(db):
    rows = db.execute(
        text("""
            SELECT sa.*, p.name AS product_name
            FROM stock_arrivals sa
            JOIN products p ON sa.product_id = p.id
            ORDER BY sa.created_at DESC, sa.id DESC
        """)
    ).fetchall()
    return [row_to_dict(r) for r in rows]
