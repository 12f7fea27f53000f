import logging

from sqlalchemy import text

from ..db import atomic, row_to_dict

log = logging.getLogger("shopflow")


def record_sale(db, items) -> int:
    """
    Registra una venta completa en una sola transacción:
    - inserta la venta con totales en 0
    - por cada línea toma el cost_price ACTUAL del producto, calcula
      profit/amount, guarda sale_item y descuenta stock
    - al final rellena total_amount / total_profit
    No valida stock suficiente (la cantidad puede quedar negativa).
    """
    with atomic(db):
        res = db.execute(text("INSERT INTO sales (total_amount, total_profit) VALUES (0, 0)"))
        sale_id = res.lastrowid
        total_amount = 0.0
        total_profit = 0.0

        for it in items:
            row = db.execute(
                text("SELECT id, cost_price FROM products WHERE id = :pid"), {"pid": it.product_id}
            ).fetchone()
            if row is None:
                raise LookupError(f"Product {it.product_id} not found")
            cost = row.cost_price or 0.0

            profit = (it.selling_price - cost) * it.quantity
            amount = it.selling_price * it.quantity
            total_amount += amount
            total_profit += profit

            db.execute(
                text("""
                    INSERT INTO sale_items (sale_id, product_id, quantity, unit_price, cost_price, profit)
                    VALUES (:sid, :pid, :qty, :price, :cost, :profit)
                """),
                {
                    "sid": sale_id,
                    "pid": it.product_id,
                    "qty": it.quantity,
                    "price": it.selling_price,
                    "cost": cost,
                    "profit": profit,
                },
            )
            db.execute(
                text("UPDATE products SET quantity = quantity - :qty WHERE id = :pid"),
                {"qty": it.quantity, "pid": it.product_id},
            )

        db.execute(
            text("UPDATE sales SET total_amount = :amt, total_profit = :profit WHERE id = :sid"),
            {"amt": total_amount, "profit": total_profit, "sid": sale_id},
        )

    log.info("[API] Sale %s recorded: %d line(s), amount=%.2f profit=%.2f",
             sale_id, len(items), total_amount, total_profit)
    return sale_id


def undo_sale(db, sale_id: int) -> None:
    """Devuelve el stock de cada línea y borra sale_items + venta."""
    log.info("[API] Deleting sale: %s", sale_id)
    with atomic(db):
        rows = db.execute(
            text("SELECT product_id, quantity FROM sale_items WHERE sale_id = :sid"), {"sid": sale_id}
        ).fetchall()
        for product_id, qty in rows:
            db.execute(
                text("UPDATE products SET quantity = quantity + :qty WHERE id = :pid"),
                {"qty": qty, "pid": product_id},
            )
        db.execute(text("DELETE FROM sale_items WHERE sale_id = :sid"), {"sid": sale_id})
        db.execute(text("DELETE FROM sales WHERE id = :sid"), {"sid": sale_id})


def list_sales(db, day=None):
    where = ""
    params = {}
    if day:
        where = "WHERE date(s.created_at) = date(:day)"
        params["day"] = day
    rows = db.execute(
        text(f"""
            SELECT s.*, (SELECT COUNT(*) FROM sale_items WHERE sale_id = s.id) AS item_count
            FROM sales s
            {where}
            ORDER BY s.created_at DESC, s.id DESC
        """),
        params,
    ).fetchall()
    return [row_to_dict(r) for r in rows]


def get_sale(db, sale_id: int):
    sale = row_to_dict(
        db.execute(text("SELECT * FROM sales WHERE id = :sid"), {"sid": sale_id}).fetchone()
    )
    if sale is None:
        return None
    items = db.execute(
        text("""
            SELECT si.*, p.name AS product_name
            FROM sale_items si
            LEFT JOIN products p ON p.id = si.product_id
            WHERE si.sale_id = :sid
            ORDER BY si.id
        """),
        {"sid": sale_id},
    ).fetchall()
    sale["items"] = [row_to_dict(r) for r in items]
    return sale
