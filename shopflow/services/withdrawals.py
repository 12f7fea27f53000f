import logging

from sqlalchemy import text

from ..db import atomic, row_to_dict

log = logging.getLogger("shopflow")


def record_withdrawal(db, type_: str, product_id, amount: float, description=None) -> int:
    """
    cash: solo registra monto/descripción.
    item: descuenta exactamente 1 unidad del producto, sin importar `amount`
    (el monto es una valoración en dinero, no una cantidad).
    """
    # 0 / None -> NULL para no romper la FK
    pid = product_id if (type_ == "item" and product_id) else None

    with atomic(db):
        res = db.execute(
            text("""
                INSERT INTO withdrawals (type, product_id, amount, description)
                VALUES (:type, :pid, :amount, :description)
            """),
            {"type": type_, "pid": pid, "amount": amount, "description": description},
        )
        wid = res.lastrowid
        if type_ == "item" and pid:
            db.execute(text("UPDATE products SET quantity = quantity - 1 WHERE id = :pid"), {"pid": pid})

    log.info("[API] Withdrawal %s recorded (%s, amount=%.2f, product=%s)", wid, type_, amount, pid)
    return wid


def undo_withdrawal(db, withdrawal_id: int) -> None:
    log.info("[API] Deleting withdrawal: %s", withdrawal_id)
    with atomic(db):
        w = db.execute(
            text("SELECT type, product_id FROM withdrawals WHERE id = :wid"), {"wid": withdrawal_id}
        ).fetchone()
        if w is not None and w.type == "item" and w.product_id:
            db.execute(
                text("UPDATE products SET quantity = quantity + 1 WHERE id = :pid"), {"pid": w.product_id}
            )
        db.execute(text("DELETE FROM withdrawals WHERE id = :wid"), {"wid": withdrawal_id})


def list_withdrawals(db):
    rows = db.execute(
        text("""
            SELECT w.*, p.name AS product_name
            FROM withdrawals w
            LEFT JOIN products p ON p.id = w.product_id
            ORDER BY w.created_at DESC, w.id DESC
        """)
    ).fetchall()
    return [row_to_dict(r) for r in rows]
