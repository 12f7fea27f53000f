import logging
from datetime import datetime, timezone

from sqlalchemy import text

from ..db import atomic, row_to_dict

log = logging.getLogger("shopflow")


def today_utc() -> str:
    # CURRENT_TIMESTAMP de SQLite es UTC
    return datetime.now(timezone.utc).date().isoformat()


def current_month_utc() -> str:
    return today_utc()[:7]


def dashboard(db, day=None):
    day = day or today_utc()
    sales = db.execute(
        text("""
            SELECT COUNT(*) AS cnt,
                   COALESCE(SUM(total_amount), 0) AS total_sales,
                   COALESCE(SUM(total_profit), 0) AS total_profit
            FROM sales WHERE date(created_at) = date(:day)
        """),
        {"day": day},
    ).fetchone()
    withdrawn = db.execute(
        text("SELECT COALESCE(SUM(amount), 0) FROM withdrawals WHERE date(created_at) = date(:day)"),
        {"day": day},
    ).scalar()
    low_stock = db.execute(text("SELECT COUNT(*) FROM products WHERE quantity <= min_stock")).scalar()

    return {
        "salesCount": int(sales.cnt or 0),
        "totalSales": float(sales.total_sales or 0.0),
        "totalProfit": float(sales.total_profit or 0.0) - float(withdrawn or 0.0),
        "lowStockCount": int(low_stock or 0),
    }


def monthly(db):
    rows = db.execute(
        text("""
            SELECT
              strftime('%Y-%m', s.created_at) AS month,
              SUM(s.total_amount) AS total_sales,
              SUM(s.total_profit) AS total_profit,
              (SELECT COALESCE(SUM(w.amount), 0) FROM withdrawals w
                WHERE strftime('%Y-%m', w.created_at) = strftime('%Y-%m', s.created_at)) AS total_withdrawals
            FROM sales s
            GROUP BY month
            ORDER BY month DESC
        """)
    ).fetchall()
    out = []
    for r in rows:
        d = row_to_dict(r)
        d["total_withdrawals"] = float(d["total_withdrawals"] or 0.0)
        d["net_profit"] = float(d["total_profit"] or 0.0) - d["total_withdrawals"]
        out.append(d)
    return out


def reset_day(db, day=None) -> None:
    """Limpia ventas y retiros del día. NO revierte stock (solo historial)."""
    day = day or today_utc()
    log.warning("[API] Daily reset: %s", day)
    with atomic(db):
        params = {"day": day}
        db.execute(text("""
            DELETE FROM sale_items
            WHERE sale_id IN (SELECT id FROM sales WHERE date(created_at) = date(:day))
        """), params)
        db.execute(text("DELETE FROM sales WHERE date(created_at) = date(:day)"), params)
        db.execute(text("DELETE FROM withdrawals WHERE date(created_at) = date(:day)"), params)


def reset_month(db, month=None) -> None:
    """Igual que reset_day pero para un YYYY-MM completo."""
    month = month or current_month_utc()
    log.warning("[API] Monthly reset: %s", month)
    with atomic(db):
        params = {"month": month}
        db.execute(text("""
            DELETE FROM sale_items
            WHERE sale_id IN (SELECT id FROM sales WHERE strftime('%Y-%m', created_at) = :month)
        """), params)
        db.execute(text("DELETE FROM sales WHERE strftime('%Y-%m', created_at) = :month"), params)
        db.execute(text("DELETE FROM withdrawals WHERE strftime('%Y-%m', created_at) = :month"), params)
