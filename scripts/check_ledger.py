import sys

from sqlalchemy import text

from shopflow.db import SessionLocal

"""
Revisa consistencia del libro de ventas:
- ventas cuyo total_amount / total_profit no cuadra con la suma de sale_items
- ventas sin líneas
Uso: python scripts/check_ledger.py [--tolerance 0.01]
Sale con código 1 si encuentra diferencias.
"""


def find_mismatches(db, tolerance=0.01):
    rows = db.execute(text("""
        SELECT s.id, s.total_amount, s.total_profit,
               COALESCE(SUM(si.unit_price * si.quantity), 0) AS items_amount,
               COALESCE(SUM(si.profit), 0) AS items_profit,
               COUNT(si.id) AS lines
        FROM sales s
        LEFT JOIN sale_items si ON si.sale_id = s.id
        GROUP BY s.id
        ORDER BY s.id
    """)).fetchall()
    problems = []
    for sid, amount, profit, items_amount, items_profit, lines in rows:
        if lines == 0:
            problems.append((sid, "no_items"))
        elif abs((amount or 0) - items_amount) > tolerance or abs((profit or 0) - items_profit) > tolerance:
            problems.append((sid, f"totals {amount}/{profit} != items {items_amount}/{items_profit}"))
    return problems


def main():
    tolerance = 0.01
    if "--tolerance" in sys.argv:
        tolerance = float(sys.argv[sys.argv.index("--tolerance") + 1])
    s = SessionLocal()
    try:
        problems = find_mismatches(s, tolerance)
    finally:
        s.close()
    print("MISMATCHES =", len(problems))
    for sid, why in problems[:50]:
        print(f"  sale_id={sid} {why}")
    if problems:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
