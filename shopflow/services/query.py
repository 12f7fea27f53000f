import logging

from ..db import row_to_dict

log = logging.getLogger("shopflow")


def run_query(db, sql: str):
    """
    Escape administrativo: ejecuta SQL arbitrario sin autorización ni
    sanitización. SELECT / PRAGMA devuelven filas; el resto se ejecuta y
    se confirma, devolviendo changes / lastInsertRowid.
    """
    head = sql.strip().lower()
    log.warning("[API] Ad-hoc SQL: %s", sql.strip()[:200])
    conn = db.connection()
    if head.startswith("select") or head.startswith("pragma"):
        result = conn.exec_driver_sql(sql)
        rows = [row_to_dict(r) for r in result.fetchall()] if result.returns_rows else []
        result.close()
        db.commit()
        return rows
    try:
        result = conn.exec_driver_sql(sql)
        last_id = result.lastrowid
        if result.returns_rows:
            # RETURNING: vaciar el cursor antes del commit (SQLite lo exige)
            changes = len(result.fetchall())
        else:
            changes = result.rowcount
        result.close()
        info = {"changes": changes, "lastInsertRowid": last_id}
        db.commit()
    except Exception:
        db.rollback()
        raise
    return [info]
