import pytest


def test_query_select_returns_rows(api):
    api.new_product("Rice")
    rows = api.sql("SELECT name, unit_type FROM products")
    assert rows == [{"name": "Rice", "unit_type": "weight"}]


def test_query_pragma_is_treated_as_read(api):
    rows = api.sql("  PRAGMA table_info(sale_items)")
    names = [r["name"] for r in rows]
    assert {"sale_id", "product_id", "quantity", "unit_price", "cost_price", "profit"} <= set(names)


def test_query_write_reports_changes(api):
    api.new_product("Rice")
    api.new_product("Salt")
    results = api.sql("UPDATE products SET min_stock = 99")
    assert results[0]["changes"] == 2

    results = api.sql(
        "INSERT INTO products (name, unit_type, quantity) VALUES ('Tea', 'unit', 3)"
    )
    assert results[0]["changes"] == 1
    new_id = results[0]["lastInsertRowid"]
    assert api.product(new_id)["name"] == "Tea"
    assert api.product(new_id)["min_stock"] == pytest.approx(5)


def test_query_requires_sql(api):
    st, js = api.post("/api/query", {})
    assert st == 400 and js["error"] == "SQL query is required"
    st, js = api.post("/api/query", {"sql": "   "})
    assert st == 400


def test_query_error_is_500_with_raw_message(api):
    st, js = api.post("/api/query", {"sql": "SELECT * FROM nope"})
    assert st == 500
    assert "no such table" in js["error"]


def test_reset_daily_clears_history_but_not_stock(api):
    pid = api.new_product(quantity=20)
    today_sale = api.sell((pid, 2, 150))
    old_sale = api.sell((pid, 3, 150))
    api.post("/api/withdrawals", {"type": "item", "product_id": pid, "amount": 150})
    api.post("/api/stock-arrivals", {"product_id": pid, "quantity": 10, "cost_price": 100})
    api.sql(f"UPDATE sales SET created_at = '2020-01-15 10:00:00' WHERE id = {old_sale}")

    st, js = api.post("/api/reset/daily")
    assert st == 200 and js["success"] is True

    _, sales = api.get("/api/sales/daily")
    assert [s["id"] for s in sales] == [old_sale]
    assert api.get(f"/api/sales/{today_sale}")[0] == 404
    assert api.get("/api/withdrawals")[1] == []
    assert len(api.get("/api/stock-arrivals")[1]) == 1
    # 20 - 2 - 3 - 1 + 10: el stock no se revierte
    assert api.product(pid)["quantity"] == pytest.approx(24)


def test_reset_daily_for_explicit_day(api):
    pid = api.new_product()
    old_sale = api.sell((pid, 1, 150))
    keep = api.sell((pid, 1, 150))
    api.sql(f"UPDATE sales SET created_at = '2020-01-15 10:00:00' WHERE id = {old_sale}")

    st, _ = api.post("/api/reset/daily", params={"day": "2020-01-15"})
    assert st == 200
    assert [s["id"] for s in api.get("/api/sales/daily")[1]] == [keep]


def test_reset_monthly(api):
    pid = api.new_product(quantity=20)
    this_month = api.sell((pid, 1, 150))
    old_sale = api.sell((pid, 1, 150))
    _, w = api.post("/api/withdrawals", {"type": "cash", "amount": 5})
    api.sql(f"UPDATE sales SET created_at = '2020-01-15 10:00:00' WHERE id = {old_sale}")

    st, _ = api.post("/api/reset/monthly")
    assert st == 200
    assert [s["id"] for s in api.get("/api/sales/daily")[1]] == [old_sale]
    assert api.get(f"/api/sales/{this_month}")[0] == 404
    assert api.get("/api/withdrawals")[1] == []

    st, _ = api.post("/api/reset/monthly", params={"month": "2020-01"})
    assert st == 200
    assert api.get("/api/sales/daily")[1] == []
    assert api.sql("SELECT COUNT(*) AS n FROM sale_items")[0]["n"] == 0
    assert api.product(pid)["quantity"] == pytest.approx(18)


def test_reset_monthly_rejects_bad_month(api):
    st, _ = api.post("/api/reset/monthly", params={"month": "January"})
    assert st == 422


def test_query_with_returning_does_not_block_later_writes(api):
    pid = api.new_product("Rice", quantity=10)
    results = api.sql("UPDATE products SET min_stock = 1 RETURNING id")
    assert results[0]["changes"] == 1
    assert api.product(pid)["min_stock"] == pytest.approx(1)

    # la conexión vuelve limpia al pool: las operaciones siguientes funcionan
    api.sell((pid, 2, 150))
    assert api.product(pid)["quantity"] == pytest.approx(8)
    st, _ = api.delete(f"/api/products/{pid}")
    assert st == 200
    assert api.product(pid) is None


def test_reset_daily_rejects_impossible_date(api):
    pid = api.new_product()
    api.sell((pid, 1, 150))
    st, _ = api.post("/api/reset/daily", params={"day": "2020-13-45"})
    assert st == 422
    assert len(api.get("/api/sales/daily")[1]) == 1


def test_reset_monthly_rejects_month_thirteen(api):
    st, _ = api.post("/api/reset/monthly", params={"month": "2020-13"})
    assert st == 422
