import os
import tempfile

# La configuración se lee al importar shopflow: fijar el entorno antes
_TMP = tempfile.mkdtemp(prefix="shopflow-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP, "test.db").replace("\\", "/")
os.environ["SEED_DEMO"] = "false"
os.environ["LOG_DIR"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from shopflow.db import Base, engine  # noqa: E402
from shopflow.main import app  # noqa: E402


class Api:
    """Envoltura mínima: cada llamada devuelve (status_code, json)."""

    def __init__(self, client):
        self.client = client

    def _js(self, r):
        try:
            return r.status_code, r.json()
        except ValueError:
            return r.status_code, {"text": r.text}

    def get(self, path, params=None):
        return self._js(self.client.get(path, params=params))

    def post(self, path, body=None, params=None):
        return self._js(self.client.post(path, json=body, params=params))

    def patch(self, path, body):
        return self._js(self.client.patch(path, json=body))

    def delete(self, path):
        return self._js(self.client.delete(path))

    # atajos de dominio
    def product(self, pid):
        st, rows = self.get("/api/products")
        assert st == 200
        return next((p for p in rows if p["id"] == pid), None)

    def new_product(self, name="Rice", unit_type="weight", cost_price=100.0,
                    selling_price=150.0, quantity=10.0, min_stock=2.0):
        st, js = self.post("/api/products", {
            "name": name,
            "unit_type": unit_type,
            "cost_price": cost_price,
            "selling_price": selling_price,
            "quantity": quantity,
            "min_stock": min_stock,
        })
        assert st == 200, js
        return js["id"]

    def sell(self, *lines):
        items = [{"product_id": pid, "quantity": qty, "selling_price": price} for pid, qty, price in lines]
        st, js = self.post("/api/sales", {"items": items})
        assert st == 200, js
        return js["saleId"]

    def sql(self, statement):
        st, js = self.post("/api/query", {"sql": statement})
        assert st == 200, js
        return js["results"]


@pytest.fixture()
def client():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def api(client):
    return Api(client)
