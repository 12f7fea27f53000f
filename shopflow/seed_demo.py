import logging

from sqlalchemy.orm import Session

from .db import SessionLocal, init_db
from .models.product import Product

log = logging.getLogger("shopflow")

# name, unit_type, cost_price, selling_price, quantity, min_stock
DEMO_PRODUCTS = [
    ("Dahl (Red)", "weight", 180, 220, 50, 10),
    ("Sugar", "weight", 150, 180, 100, 20),
    ("Coconut Oil", "volume", 450, 550, 20, 5),
    ("Milk Powder 400g", "unit", 950, 1050, 15, 5),
]


def seed_products(db: Session) -> int:
    """Carga el catálogo demo solo si la tabla products está vacía."""
    if db.query(Product).count() > 0:
        return 0
    for name, unit_type, cost, price, qty, min_stock in DEMO_PRODUCTS:
        db.add(
            Product(
                name=name,
                unit_type=unit_type,
                cost_price=cost,
                selling_price=price,
                quantity=qty,
                min_stock=min_stock,
            )
        )
    db.commit()
    log.info("Seed OK | %d demo products", len(DEMO_PRODUCTS))
    return len(DEMO_PRODUCTS)


def main():
    init_db()
    db = SessionLocal()
    try:
        n = seed_products(db)
        print(f"Seed OK | inserted={n}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
