from sqlalchemy import CheckConstraint, Column, Float, Integer, String

from ..db import Base

UNIT_TYPES = ("unit", "weight", "volume")


class Product(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    unit_type = Column(String, nullable=False)  # unit | weight | volume
    cost_price = Column(Float, default=0, server_default="0")
    selling_price = Column(Float, default=0, server_default="0")
    quantity = Column(Float, default=0, server_default="0")  # puede quedar negativa
    min_stock = Column(Float, default=5, server_default="5")

    __table_args__ = (
        CheckConstraint("unit_type IN ('unit','weight','volume')", name="ck_products_unit_type"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "unit_type": self.unit_type,
            "cost_price": self.cost_price,
            "selling_price": self.selling_price,
            "quantity": self.quantity,
            "min_stock": self.min_stock,
        }

    def __repr__(self):
        return f"<Product {self.name}>"
