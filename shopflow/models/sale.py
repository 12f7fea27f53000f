from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, func
from sqlalchemy.orm import relationship

from ..db import Base


class Sale(Base):
    __tablename__ = "sales"
    id = Column(Integer, primary_key=True)
    total_amount = Column(Float, nullable=False)
    total_profit = Column(Float, nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp(), index=True)

    items = relationship("SaleItem", back_populates="sale")


class SaleItem(Base):
    __tablename__ = "sale_items"
    id = Column(Integer, primary_key=True)
    sale_id = Column(Integer, ForeignKey("sales.id"), index=True)
    product_id = Column(Integer, ForeignKey("products.id"), index=True)
    quantity = Column(Float, nullable=False)
    unit_price = Column(Float, nullable=False)
    cost_price = Column(Float, nullable=False)  # snapshot al momento de la venta
    profit = Column(Float, nullable=False)

    sale = relationship("Sale", back_populates="items")
