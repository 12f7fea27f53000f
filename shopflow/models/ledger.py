from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, String, Text, func

from ..db import Base

WITHDRAWAL_TYPES = ("cash", "item")


class Withdrawal(Base):
    __tablename__ = "withdrawals"
    id = Column(Integer, primary_key=True)
    type = Column(String, nullable=False)  # cash | item
    product_id = Column(Integer, ForeignKey("products.id"), nullable=True, index=True)
    amount = Column(Float, nullable=False)  # valor en dinero, no cantidad
    description = Column(Text)
    created_at = Column(DateTime, server_default=func.current_timestamp(), index=True)

    __table_args__ = (
        CheckConstraint("type IN ('cash','item')", name="ck_withdrawals_type"),
    )


class StockArrival(Base):
    __tablename__ = "stock_arrivals"
    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), index=True)
    quantity = Column(Float, nullable=False)
    cost_price = Column(Float, nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp(), index=True)
