from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .config import settings

UnitType = Literal["unit", "weight", "volume"]


class ProductIn(BaseModel):
    name: str = Field(..., min_length=1)
    unit_type: UnitType
    cost_price: float = 0.0
    selling_price: float = 0.0
    quantity: float = 0.0
    min_stock: float = settings.default_min_stock


class ProductPatch(BaseModel):
    # Solo se escriben los campos enviados
    cost_price: Optional[float] = None
    selling_price: Optional[float] = None
    quantity: Optional[float] = None
    min_stock: Optional[float] = None


class SaleLine(BaseModel):
    product_id: int
    quantity: float
    selling_price: float
    name: Optional[str] = None  # la UI lo manda, no se guarda


class SaleCreate(BaseModel):
    items: List[SaleLine] = Field(..., min_length=1)


class WithdrawalIn(BaseModel):
    type: Literal["cash", "item"]
    product_id: Optional[int] = None
    amount: float
    description: Optional[str] = None


class StockArrivalIn(BaseModel):
    product_id: int
    quantity: float
    cost_price: float


class QueryIn(BaseModel):
    sql: Optional[str] = None
