from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel


class ToppingView(BaseModel):
    topping_id: int
    topping_name: str
    topping_price: Decimal

    class Config:
        from_attributes = True


class ProductView(BaseModel):
    id: int
    product_name: str
    product_price: Decimal
    topping_group: Optional[str] = None
    topping_limit: int = 0
    toppings: List[ToppingView] = []

    class Config:
        from_attributes = True
