from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from pos_backend.models.order import OrderOriginEnum


class OrderItemSubmit(BaseModel):
    """
    Позиция заказа. Поля не обязательные на уровне схемы:
    проверка полноты делается в OrderTransactionManager, чтобы ошибка была 400, а не 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[int] = Field(None, alias="productId")
    topping1_id: Optional[int] = Field(None, alias="topping1Id")
    topping2_id: Optional[int] = Field(None, alias="topping2Id")
    quantity: Optional[StrictInt] = None


class OrderSubmit(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    project_id: Optional[int] = Field(None, alias="projectId")
    user_id: Optional[int] = Field(None, alias="userId")
    total_price: Optional[Decimal] = Field(None, alias="totalPrice")
    origin: OrderOriginEnum = OrderOriginEnum.self_service
    items: Optional[List[OrderItemSubmit]] = None


class OrderSubmitResult(BaseModel):
    success: bool = True
    order_id: int = Field(serialization_alias="orderId")


class OrderLineView(BaseModel):
    user_id: int
    product_name: str
    topping1_name: Optional[str] = None
    topping2_name: Optional[str] = None
    quantity: int

    class Config:
        from_attributes = True
