import enum
from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey, Enum as SAEnum, func
from sqlalchemy.orm import relationship
from ..db.base import Base


class OrderStatusEnum(str, enum.Enum):
    open = "open"
    paid = "paid"
    cancelled = "cancelled"


class OrderOriginEnum(str, enum.Enum):
    self_service = "self_service"
    cashier = "cashier"


class Order(Base):
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("project.project_id"), nullable=False)
    user_id = Column(Integer, nullable=False, index=True)
    total_price = Column(Numeric(10, 2), nullable=False)
    status = Column(SAEnum(OrderStatusEnum, name="order_status"), nullable=False, default=OrderStatusEnum.open)
    origin = Column(SAEnum(OrderOriginEnum, name="order_origin"), nullable=False, default=OrderOriginEnum.self_service)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # связи
    items = relationship("Item", back_populates="order", cascade="all, delete-orphan")
