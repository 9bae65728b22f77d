from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from ..db.base import Base


class Item(Base):
    __tablename__ = "items"

    item_id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.order_id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("product.id"), nullable=False)
    topping1_id = Column(Integer, ForeignKey("topping.topping_id"), nullable=True)
    topping2_id = Column(Integer, ForeignKey("topping.topping_id"), nullable=True)
    quantity = Column(Integer, nullable=False, default=1)

    # связи
    order = relationship("Order", back_populates="items")
