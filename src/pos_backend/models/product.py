from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from ..db.base import Base


class Product(Base):
    __tablename__ = "product"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("project.project_id"), nullable=False, index=True)
    product_name = Column(String(128), nullable=False)
    product_price = Column(Numeric(10, 2), nullable=False)
    topping_group = Column(String(64), nullable=True)  # тег группы топпингов
    topping_limit = Column(Integer, nullable=False, default=0)  # сколько топпингов можно выбрать

    project = relationship("Project", back_populates="products")
