from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from ..db.base import Base


class Topping(Base):
    __tablename__ = "topping"

    topping_id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("project.project_id"), nullable=False, index=True)
    topping_group = Column(String(64), nullable=False)
    topping_name = Column(String(128), nullable=False)
    topping_price = Column(Numeric(10, 2), nullable=False)

    project = relationship("Project", back_populates="toppings")
