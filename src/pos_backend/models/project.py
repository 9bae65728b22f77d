from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..db.base import Base


class Project(Base):
    __tablename__ = "project"

    project_id = Column(Integer, primary_key=True, index=True)
    project_name = Column(String(128), nullable=False, unique=True)

    # связи
    products = relationship("Product", back_populates="project")
    toppings = relationship("Topping", back_populates="project")
