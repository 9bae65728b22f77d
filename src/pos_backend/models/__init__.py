from .project import Project
from .product import Product
from .topping import Topping
from .order import Order, OrderStatusEnum, OrderOriginEnum
from .item import Item

__all__ = [
    "Project",
    "Product",
    "Topping",
    "Order",
    "OrderStatusEnum",
    "OrderOriginEnum",
    "Item",
]
