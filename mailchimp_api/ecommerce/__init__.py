from .models import OrderItem
from .order import Order, OrderInterface

__all__ = ["Order", "OrderInterface", "OrderItem"]
