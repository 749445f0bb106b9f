"""Store-level e-commerce order tracking."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Union

from ..ecommerce.order import OrderInterface
from ..params import format_datetime
from .base import BaseManager


class EcommerceManager(BaseManager):
    name = "Ecommerce"

    def ecomm_order_add(self, order: OrderInterface) -> bool:
        """Record an order for the store. Campaign attribution is optional here."""
        return self._call("ecommOrderAdd", order=order.prepare())

    def ecomm_order_del(self, store_id: str, order_id: str) -> bool:
        self._require("store_id", store_id)
        self._require("order_id", order_id)
        return self._call("ecommOrderDel", store_id=store_id, order_id=order_id)

    def ecomm_orders(
        self,
        start: int = 0,
        limit: int = 100,
        since: Union[str, datetime, None] = None,
    ) -> Any:
        self._check_paging(start, limit, 500)
        return self._call("ecommOrders", start=start, limit=limit, since=format_datetime(since))
