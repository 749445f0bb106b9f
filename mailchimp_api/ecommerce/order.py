"""Order builder for the e-commerce tracking calls.

`Order` collects the parameters required by ``campaignEcommOrderAdd`` (and
the store-level ``ecommOrderAdd``): the order identity, its line items and the
shipping/tax totals. `prepare()` validates the order and emits the mapping
that the managers send.

Usage:
    order = Order("1001", campaign_id="c1a2b3", email_id="e4d5f6", store_id="store-1")
    order.add_item(42, "Mug", 7, "Kitchen", cost=4.5, qty=2)
    order.set_shipping(3.95)
    client.campaigns.campaign_ecomm_order_add(order)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date as date_type
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from ..errors import MailChimpError
from ..params import format_datetime, is_numeric, to_decimal
from .models import OrderItem


class OrderInterface(ABC):
    """Anything that can produce the ``order`` parameter of an order-add call."""

    @abstractmethod
    def prepare(self) -> Dict[str, Any]: ...


class Order(OrderInterface):
    """A store purchase attributed to an email campaign.

    Args:
        order_id: The store's internal ID for the order.
        campaign_id: The ``mc_cid`` recorded from an email click.
        email_id: The ``mc_eid`` recorded from an email click.
        store_id: Unique, user-defined ID for the store sending the order.
        store_name: Optional "nice" name for `store_id`.
        date: Optional order date; `date`/`datetime` values are formatted for the API.
    """

    def __init__(
        self,
        order_id: str,
        campaign_id: Optional[str],
        email_id: str,
        store_id: str,
        store_name: Optional[str] = None,
        date: Union[str, date_type, None] = None,
    ) -> None:
        self.order_id = order_id
        self.campaign_id = campaign_id
        self.email_id = email_id
        self.store_id = store_id
        self.store_name = store_name
        self.date = format_datetime(date)
        self._items: List[OrderItem] = []
        self.items_cost = Decimal(0)
        self.shipping: Optional[Decimal] = None
        self.tax: Optional[Decimal] = None

    @property
    def items(self) -> List[Dict[str, Any]]:
        return [item.model_dump() for item in self._items]

    def add_item(
        self,
        product_id: Union[int, str],
        product_name: str,
        category_id: Union[int, str],
        category_name: str,
        cost: Any,
        qty: Any,
        sku: Optional[Union[int, str]] = None,
        line_num: Optional[int] = None,
    ) -> None:
        """Add a line item and add ``cost * qty`` to the running items total."""
        if not is_numeric(cost):
            raise MailChimpError("Item cost must be a numeric value")
        if not is_numeric(qty):
            raise MailChimpError("Item quantity must be a numeric value")
        quantity = to_decimal(qty)
        if quantity != quantity.to_integral_value():
            raise MailChimpError("Item quantity must be a whole number")
        try:
            item = OrderItem(
                line_num=line_num,
                product_id=product_id,
                sku=sku,
                product_name=product_name,
                category_id=category_id,
                category_name=category_name,
                qty=int(quantity),
                cost=to_decimal(cost),
            )
        except ValidationError as e:
            raise MailChimpError(f"Invalid order item: {e}") from e
        self._items.append(item)
        self.items_cost += item.line_total

    def set_shipping(self, shipping: Any) -> None:
        if not is_numeric(shipping):
            raise MailChimpError("Shipping cost must be a numeric value")
        self.shipping = to_decimal(shipping)

    def set_tax(self, tax: Any) -> None:
        if not is_numeric(tax):
            raise MailChimpError("Tax must be a numeric value")
        self.tax = to_decimal(tax)

    @property
    def total(self) -> Decimal:
        return self.items_cost + (self.shipping or 0) + (self.tax or 0)

    def prepare(self) -> Dict[str, Any]:
        """Return the order parameters for an API call."""
        if not self._items:
            raise MailChimpError("An order must have at least one item")
        return {
            "id": self.order_id,
            "email_id": self.email_id,
            "total": self.total,
            "order_date": self.date,
            "shipping": self.shipping,
            "tax": self.tax,
            "store_id": self.store_id,
            "store_name": self.store_name,
            "campaign_id": self.campaign_id,
            "items": self.items,
        }
