"""Pydantic models for e-commerce order parameters."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import Field, field_validator, model_validator

from ..schemas.base import BaseSchema


class OrderItem(BaseSchema):
    """One line of an order as sent to ``ecommOrderAdd``/``campaignEcommOrderAdd``.

    Field order matches the wire format. `sku` falls back to `product_id`.
    Names given as numbers are kept as their string form.

    Examples:
        >>> OrderItem(product_id=7, product_name="Mug", category_id=2, category_name="Kitchen", qty=2, cost="4.5").sku
        7
    """

    line_num: Optional[int] = Field(
        default=None, description="Line number on the order. Generated by the API when omitted."
    )
    product_id: Union[int, str] = Field(..., description="The store's internal ID for the product.")
    sku: Optional[Union[int, str]] = Field(default=None, description="The store's internal SKU for the product.")
    product_name: str = Field(..., description="Product name for `product_id`.")
    category_id: Union[int, str] = Field(..., description="The store's internal ID for the product category.")
    category_name: str = Field(..., description="Category name for `category_id`.")
    qty: int = Field(..., ge=0, description="Quantity ordered.")
    cost: Decimal = Field(..., description="Cost of a single item, not the total cost of the line.")

    @model_validator(mode="before")
    @classmethod
    def _default_sku(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("sku") is None:
            return {**data, "sku": data.get("product_id")}
        return data

    @field_validator("product_name", "category_name", mode="before")
    @classmethod
    def _name_to_str(cls, v: Any) -> Any:
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def line_total(self) -> Decimal:
        return self.cost * self.qty
