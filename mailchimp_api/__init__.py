"""mailchimp_api.

A client for the MailChimp v1.3 API.

High-level architecture
-----------------------

- ``mailchimp_api.client.MailChimp`` owns the HTTP transport. It derives the
  datacenter endpoint from the API key, POSTs ``?method=<name>&output=json``
  calls and turns error payloads into ``MailChimpApiError``.
- ``mailchimp_api.managers`` groups the API methods per resource
  (``Campaign``, ``CampaignStats``, ``CampaignReportData``, ``Ecommerce``,
  ``Lists``, ``Helper``). Managers validate arguments locally before calling.
- ``mailchimp_api.ecommerce`` holds value objects such as ``Order`` that
  assemble and validate the parameters of a single call.

Typical workflow
----------------

1. ``mailchimp = MailChimp("<key>-us5")`` or ``MailChimp.from_settings()``.
2. ``reports = mailchimp.get_manager("CampaignReportData")``.
3. ``opens = reports.campaign_opened_aim(cid)``.
"""

from .client import MailChimp
from .config import MailChimpSettings
from .ecommerce import Order, OrderInterface, OrderItem
from .errors import (
    ApiKeyRejectedError,
    CampaignNotFoundError,
    InvalidApiKeyError,
    ListNotFoundError,
    MailChimpApiError,
    MailChimpError,
    UnknownManagerError,
)

__version__ = "0.1.0"

__all__ = [
    "MailChimp",
    "MailChimpSettings",
    "Order",
    "OrderInterface",
    "OrderItem",
    "MailChimpError",
    "MailChimpApiError",
    "InvalidApiKeyError",
    "UnknownManagerError",
    "ApiKeyRejectedError",
    "ListNotFoundError",
    "CampaignNotFoundError",
]
