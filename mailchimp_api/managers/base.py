"""Shared base for the per-resource managers.

A manager groups the API methods of one resource (campaigns, lists, ...).
Each public method validates its arguments locally, builds the parameter
mapping and dispatches it through `MailChimp.call`. Local validation failures
raise `MailChimpError` before any HTTP traffic happens.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, List, Sequence, Union

from ..errors import MailChimpError

if TYPE_CHECKING:
    from ..client import MailChimp


class BaseManager:
    """Base class for managers returned by `MailChimp.get_manager`."""

    #: Registry name, e.g. ``"CampaignReportData"``.
    name: str = ""

    def __init__(self, client: "MailChimp") -> None:
        self.client = client
        self._logger = logging.getLogger(self.__class__.__module__)

    def _call(self, method: str, **params: Any) -> Any:
        payload = {k: v for k, v in params.items() if v is not None}
        self._logger.debug("%s._call: method=%s params=%s", type(self).__name__, method, sorted(payload))
        return self.client.call(method, payload)

    @staticmethod
    def _check_paging(start: int, limit: int, max_limit: int) -> None:
        if start < 0:
            raise MailChimpError(f"start must be >= 0, got {start}")
        if not 1 <= limit <= max_limit:
            raise MailChimpError(f"limit must be between 1 and {max_limit}, got {limit}")

    @staticmethod
    def _check_choice(field: str, value: Any, choices: Iterable[str]) -> None:
        choices = tuple(choices)
        if value not in choices:
            raise MailChimpError(f"{field} must be one of {', '.join(choices)}; got {value!r}")

    @staticmethod
    def _email_list(email_address: Union[str, Sequence[str]], max_count: int) -> List[str]:
        emails = [email_address] if isinstance(email_address, str) else list(email_address)
        if not emails:
            raise MailChimpError("At least one email address is required")
        if len(emails) > max_count:
            raise MailChimpError(f"At most {max_count} email addresses may be passed, got {len(emails)}")
        return emails

    @staticmethod
    def _require(field: str, value: Any) -> None:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MailChimpError(f"{field} is required")
