"""Error types raised by the MailChimp client.

Purpose:
- Provide typed exceptions thrown by `MailChimp`, its managers and the
  parameter builders in `mailchimp_api.ecommerce`.
- Expose remote context (HTTP status, MailChimp error code, response body) for
  diagnosis.

Usage:
- Catch `MailChimpError` for anything raised by this library, including local
  validation of malformed input.
- Catch `MailChimpApiError` for failures reported by the remote API and
  inspect `code`, `status_code` or `details`.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type


class MailChimpError(Exception):
    """Base error for the library. Raised directly for malformed input."""


class InvalidApiKeyError(MailChimpError):
    """Raised when no usable API key is configured."""


class UnknownManagerError(MailChimpError):
    """Raised by `MailChimp.get_manager` for a name that is not registered.

    Args:
        name: The manager name that was requested.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown manager: {name}")
        self.name = name


class MailChimpApiError(MailChimpError):
    """Remote API failure.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code, when the failure was an HTTP error.
        code: MailChimp error code from the JSON error payload.
        method: API method that was called (e.g. ``campaignOpenedAIM``).
        details: Raw response body or decoded payload.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
        method: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.method = method
        self.details = details


class ApiKeyRejectedError(MailChimpApiError):
    """The remote service rejected the API key (code 104)."""


class ListNotFoundError(MailChimpApiError):
    """The list id passed to a call does not exist (code 200)."""


class CampaignNotFoundError(MailChimpApiError):
    """The campaign id passed to a call does not exist (code 300)."""


API_ERROR_CODES: Dict[int, Type[MailChimpApiError]] = {
    104: ApiKeyRejectedError,
    200: ListNotFoundError,
    300: CampaignNotFoundError,
}


def error_for_code(code: Optional[int]) -> Type[MailChimpApiError]:
    """Return the exception class registered for a MailChimp error code."""
    if code is None:
        return MailChimpApiError
    return API_ERROR_CODES.get(code, MailChimpApiError)
