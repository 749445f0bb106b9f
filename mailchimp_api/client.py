from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional

import httpx

from .config import MailChimpSettings
from .errors import InvalidApiKeyError, MailChimpApiError, UnknownManagerError, error_for_code
from .managers import MANAGERS, BaseManager
from .params import build_query

DEFAULT_DATACENTER = "us1"

_DATACENTER = re.compile(r"^[a-z]+\d+$")


def _to_snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z][a-z])", "_", name).lower()


class MailChimp:
    """
    Thin HTTP client for the MailChimp v1.3 RPC-style API.

    Responsibilities:
    - derive the datacenter endpoint from the API key
    - POST a method call with its form-encoded parameters (`call`)
    - translate HTTP and JSON error payloads into `MailChimpApiError`s
    - hand out per-resource managers (`get_manager`)

    Note: Parameter validation lives in the managers and in the builders
    under `mailchimp_api.ecommerce`; this class only dispatches.
    """

    def __init__(
        self,
        api_key: str,
        *,
        secure: bool = True,
        timeout: float = 30.0,
        api_version: str = "1.3",
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise InvalidApiKeyError("A MailChimp API key is required")
        self.api_key = api_key.strip()
        self.datacenter = self._datacenter(self.api_key)
        if base_url:
            self.endpoint = base_url.rstrip("/") + "/"
        else:
            scheme = "https" if secure else "http"
            self.endpoint = f"{scheme}://{self.datacenter}.api.mailchimp.com/{api_version}/"
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._managers: Dict[str, BaseManager] = {}
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(
        cls, settings: Optional[MailChimpSettings] = None, *, client: Optional[httpx.Client] = None
    ) -> "MailChimp":
        settings = settings or MailChimpSettings()
        if not settings.api_key:
            raise InvalidApiKeyError("MAILCHIMP_API_KEY is not set")
        return cls(
            settings.api_key,
            secure=settings.secure,
            timeout=settings.timeout,
            api_version=settings.api_version,
            base_url=settings.base_url,
            client=client,
        )

    @staticmethod
    def _datacenter(api_key: str) -> str:
        _, sep, dc = api_key.rpartition("-")
        if not sep:
            return DEFAULT_DATACENTER
        if not _DATACENTER.match(dc):
            raise InvalidApiKeyError(f"API key has an invalid datacenter suffix: {dc!r}")
        return dc

    def call(self, method: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Invoke an API method and return the decoded JSON response."""
        data = build_query({"apikey": self.api_key, **(params or {})})
        try:
            self._logger.debug(
                "MailChimp.call: POST %s method=%s fields=%s",
                self.endpoint,
                method,
                sorted(k for k in data if k != "apikey"),
            )
            r = self._client.post(
                self.endpoint,
                params={"method": method, "output": "json"},
                data=data,
            )
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise MailChimpApiError(
                f"MailChimp {method} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                method=method,
                details=e.response.text,
            ) from e
        try:
            payload = r.json()
        except ValueError as e:
            raise MailChimpApiError(
                f"MailChimp {method} returned a non-JSON response",
                status_code=r.status_code,
                method=method,
                details=r.text,
            ) from e
        if isinstance(payload, dict) and "error" in payload:
            code = self._error_code(payload.get("code"))
            self._logger.debug("MailChimp.call: method=%s error code=%s", method, code)
            raise error_for_code(code)(
                f"MailChimp {method} error: {payload['error']}",
                status_code=r.status_code,
                code=code,
                method=method,
                details=payload,
            )
        self._logger.debug("MailChimp.call: method=%s ok", method)
        return payload

    @staticmethod
    def _error_code(raw: Any) -> Optional[int]:
        if isinstance(raw, bool):
            return None
        try:
            return int(raw)
        except (TypeError, ValueError):
            return None

    def get_manager(self, name: str) -> BaseManager:
        """Return the manager registered as `name` (e.g. ``"CampaignReportData"``)."""
        key = name if name in MANAGERS else next((k for k in MANAGERS if _to_snake(k) == name), None)
        if key is None:
            raise UnknownManagerError(name)
        if key not in self._managers:
            self._managers[key] = MANAGERS[key](self)
        return self._managers[key]

    @property
    def campaigns(self):
        return self.get_manager("Campaign")

    @property
    def campaign_stats(self):
        return self.get_manager("CampaignStats")

    @property
    def reports(self):
        return self.get_manager("CampaignReportData")

    @property
    def ecommerce(self):
        return self.get_manager("Ecommerce")

    @property
    def lists(self):
        return self.get_manager("Lists")

    @property
    def helper(self):
        return self.get_manager("Helper")

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "MailChimp":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
