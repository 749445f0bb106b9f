"""Account-level helper calls: ping, account details, content utilities and search."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..errors import MailChimpError
from .base import BaseManager

GENERATE_TEXT_TYPES = ("html", "template", "url", "cid", "tid")
ACCOUNT_DETAIL_SECTIONS = ("modules", "orders", "rewards-credits", "rewards-inspections", "rewards-referrals", "rewards-applied")


class HelperManager(BaseManager):
    name = "Helper"

    def ping(self) -> str:
        """Returns ``"Everything's Chimpy!"`` when the key and service are healthy."""
        return self._call("ping")

    def get_account_details(self, exclude: Optional[Sequence[str]] = None) -> Any:
        for section in exclude or ():
            self._check_choice("exclude", section, ACCOUNT_DETAIL_SECTIONS)
        return self._call("getAccountDetails", exclude=list(exclude) if exclude else None)

    def get_verified_domains(self) -> Any:
        return self._call("getVerifiedDomains")

    def inline_css(self, html: str, strip_css: bool = False) -> str:
        self._require("html", html)
        return self._call("inlineCss", html=html, strip_css=strip_css)

    def generate_text(self, type: str, content: Any) -> str:
        """Plain-text version of HTML, a template, a URL or an existing campaign/template id."""
        self._check_choice("type", type, GENERATE_TEXT_TYPES)
        if type == "template" and not isinstance(content, dict):
            raise MailChimpError("content must be a mapping of template sections for type 'template'")
        self._require("content", content)
        return self._call("generateText", type=type, content=content)

    def lists_for_email(self, email_address: str) -> Any:
        self._require("email_address", email_address)
        return self._call("listsForEmail", email_address=email_address)

    def campaigns_for_email(self, email_address: str, options: Optional[Dict[str, Any]] = None) -> Any:
        self._require("email_address", email_address)
        return self._call("campaignsForEmail", email_address=email_address, options=options)

    def chimp_chatter(self) -> Any:
        return self._call("chimpChatter")

    def search_members(self, query: str, id: Optional[str] = None, offset: int = 0) -> Any:
        self._require("query", query)
        if offset < 0:
            raise MailChimpError(f"offset must be >= 0, got {offset}")
        return self._call("searchMembers", query=query, id=id, offset=offset)

    def search_campaigns(
        self,
        query: str,
        offset: int = 0,
        snip_start: Optional[str] = None,
        snip_end: Optional[str] = None,
    ) -> Any:
        self._require("query", query)
        if offset < 0:
            raise MailChimpError(f"offset must be >= 0, got {offset}")
        return self._call("searchCampaigns", query=query, offset=offset, snip_start=snip_start, snip_end=snip_end)
