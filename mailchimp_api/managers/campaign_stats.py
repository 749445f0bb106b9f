"""Campaign statistics calls. All of them are read-only queries."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Union

from ..params import format_datetime
from .base import BaseManager

MEMBER_STATUSES = ("sent", "hard", "soft")


class CampaignStatsManager(BaseManager):
    name = "CampaignStats"

    def campaign_stats(self, cid: str) -> Any:
        """Aggregate counters for a sent campaign (opens, clicks, bounces ...)."""
        self._require("cid", cid)
        return self._call("campaignStats", cid=cid)

    def campaign_click_stats(self, cid: str) -> Any:
        self._require("cid", cid)
        return self._call("campaignClickStats", cid=cid)

    def campaign_advice(self, cid: str) -> Any:
        self._require("cid", cid)
        return self._call("campaignAdvice", cid=cid)

    def campaign_analytics(self, cid: str) -> Any:
        self._require("cid", cid)
        return self._call("campaignAnalytics", cid=cid)

    def campaign_eep_url_stats(self, cid: str) -> Any:
        self._require("cid", cid)
        return self._call("campaignEepUrlStats", cid=cid)

    def campaign_geo_opens(self, cid: str) -> Any:
        self._require("cid", cid)
        return self._call("campaignGeoOpens", cid=cid)

    def campaign_geo_opens_for_country(self, cid: str, code: str) -> Any:
        self._require("cid", cid)
        self._require("code", code)
        return self._call("campaignGeoOpensForCountry", cid=cid, code=code.upper())

    def campaign_abuse_reports(
        self,
        cid: str,
        since: Union[str, datetime, None] = None,
        start: int = 0,
        limit: int = 500,
    ) -> Any:
        self._require("cid", cid)
        self._check_paging(start, limit, 1000)
        return self._call("campaignAbuseReports", cid=cid, since=format_datetime(since), start=start, limit=limit)

    def campaign_bounce_message(self, cid: str, email: str) -> Any:
        self._require("cid", cid)
        self._require("email", email)
        return self._call("campaignBounceMessage", cid=cid, email=email)

    def campaign_bounce_messages(
        self,
        cid: str,
        start: int = 0,
        limit: int = 25,
        since: Union[str, datetime, None] = None,
    ) -> Any:
        self._require("cid", cid)
        self._check_paging(start, limit, 50)
        return self._call("campaignBounceMessages", cid=cid, start=start, limit=limit, since=format_datetime(since))

    def campaign_ecomm_orders(
        self,
        cid: str,
        start: int = 0,
        limit: int = 100,
        since: Union[str, datetime, None] = None,
    ) -> Any:
        self._require("cid", cid)
        self._check_paging(start, limit, 500)
        return self._call("campaignEcommOrders", cid=cid, start=start, limit=limit, since=format_datetime(since))

    def campaign_members(
        self,
        cid: str,
        status: Optional[str] = None,
        start: int = 0,
        limit: int = 1000,
    ) -> Any:
        """Members the campaign was sent to, optionally only ``sent``, ``hard`` or ``soft`` bounces."""
        self._require("cid", cid)
        if status is not None:
            self._check_choice("status", status, MEMBER_STATUSES)
        self._check_paging(start, limit, 15000)
        return self._call("campaignMembers", cid=cid, status=status, start=start, limit=limit)

    def campaign_unsubscribes(self, cid: str, start: int = 0, limit: int = 1000) -> Any:
        self._require("cid", cid)
        self._check_paging(start, limit, 15000)
        return self._call("campaignUnsubscribes", cid=cid, start=start, limit=limit)
