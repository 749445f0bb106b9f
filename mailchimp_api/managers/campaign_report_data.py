"""Campaign report data: per-recipient (AIM) activity for a sent campaign.

Examples:
    >>> reports = mailchimp.get_manager("CampaignReportData")
    >>> opens = reports.campaign_opened_aim("c1a2b3")  # doctest: +SKIP
    >>> opens["total"], opens["data"][0]["email"]  # doctest: +SKIP
    (2, 'ann@example.com')
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from .base import BaseManager

AIM_MAX_LIMIT = 15000


class CampaignReportDataManager(BaseManager):
    name = "CampaignReportData"

    def campaign_opened_aim(self, cid: str, start: int = 0, limit: int = 1000) -> Any:
        """Members who opened the campaign, with their open counts."""
        self._require("cid", cid)
        self._check_paging(start, limit, AIM_MAX_LIMIT)
        return self._call("campaignOpenedAIM", cid=cid, start=start, limit=limit)

    def campaign_not_opened_aim(self, cid: str, start: int = 0, limit: int = 1000) -> Any:
        """Members who have not opened the campaign."""
        self._require("cid", cid)
        self._check_paging(start, limit, AIM_MAX_LIMIT)
        return self._call("campaignNotOpenedAIM", cid=cid, start=start, limit=limit)

    def campaign_click_detail_aim(self, cid: str, url: str, start: int = 0, limit: int = 1000) -> Any:
        """Members who clicked `url` in the campaign."""
        self._require("cid", cid)
        self._require("url", url)
        self._check_paging(start, limit, AIM_MAX_LIMIT)
        return self._call("campaignClickDetailAIM", cid=cid, url=url, start=start, limit=limit)

    def campaign_email_stats_aim(self, cid: str, email_address: Union[str, Sequence[str]]) -> Any:
        """Full activity history for up to 50 recipients."""
        self._require("cid", cid)
        emails = self._email_list(email_address, 50)
        return self._call("campaignEmailStatsAIM", cid=cid, email_address=emails)

    def campaign_email_stats_aim_all(self, cid: str, start: int = 0, limit: int = 100) -> Any:
        self._require("cid", cid)
        self._check_paging(start, limit, 1000)
        return self._call("campaignEmailStatsAIMAll", cid=cid, start=start, limit=limit)
