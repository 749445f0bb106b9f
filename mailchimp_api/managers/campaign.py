"""Campaign related calls: create, update, schedule, send and delete campaigns."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from ..ecommerce.order import OrderInterface
from ..errors import MailChimpError
from ..params import format_datetime
from .base import BaseManager

CAMPAIGN_TYPES = ("regular", "plaintext", "absplit", "rss", "auto")
REQUIRED_CREATE_OPTIONS = ("list_id", "subject", "from_email", "from_name")
SEND_TYPES = ("html", "text")


class CampaignManager(BaseManager):
    name = "Campaign"

    def campaigns(
        self,
        filters: Optional[Dict[str, Any]] = None,
        start: int = 0,
        limit: int = 25,
    ) -> Any:
        """Page through campaigns, optionally filtered (``list_id``, ``status``, ``type`` ...)."""
        self._check_paging(start, limit, 1000)
        return self._call("campaigns", filters=filters, start=start, limit=limit)

    def campaign_content(self, cid: str, for_archive: bool = True) -> Any:
        self._require("cid", cid)
        return self._call("campaignContent", cid=cid, for_archive=for_archive)

    def campaign_template_content(self, cid: str) -> Any:
        self._require("cid", cid)
        return self._call("campaignTemplateContent", cid=cid)

    def campaign_create(
        self,
        type: str,
        options: Dict[str, Any],
        content: Dict[str, Any],
        segment_opts: Optional[Dict[str, Any]] = None,
        type_opts: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Create a campaign and return its id.

        `options` must at least carry ``list_id``, ``subject``, ``from_email``
        and ``from_name``. `type_opts` is required by ``absplit``, ``rss`` and
        ``auto`` campaigns.
        """
        self._check_choice("type", type, CAMPAIGN_TYPES)
        missing = [k for k in REQUIRED_CREATE_OPTIONS if not options.get(k)]
        if missing:
            raise MailChimpError(f"Campaign options missing required keys: {', '.join(missing)}")
        if not content:
            raise MailChimpError("Campaign content must not be empty")
        if type in ("absplit", "rss", "auto") and not type_opts:
            raise MailChimpError(f"type_opts are required for {type} campaigns")
        return self._call(
            "campaignCreate",
            type=type,
            options=options,
            content=content,
            segment_opts=segment_opts,
            type_opts=type_opts,
        )

    def campaign_update(self, cid: str, name: str, value: Any) -> bool:
        self._require("cid", cid)
        self._require("name", name)
        return self._call("campaignUpdate", cid=cid, name=name, value=value)

    def campaign_replicate(self, cid: str) -> str:
        self._require("cid", cid)
        return self._call("campaignReplicate", cid=cid)

    def campaign_delete(self, cid: str) -> bool:
        self._require("cid", cid)
        return self._call("campaignDelete", cid=cid)

    def campaign_schedule(
        self,
        cid: str,
        schedule_time: Union[str, datetime],
        schedule_time_b: Union[str, datetime, None] = None,
    ) -> bool:
        """Schedule a campaign. `schedule_time_b` is the B-side time of an A/B split."""
        self._require("cid", cid)
        self._require("schedule_time", schedule_time)
        return self._call(
            "campaignSchedule",
            cid=cid,
            schedule_time=format_datetime(schedule_time),
            schedule_time_b=format_datetime(schedule_time_b),
        )

    def campaign_schedule_batch(
        self,
        cid: str,
        schedule_time: Union[str, datetime],
        num_batches: int = 2,
        stagger_mins: int = 5,
    ) -> bool:
        self._require("cid", cid)
        self._require("schedule_time", schedule_time)
        if not 2 <= num_batches <= 26:
            raise MailChimpError(f"num_batches must be between 2 and 26, got {num_batches}")
        if not 1 <= stagger_mins <= 1440:
            raise MailChimpError(f"stagger_mins must be between 1 and 1440, got {stagger_mins}")
        return self._call(
            "campaignScheduleBatch",
            cid=cid,
            schedule_time=format_datetime(schedule_time),
            num_batches=num_batches,
            stagger_mins=stagger_mins,
        )

    def campaign_unschedule(self, cid: str) -> bool:
        self._require("cid", cid)
        return self._call("campaignUnschedule", cid=cid)

    def campaign_pause(self, cid: str) -> bool:
        self._require("cid", cid)
        return self._call("campaignPause", cid=cid)

    def campaign_resume(self, cid: str) -> bool:
        self._require("cid", cid)
        return self._call("campaignResume", cid=cid)

    def campaign_send_now(self, cid: str) -> bool:
        self._require("cid", cid)
        return self._call("campaignSendNow", cid=cid)

    def campaign_send_test(
        self,
        cid: str,
        test_emails: Sequence[str],
        send_type: Optional[str] = None,
    ) -> bool:
        self._require("cid", cid)
        emails: List[str] = self._email_list(test_emails, 50)
        if send_type is not None:
            self._check_choice("send_type", send_type, SEND_TYPES)
        return self._call("campaignSendTest", cid=cid, test_emails=emails, send_type=send_type)

    def campaign_segment_test(self, list_id: str, options: Dict[str, Any]) -> int:
        """Return how many list members match the segment `options` (``match`` + ``conditions``)."""
        self._require("list_id", list_id)
        if not options.get("conditions"):
            raise MailChimpError("Segment options must contain at least one condition")
        return self._call("campaignSegmentTest", list_id=list_id, options=options)

    def campaign_share_report(self, cid: str, opts: Optional[Dict[str, Any]] = None) -> Any:
        self._require("cid", cid)
        return self._call("campaignShareReport", cid=cid, opts=opts)

    def campaign_ecomm_order_add(self, order: OrderInterface) -> bool:
        """Attach a store order to the campaign recorded in its ``campaign_id``."""
        return self._call("campaignEcommOrderAdd", order=order.prepare())
