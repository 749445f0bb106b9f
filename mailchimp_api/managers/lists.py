"""List related calls: subscribers, merge vars, interest groups, webhooks and segments."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from ..errors import MailChimpError
from ..params import format_datetime
from .base import BaseManager

EMAIL_TYPES = ("html", "text", "mobile")
MEMBER_STATUSES = ("subscribed", "unsubscribed", "cleaned", "updated")
WEBHOOK_ACTIONS = ("subscribe", "unsubscribe", "profile", "cleaned", "upemail", "campaign")
WEBHOOK_SOURCES = ("user", "admin", "api")
INTEREST_GROUPING_TYPES = ("checkboxes", "hidden", "dropdown", "radio")


class ListsManager(BaseManager):
    name = "Lists"

    def lists(self, filters: Optional[Dict[str, Any]] = None, start: int = 0, limit: int = 25) -> Any:
        self._check_paging(start, limit, 100)
        return self._call("lists", filters=filters, start=start, limit=limit)

    # Members

    def list_subscribe(
        self,
        id: str,
        email_address: str,
        merge_vars: Optional[Dict[str, Any]] = None,
        email_type: str = "html",
        double_optin: bool = True,
        update_existing: bool = False,
        replace_interests: bool = True,
        send_welcome: bool = False,
    ) -> bool:
        self._require("id", id)
        self._require("email_address", email_address)
        self._check_choice("email_type", email_type, EMAIL_TYPES)
        return self._call(
            "listSubscribe",
            id=id,
            email_address=email_address,
            merge_vars=merge_vars,
            email_type=email_type,
            double_optin=double_optin,
            update_existing=update_existing,
            replace_interests=replace_interests,
            send_welcome=send_welcome,
        )

    def list_unsubscribe(
        self,
        id: str,
        email_address: str,
        delete_member: bool = False,
        send_goodbye: bool = True,
        send_notify: bool = True,
    ) -> bool:
        self._require("id", id)
        self._require("email_address", email_address)
        return self._call(
            "listUnsubscribe",
            id=id,
            email_address=email_address,
            delete_member=delete_member,
            send_goodbye=send_goodbye,
            send_notify=send_notify,
        )

    def list_update_member(
        self,
        id: str,
        email_address: str,
        merge_vars: Dict[str, Any],
        email_type: Optional[str] = None,
        replace_interests: bool = True,
    ) -> bool:
        self._require("id", id)
        self._require("email_address", email_address)
        if email_type is not None:
            self._check_choice("email_type", email_type, EMAIL_TYPES)
        return self._call(
            "listUpdateMember",
            id=id,
            email_address=email_address,
            merge_vars=merge_vars,
            email_type=email_type,
            replace_interests=replace_interests,
        )

    def list_batch_subscribe(
        self,
        id: str,
        batch: Sequence[Dict[str, Any]],
        double_optin: bool = True,
        update_existing: bool = False,
        replace_interests: bool = True,
    ) -> Any:
        """Subscribe many members at once. Each batch entry needs an ``EMAIL`` key."""
        self._require("id", id)
        if not batch:
            raise MailChimpError("batch must contain at least one member")
        for i, member in enumerate(batch):
            if not member.get("EMAIL"):
                raise MailChimpError(f"batch[{i}] is missing EMAIL")
        return self._call(
            "listBatchSubscribe",
            id=id,
            batch=list(batch),
            double_optin=double_optin,
            update_existing=update_existing,
            replace_interests=replace_interests,
        )

    def list_batch_unsubscribe(
        self,
        id: str,
        emails: Sequence[str],
        delete_member: bool = False,
        send_goodbye: bool = True,
        send_notify: bool = False,
    ) -> Any:
        self._require("id", id)
        if not emails:
            raise MailChimpError("emails must contain at least one address")
        return self._call(
            "listBatchUnsubscribe",
            id=id,
            emails=list(emails),
            delete_member=delete_member,
            send_goodbye=send_goodbye,
            send_notify=send_notify,
        )

    def list_members(
        self,
        id: str,
        status: str = "subscribed",
        since: Union[str, datetime, None] = None,
        start: int = 0,
        limit: int = 100,
    ) -> Any:
        self._require("id", id)
        self._check_choice("status", status, MEMBER_STATUSES)
        self._check_paging(start, limit, 15000)
        return self._call(
            "listMembers", id=id, status=status, since=format_datetime(since), start=start, limit=limit
        )

    def list_member_info(self, id: str, email_address: Union[str, Sequence[str]]) -> Any:
        self._require("id", id)
        emails: List[str] = self._email_list(email_address, 50)
        return self._call("listMemberInfo", id=id, email_address=emails)

    def list_member_activity(self, id: str, email_address: Union[str, Sequence[str]]) -> Any:
        self._require("id", id)
        emails: List[str] = self._email_list(email_address, 50)
        return self._call("listMemberActivity", id=id, email_address=emails)

    # Merge vars

    def list_merge_vars(self, id: str) -> Any:
        self._require("id", id)
        return self._call("listMergeVars", id=id)

    def list_merge_var_add(self, id: str, tag: str, name: str, options: Optional[Dict[str, Any]] = None) -> bool:
        self._require("id", id)
        if not tag or len(tag) > 10 or not tag.replace("_", "").isalnum():
            raise MailChimpError("tag must be 1-10 alphanumeric characters or underscores")
        self._require("name", name)
        return self._call("listMergeVarAdd", id=id, tag=tag.upper(), name=name, options=options)

    def list_merge_var_del(self, id: str, tag: str) -> bool:
        self._require("id", id)
        self._require("tag", tag)
        return self._call("listMergeVarDel", id=id, tag=tag.upper())

    # Interest groups

    def list_interest_groupings(self, id: str) -> Any:
        self._require("id", id)
        return self._call("listInterestGroupings", id=id)

    def list_interest_grouping_add(self, id: str, name: str, type: str, groups: Sequence[str]) -> int:
        self._require("id", id)
        self._require("name", name)
        self._check_choice("type", type, INTEREST_GROUPING_TYPES)
        if not groups:
            raise MailChimpError("groups must contain at least one group name")
        return self._call("listInterestGroupingAdd", id=id, name=name, type=type, groups=list(groups))

    def list_interest_group_add(self, id: str, group_name: str, grouping_id: Optional[int] = None) -> bool:
        self._require("id", id)
        self._require("group_name", group_name)
        return self._call("listInterestGroupAdd", id=id, group_name=group_name, grouping_id=grouping_id)

    def list_interest_group_del(self, id: str, group_name: str, grouping_id: Optional[int] = None) -> bool:
        self._require("id", id)
        self._require("group_name", group_name)
        return self._call("listInterestGroupDel", id=id, group_name=group_name, grouping_id=grouping_id)

    # Reporting

    def list_growth_history(self, id: str) -> Any:
        self._require("id", id)
        return self._call("listGrowthHistory", id=id)

    def list_activity(self, id: str) -> Any:
        self._require("id", id)
        return self._call("listActivity", id=id)

    def list_locations(self, id: str) -> Any:
        self._require("id", id)
        return self._call("listLocations", id=id)

    def list_clients(self, id: str) -> Any:
        self._require("id", id)
        return self._call("listClients", id=id)

    def list_abuse_reports(
        self,
        id: str,
        start: int = 0,
        limit: int = 500,
        since: Union[str, datetime, None] = None,
    ) -> Any:
        self._require("id", id)
        self._check_paging(start, limit, 1000)
        return self._call("listAbuseReports", id=id, start=start, limit=limit, since=format_datetime(since))

    # Webhooks

    def list_webhooks(self, id: str) -> Any:
        self._require("id", id)
        return self._call("listWebhooks", id=id)

    def list_webhook_add(
        self,
        id: str,
        url: str,
        actions: Optional[Dict[str, bool]] = None,
        sources: Optional[Dict[str, bool]] = None,
    ) -> bool:
        self._require("id", id)
        if not url or not url.startswith(("http://", "https://")):
            raise MailChimpError("Webhook url must be an absolute http(s) URL")
        for key in actions or {}:
            self._check_choice("actions key", key, WEBHOOK_ACTIONS)
        for key in sources or {}:
            self._check_choice("sources key", key, WEBHOOK_SOURCES)
        return self._call("listWebhookAdd", id=id, url=url, actions=actions, sources=sources)

    def list_webhook_del(self, id: str, url: str) -> bool:
        self._require("id", id)
        self._require("url", url)
        return self._call("listWebhookDel", id=id, url=url)

    # Static segments

    def list_static_segments(self, id: str) -> Any:
        self._require("id", id)
        return self._call("listStaticSegments", id=id)

    def list_static_segment_add(self, id: str, name: str) -> int:
        self._require("id", id)
        if not name or len(name) > 25:
            raise MailChimpError("Static segment name must be 1-25 characters")
        return self._call("listStaticSegmentAdd", id=id, name=name)

    def list_static_segment_del(self, id: str, seg_id: int) -> bool:
        self._require("id", id)
        self._require("seg_id", seg_id)
        return self._call("listStaticSegmentDel", id=id, seg_id=seg_id)

    def list_static_segment_members_add(self, id: str, seg_id: int, batch: Sequence[str]) -> Any:
        self._require("id", id)
        self._require("seg_id", seg_id)
        emails = self._email_list(batch, 15000)
        return self._call("listStaticSegmentMembersAdd", id=id, seg_id=seg_id, batch=emails)

    def list_static_segment_members_del(self, id: str, seg_id: int, batch: Sequence[str]) -> Any:
        self._require("id", id)
        self._require("seg_id", seg_id)
        emails = self._email_list(batch, 15000)
        return self._call("listStaticSegmentMembersDel", id=id, seg_id=seg_id, batch=emails)
