from __future__ import annotations

import logging

import httpx
import pytest

from mailchimp_api import (
    ApiKeyRejectedError,
    CampaignNotFoundError,
    InvalidApiKeyError,
    MailChimp,
    MailChimpApiError,
    MailChimpSettings,
    UnknownManagerError,
)
from mailchimp_api.managers import CampaignReportDataManager, ListsManager


def test_endpoint_uses_datacenter_from_api_key() -> None:
    mc = MailChimp("abc123-us7", client=httpx.Client())
    assert mc.datacenter == "us7"
    assert mc.endpoint == "https://us7.api.mailchimp.com/1.3/"


def test_endpoint_defaults_to_us1_and_honours_secure_flag() -> None:
    mc = MailChimp("abc123", secure=False, client=httpx.Client())
    assert mc.datacenter == "us1"
    assert mc.endpoint == "http://us1.api.mailchimp.com/1.3/"


def test_base_url_override_is_normalised() -> None:
    mc = MailChimp("abc123-us2", base_url="http://localhost:8080/1.3", client=httpx.Client())
    assert mc.endpoint == "http://localhost:8080/1.3/"


@pytest.mark.parametrize("key", ["", "   "])
def test_blank_api_key_is_rejected(key: str) -> None:
    with pytest.raises(InvalidApiKeyError):
        MailChimp(key)


def test_call_posts_method_output_and_form_fields(mailchimp: MailChimp, transport) -> None:
    transport.reply({"total": 0, "data": []})
    res = mailchimp.call("campaignOpenedAIM", {"cid": "c1", "start": 0, "limit": 10, "skip": None})

    assert res == {"total": 0, "data": []}
    req = transport.last
    assert req.method == "POST"
    assert req.url.path == "/1.3/"
    assert req.url.params["method"] == "campaignOpenedAIM"
    assert req.url.params["output"] == "json"
    assert transport.last_form == {
        "apikey": "0123456789abcdef-us5",
        "cid": "c1",
        "start": "0",
        "limit": "10",
    }


def test_call_returns_scalar_payloads(mailchimp: MailChimp, transport) -> None:
    transport.reply("Everything's Chimpy!")
    assert mailchimp.call("ping") == "Everything's Chimpy!"


def test_error_payload_maps_code_to_exception(mailchimp: MailChimp, transport) -> None:
    transport.reply({"error": "Invalid Campaign ID: c404", "code": 300})
    with pytest.raises(CampaignNotFoundError) as ei:
        mailchimp.call("campaignStats", {"cid": "c404"})
    err = ei.value
    assert err.code == 300
    assert err.method == "campaignStats"
    assert err.details == {"error": "Invalid Campaign ID: c404", "code": 300}
    assert "Invalid Campaign ID" in str(err)


def test_error_payload_with_string_code(mailchimp: MailChimp, transport) -> None:
    transport.reply({"error": "Invalid Mailchimp API Key", "code": "104"})
    with pytest.raises(ApiKeyRejectedError) as ei:
        mailchimp.call("ping")
    assert ei.value.code == 104


def test_unmapped_error_code_raises_base_api_error(mailchimp: MailChimp, transport) -> None:
    transport.reply({"error": "Something odd", "code": -90})
    with pytest.raises(MailChimpApiError) as ei:
        mailchimp.call("ping")
    assert type(ei.value) is MailChimpApiError
    assert ei.value.code == -90


def test_http_error_status_is_wrapped(mailchimp: MailChimp, transport) -> None:
    transport.responder = lambda request: httpx.Response(500, text="upstream down")
    with pytest.raises(MailChimpApiError) as ei:
        mailchimp.call("ping")
    assert ei.value.status_code == 500
    assert ei.value.details == "upstream down"
    assert isinstance(ei.value.__cause__, httpx.HTTPStatusError)


def test_non_json_body_is_an_api_error(mailchimp: MailChimp, transport) -> None:
    transport.responder = lambda request: httpx.Response(200, text="<html>maintenance</html>")
    with pytest.raises(MailChimpApiError, match="non-JSON"):
        mailchimp.call("ping")


def test_transport_errors_propagate(mailchimp: MailChimp, transport) -> None:
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    transport.responder = boom
    with pytest.raises(httpx.ConnectError):
        mailchimp.call("ping")


def test_get_manager_accepts_registry_and_snake_case_names(mailchimp: MailChimp) -> None:
    reports = mailchimp.get_manager("CampaignReportData")
    assert isinstance(reports, CampaignReportDataManager)
    assert mailchimp.get_manager("campaign_report_data") is reports
    assert mailchimp.reports is reports
    assert isinstance(mailchimp.lists, ListsManager)


def test_get_manager_unknown_name(mailchimp: MailChimp) -> None:
    with pytest.raises(UnknownManagerError):
        mailchimp.get_manager("Templates")


def test_from_settings_requires_api_key() -> None:
    with pytest.raises(InvalidApiKeyError):
        MailChimp.from_settings(MailChimpSettings())


def test_from_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAILCHIMP_API_KEY", "feedbeef-us9")
    monkeypatch.setenv("MAILCHIMP_SECURE", "false")
    monkeypatch.setenv("MAILCHIMP_TIMEOUT", "5")
    mc = MailChimp.from_settings(client=httpx.Client())
    assert mc.endpoint == "http://us9.api.mailchimp.com/1.3/"


def test_close_leaves_injected_client_open(transport) -> None:
    injected = httpx.Client(transport=transport)
    with MailChimp("k-us1", base_url="http://mock/1.3/", client=injected):
        pass
    assert not injected.is_closed

    owned = MailChimp("k-us1")
    owned.close()
    assert owned._client.is_closed


@pytest.mark.parametrize("key", ["abc-evil.example/x?", "abc-US1", "abc-us", "abc-", "abc-us1.attacker.io"])
def test_malformed_datacenter_suffix_is_rejected(key: str) -> None:
    with pytest.raises(InvalidApiKeyError, match="datacenter"):
        MailChimp(key, client=httpx.Client())


def test_api_key_is_not_logged(mailchimp: MailChimp, transport, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    transport.reply({"total": 0, "data": []})
    mailchimp.reports.campaign_opened_aim("c1")

    transport.reply({"error": "Invalid Mailchimp API Key", "code": 104})
    with pytest.raises(ApiKeyRejectedError):
        mailchimp.helper.ping()

    assert "method=campaignOpenedAIM" in caplog.text
    assert "error code=104" in caplog.text
    assert mailchimp.api_key not in caplog.text
    assert "0123456789abcdef" not in caplog.text
