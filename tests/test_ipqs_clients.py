import logging
from urllib.parse import parse_qs, urlparse

import pytest

from support import FakeTransport, email_payload, ip_payload, phone_payload
from tririsk.config.settings import IpqsConfig
from tririsk.core.errors import InvalidEmailError, InvalidIpAddressError, InvalidPhoneNumberError, TransportError
from tririsk.providers.ipqs import EmailClient, IpClient, PhoneClient
from tririsk.providers.transport import TransportResponse

BASE = "https://ipqualityscore.com/api/json"


def test_email_client_posts_normalized_address(config, transport):
    transport.queue_json(email_payload())
    result = EmailClient(config, transport).score_raw("John.Doe+tag@Gmail.com")

    assert result.ok
    assert result.payload["fraud_score"] == 10
    assert transport.calls[0]["url"] == f"{BASE}/email/test-key/johndoe@gmail.com"
    assert transport.calls[0]["timeout_s"] == config.timeout_s


def test_ip_client_merges_default_strictness_and_params(config, transport):
    transport.queue_json(ip_payload())
    IpClient(config, transport).score_raw("8.8.8.8", {"user_agent": "Mozilla/5.0", "allow_public_access_points": None})

    parsed = urlparse(transport.calls[0]["url"])
    assert parsed.path == "/api/json/ip/test-key/8.8.8.8"
    assert parse_qs(parsed.query) == {"strictness": ["2"], "user_agent": ["Mozilla/5.0"]}


def test_ip_client_caller_strictness_overrides_default(config, transport):
    transport.queue_json(ip_payload())
    IpClient(config, transport).score_raw("2001:db8::1", {"strictness": 0})

    parsed = urlparse(transport.calls[0]["url"])
    assert parsed.path == "/api/json/ip/test-key/2001:db8::1"
    assert parse_qs(parsed.query) == {"strictness": ["0"]}


def test_phone_client_uses_default_country(transport):
    config = IpqsConfig(api_key="test-key", default_country="gb")
    transport.queue_json(phone_payload())
    transport.queue_json(phone_payload())
    client = PhoneClient(config, transport)

    client.score_raw("+447911123456")
    client.score_raw("+15551234567", "us")

    first, second = (urlparse(call["url"]) for call in transport.calls)
    assert first.path == "/api/json/phone/test-key/+447911123456"
    assert parse_qs(first.query) == {"country": ["GB"]}
    assert parse_qs(second.query) == {"country": ["US"]}


def test_transport_error_folds_into_failure_and_redacts_key(config, caplog):
    transport = FakeTransport(TransportError("connection refused"))
    with caplog.at_level(logging.ERROR, logger="tririsk.providers.ipqs"):
        result = IpClient(config, transport).score_raw("8.8.8.8")

    assert not result.ok
    assert result.error.startswith("transport_error")
    assert "test-key" not in caplog.text
    assert "***REDACTED***" in caplog.text


def test_non_success_status_is_failure(config):
    transport = FakeTransport(TransportResponse(status=503, body=b"unavailable"))
    result = EmailClient(config, transport).score_raw("a@b.com")
    assert result.payload is None
    assert result.error == "http_status_503"


@pytest.mark.parametrize(
    ("body", "reason"),
    [
        (b"<html>oops</html>", "invalid_json"),
        (b"[1, 2, 3]", "unexpected_payload"),
    ],
)
def test_undecodable_body_is_failure(config, body, reason):
    transport = FakeTransport(TransportResponse(status=200, body=body))
    result = PhoneClient(config, transport).score_raw("+15551234567")
    assert result.error == reason


def test_vendor_success_false_is_still_returned_as_payload(config, transport):
    transport.queue_json({"success": False, "message": "Invalid API key."})
    result = EmailClient(config, transport).score_raw("a@b.com")
    assert result.ok
    assert result.payload["success"] is False


def test_validation_errors_raise_before_request(config, transport):
    with pytest.raises(InvalidEmailError):
        EmailClient(config, transport).score_raw("user@")
    with pytest.raises(InvalidIpAddressError):
        IpClient(config, transport).score_raw("192.168.1")
    with pytest.raises(InvalidPhoneNumberError):
        PhoneClient(config, transport).score_raw("+15551234567", "U1")
    assert transport.calls == []
