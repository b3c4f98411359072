"""Payload factories and fakes shared across the test suite."""

from __future__ import annotations

import json
from typing import Any

from tririsk.core.errors import TransportError
from tririsk.infra.cache import DictCache
from tririsk.providers.ipqs import ClientResult
from tririsk.providers.transport import TransportResponse


def email_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "success": True,
        "message": "Success.",
        "valid": True,
        "disposable": False,
        "smtp_score": 3,
        "overall_score": 4,
        "first_name": "John",
        "generic": False,
        "common": True,
        "dns_valid": True,
        "honeypot": False,
        "deliverability": "high",
        "frequent_complainer": False,
        "spam_trap_score": "none",
        "catch_all": False,
        "timed_out": False,
        "suspect": False,
        "recent_abuse": False,
        "fraud_score": 10,
        "leaked": False,
        "request_id": "4WLSgYg",
    }
    payload.update(overrides)
    return payload


def ip_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "success": True,
        "message": "Success.",
        "fraud_score": 25,
        "country_code": "US",
        "region": "Texas",
        "city": "Houston",
        "ISP": "Mediacom Cable",
        "ASN": 30036,
        "latitude": 29.7079,
        "longitude": -95.401,
        "is_crawler": False,
        "timezone": "America/Chicago",
        "proxy": False,
        "vpn": False,
        "tor": False,
        "recent_abuse": False,
        "bot_status": False,
        "connection_type": "Residential",
        "abuse_velocity": "none",
        "request_id": "0w8WYS",
    }
    payload.update(overrides)
    return payload


def phone_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "success": True,
        "message": "Phone is valid.",
        "formatted": "+15551234567",
        "fraud_score": 30,
        "valid": True,
        "active": True,
        "recent_abuse": False,
        "VOIP": False,
        "prepaid": None,
        "risky": False,
        "carrier": "Verizon Wireless",
        "line_type": "Wireless",
        "country": "US",
        "region": "California",
        "city": "Los Angeles",
        "timezone": "America/Los_Angeles",
        "do_not_call": False,
        "request_id": "8aKq1P",
    }
    payload.update(overrides)
    return payload


class FakeTransport:
    """Replays queued responses and records every URL it was asked for."""

    def __init__(self, *responses: TransportResponse | Exception) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def queue_json(self, payload: Any, status: int = 200) -> "FakeTransport":
        self.responses.append(TransportResponse(status=status, body=json.dumps(payload).encode("utf-8")))
        return self

    def post(self, url: str, *, timeout_s: float) -> TransportResponse:
        self.calls.append({"url": url, "timeout_s": timeout_s})
        if not self.responses:
            raise TransportError("no response queued")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeClient:
    """Stands in for an IPQS client; returns a fixed ClientResult."""

    def __init__(self, result: ClientResult) -> None:
        self.result = result
        self.calls: list[tuple[Any, ...]] = []

    def score_raw(self, *args: Any) -> ClientResult:
        self.calls.append(args)
        return self.result


class FailingCache(DictCache):
    def __init__(self, *, fail_get: bool = False, fail_set: bool = False) -> None:
        super().__init__()
        self.fail_get = fail_get
        self.fail_set = fail_set

    def get(self, key: str, default: object | None = None) -> object | None:
        if self.fail_get:
            raise ConnectionError("cache unavailable")
        return super().get(key, default)

    def set(self, key: str, value: object, ttl_seconds: int) -> bool:
        if self.fail_set:
            raise ConnectionError("cache unavailable")
        return super().set(key, value, ttl_seconds)

