"""IPQualityScore clients for the email, IP and phone endpoints.

Clients validate their input (raising ``ValidationError`` subclasses), make a
single POST and fold every transport or vendor-side failure into a
``ClientResult`` carrying the reason. They never retry.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from typing import Any, Mapping
from urllib.parse import quote, urlencode

from tririsk.config.settings import IpqsConfig
from tririsk.core.errors import TransportError
from tririsk.core.redact import redact_url
from tririsk.domain.email.normalize import normalize_email
from tririsk.domain.validation import (
    validate_country,
    validate_email,
    validate_ip_address,
    validate_phone_number,
)
from tririsk.providers.transport import HttpTransport, UrllibTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientResult:
    payload: dict[str, Any] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.payload is not None

    @classmethod
    def success(cls, payload: dict[str, Any]) -> "ClientResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, reason: str) -> "ClientResult":
        return cls(error=reason)


class _IpqsClient:
    endpoint = ""

    def __init__(self, config: IpqsConfig, transport: HttpTransport | None = None) -> None:
        self.config = config
        self.transport = transport or UrllibTransport()

    def _url(self, identifier: str, query: Mapping[str, Any] | None = None, *, safe: str = "") -> str:
        url = f"{self.config.base_url}/{self.endpoint}/{quote(self.config.api_key, safe='')}/{quote(identifier, safe=safe)}"
        if query:
            url = f"{url}?{urlencode(dict(query))}"
        return url

    def _post_json(self, url: str) -> ClientResult:
        safe_url = redact_url(url)
        try:
            response = self.transport.post(url, timeout_s=self.config.timeout_s)
        except TransportError as exc:
            logger.error("%s request failed url=%s error=%s", self.endpoint, safe_url, exc)
            return ClientResult.failure(f"transport_error: {exc}")

        if not response.ok:
            logger.error("%s request returned status=%s url=%s", self.endpoint, response.status, safe_url)
            return ClientResult.failure(f"http_status_{response.status}")

        try:
            decoded = json.loads(response.text())
        except json.JSONDecodeError as exc:
            logger.error("%s response is not valid JSON url=%s error=%s", self.endpoint, safe_url, exc)
            return ClientResult.failure("invalid_json")
        if not isinstance(decoded, dict):
            logger.error("%s response is not a JSON object url=%s", self.endpoint, safe_url)
            return ClientResult.failure("unexpected_payload")

        logger.debug("%s response url=%s fraud_score=%s", self.endpoint, safe_url, decoded.get("fraud_score"))
        return ClientResult.success(decoded)


class EmailClient(_IpqsClient):
    endpoint = "email"

    def score_raw(self, email: str) -> ClientResult:
        normalized = normalize_email(validate_email(email))
        return self._post_json(self._url(normalized, safe="@"))


class IpClient(_IpqsClient):
    endpoint = "ip"

    def score_raw(self, ip_address: str, params: Mapping[str, Any] | None = None) -> ClientResult:
        ip_address = validate_ip_address(ip_address)
        query: dict[str, Any] = {"strictness": self.config.default_strictness}
        query.update(params or {})
        query = {key: value for key, value in query.items() if value is not None}
        return self._post_json(self._url(ip_address, query, safe=":"))


class PhoneClient(_IpqsClient):
    endpoint = "phone"

    def score_raw(self, phone_number: str, country: str | None = None) -> ClientResult:
        phone_number = validate_phone_number(phone_number)
        country = validate_country(country) if country is not None else self.config.default_country
        return self._post_json(self._url(phone_number, {"country": country}, safe="+"))
