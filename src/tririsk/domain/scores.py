"""Typed vendor quality scores, one model per channel."""

from __future__ import annotations

import math
from abc import abstractmethod
from datetime import datetime, timezone as dt_timezone
from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, Field

from tririsk.domain.enums import AbuseVelocity, ConnectionType


def _utcnow() -> datetime:
    return datetime.now(dt_timezone.utc)


def _first_present(payload: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first key present with a non-null value."""

    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _flag(payload: Mapping[str, Any], *keys: str, default: bool | None = False) -> bool | None:
    value = _first_present(payload, *keys)
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    return default


def _int(payload: Mapping[str, Any], *keys: str, default: int | None = 0) -> int | None:
    value = _first_present(payload, *keys)
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return int(number)


def _float(payload: Mapping[str, Any], key: str, default: float = 0.0) -> float:
    value = payload.get(key)
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _text(payload: Mapping[str, Any], *keys: str, default: str | None = None) -> str | None:
    value = _first_present(payload, *keys)
    if value is None:
        return default
    return str(value)


def _fraud_score(payload: Mapping[str, Any]) -> int:
    # A present but non-numeric score is a mapping failure, not a silent zero.
    raw = payload.get("fraud_score")
    if raw is None:
        return 0
    if isinstance(raw, bool):
        raise ValueError(f"fraud_score must be numeric, got {raw!r}")
    number = float(raw)
    if not math.isfinite(number):
        raise ValueError(f"fraud_score must be finite, got {raw!r}")
    score = int(number)
    return max(0, min(100, score))


class ChannelScore(BaseModel):
    """Fields shared by every channel score.

    Abstract: only the per-channel subclasses are instantiated.
    """

    model_config = ConfigDict(frozen=True)

    channel: ClassVar[str] = ""

    fraud_score: int = Field(ge=0, le=100)
    timestamp: datetime = Field(default_factory=_utcnow)
    vendor_metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    @abstractmethod
    def subject_identifier(self) -> str:
        """The identifier this score was looked up for."""

    @classmethod
    @abstractmethod
    def from_api_response(cls, identifier: str, payload: Mapping[str, Any]) -> "ChannelScore":
        """Map a raw vendor payload onto this model."""


class EmailQualityScore(ChannelScore):
    channel: ClassVar[str] = "email"

    email: str
    valid: bool = False
    disposable: bool = False
    leaked: bool = False
    suspect: bool = False
    recent_abuse: bool = False
    smtp_score: int = Field(default=0, ge=-1, le=3)
    overall_score: int = Field(default=0, ge=0, le=4)
    deliverability: str = "unknown"
    catch_all: bool = False
    generic: bool = False
    honeypot: bool = False

    @property
    def subject_identifier(self) -> str:
        return self.email

    @classmethod
    def from_api_response(cls, identifier: str, payload: Mapping[str, Any]) -> "EmailQualityScore":
        return cls(
            email=identifier,
            fraud_score=_fraud_score(payload),
            valid=_flag(payload, "valid"),
            disposable=_flag(payload, "disposable"),
            leaked=_flag(payload, "leaked"),
            suspect=_flag(payload, "suspect"),
            recent_abuse=_flag(payload, "recent_abuse"),
            smtp_score=max(-1, min(3, _int(payload, "smtp_score"))),
            overall_score=max(0, min(4, _int(payload, "overall_score"))),
            deliverability=_text(payload, "deliverability", default="unknown"),
            catch_all=_flag(payload, "catch_all"),
            generic=_flag(payload, "generic"),
            honeypot=_flag(payload, "honeypot"),
            vendor_metadata=dict(payload),
        )


class IpQualityScore(ChannelScore):
    channel: ClassVar[str] = "ip"

    ip_address: str
    country_code: str | None = None
    region: str | None = None
    city: str | None = None
    latitude: float = 0.0
    longitude: float = 0.0
    isp: str | None = None
    asn: int | None = None
    is_crawler: bool = False
    proxy: bool = False
    vpn: bool = False
    tor: bool = False
    recent_abuse: bool = False
    bot_status: bool = False
    connection_type: ConnectionType | None = None
    abuse_velocity: AbuseVelocity | None = None
    timezone: str | None = None

    @property
    def subject_identifier(self) -> str:
        return self.ip_address

    @classmethod
    def from_api_response(cls, identifier: str, payload: Mapping[str, Any]) -> "IpQualityScore":
        country_code = _text(payload, "country_code")
        return cls(
            ip_address=identifier,
            fraud_score=_fraud_score(payload),
            country_code=country_code[:2] if country_code is not None else None,
            region=_text(payload, "region"),
            city=_text(payload, "city"),
            latitude=_float(payload, "latitude"),
            longitude=_float(payload, "longitude"),
            isp=_text(payload, "ISP", "isp"),
            asn=_int(payload, "ASN", "asn", default=None),
            is_crawler=_flag(payload, "is_crawler"),
            proxy=_flag(payload, "proxy"),
            vpn=_flag(payload, "vpn"),
            tor=_flag(payload, "tor"),
            recent_abuse=_flag(payload, "recent_abuse"),
            bot_status=_flag(payload, "bot_status"),
            connection_type=ConnectionType.parse(payload.get("connection_type")),
            abuse_velocity=AbuseVelocity.parse(payload.get("abuse_velocity")),
            timezone=_text(payload, "timezone"),
            vendor_metadata=dict(payload),
        )


class PhoneQualityScore(ChannelScore):
    channel: ClassVar[str] = "phone"

    phone_number: str
    valid: bool = False
    active: bool | None = None
    recent_abuse: bool | None = None
    voip: bool | None = None
    prepaid: bool | None = None
    risky: bool | None = None
    carrier: str = ""
    line_type: str = ""
    country: str = ""
    region: str | None = None
    city: str | None = None
    timezone: str | None = None
    do_not_call: bool | None = None

    @property
    def subject_identifier(self) -> str:
        return self.phone_number

    @classmethod
    def from_api_response(cls, identifier: str, payload: Mapping[str, Any]) -> "PhoneQualityScore":
        return cls(
            phone_number=identifier,
            fraud_score=_fraud_score(payload),
            valid=_flag(payload, "valid"),
            active=_flag(payload, "active", default=None),
            recent_abuse=_flag(payload, "recent_abuse", default=None),
            voip=_flag(payload, "VOIP", "voip", default=None),
            prepaid=_flag(payload, "prepaid", default=None),
            risky=_flag(payload, "risky", default=None),
            carrier=_text(payload, "carrier", default=""),
            line_type=_text(payload, "line_type", default=""),
            country=_text(payload, "country", default=""),
            region=_text(payload, "region"),
            city=_text(payload, "city"),
            timezone=_text(payload, "timezone"),
            do_not_call=_flag(payload, "do_not_call", default=None),
            vendor_metadata=dict(payload),
        )
