"""Input validation for raw identifiers before any cache or vendor traffic."""

from __future__ import annotations

import ipaddress
import re

from tririsk.core.errors import InvalidEmailError, InvalidIpAddressError, InvalidPhoneNumberError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^[0-9+\-().\s]+$")
_COUNTRY_RE = re.compile(r"^[A-Za-z]{2}$")


def validate_email(raw: str) -> str:
    email = str(raw or "").strip()
    if not email:
        raise InvalidEmailError("Email address cannot be empty")
    if not _EMAIL_RE.match(email):
        raise InvalidEmailError(f"Invalid email address format: {email}")
    return email


def validate_ip_address(raw: str) -> str:
    value = str(raw or "").strip()
    if not value:
        raise InvalidIpAddressError("IP address cannot be empty")
    try:
        ipaddress.ip_address(value)
    except ValueError:
        raise InvalidIpAddressError(f"Invalid IP address format: {value}") from None
    return value


def validate_phone_number(raw: str) -> str:
    value = str(raw or "").strip()
    if not value:
        raise InvalidPhoneNumberError("Phone number cannot be empty")
    if not _PHONE_RE.match(value) or not any(ch.isdigit() for ch in value):
        raise InvalidPhoneNumberError(f"Invalid phone number format: {value}")
    return value


def validate_country(raw: str) -> str:
    value = str(raw or "").strip()
    if not _COUNTRY_RE.match(value):
        raise InvalidPhoneNumberError(f"Country code must be 2-letter ISO code, got: {raw!r}")
    return value.upper()
