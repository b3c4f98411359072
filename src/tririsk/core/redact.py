"""API-key redaction for vendor URLs before they reach logs."""

from __future__ import annotations

import re
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

REDACTED = "***REDACTED***"

# {base}/api/json/{endpoint}/{API_KEY}/{identifier}
_KEY_SEGMENT_RE = re.compile(r"(/api/json/(?:ip|email|phone)/)([^/?#]+)(/[^?#]*)")
_VENDOR_URL_RE = re.compile(r"/api/json/(?:ip|email|phone)/")
_SECRET_QUERY_KEYS = {"key", "api_key", "apikey", "token"}


def is_vendor_url(url: str) -> bool:
    return bool(_VENDOR_URL_RE.search(url or ""))


def _redact_query(query: str) -> str:
    pairs: list[tuple[str, str]] = []
    for key, value in parse_qsl(query, keep_blank_values=True):
        pairs.append((key, REDACTED if key.lower() in _SECRET_QUERY_KEYS else value))
    return urlencode(pairs, doseq=True, safe="*")


def redact_url(url: str) -> str:
    """Mask the API key path segment and any secret query parameters."""

    masked = _KEY_SEGMENT_RE.sub(lambda m: f"{m.group(1)}{REDACTED}{m.group(3)}", url or "")
    parsed = urlparse(masked)
    if not parsed.query:
        return masked
    return urlunparse(
        (parsed.scheme, parsed.netloc, parsed.path, parsed.params, _redact_query(parsed.query), parsed.fragment)
    )
