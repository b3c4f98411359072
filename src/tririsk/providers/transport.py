"""Minimal HTTP transport for the scoring vendor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from urllib.error import URLError
from urllib.request import HTTPErrorProcessor, Request, build_opener

from tririsk.core.errors import TransportError


@dataclass(frozen=True)
class TransportResponse:
    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HttpTransport(Protocol):
    def post(self, url: str, *, timeout_s: float) -> TransportResponse: ...


class _PassThroughErrors(HTTPErrorProcessor):
    # Hand every status back to the caller instead of raising HTTPError.
    def http_response(self, request, response):  # type: ignore[no-untyped-def]
        return response

    https_response = http_response


@dataclass
class UrllibTransport:
    user_agent: str = "tririsk/1.0"
    max_bytes: int = 1_000_000

    def post(self, url: str, *, timeout_s: float) -> TransportResponse:
        request = Request(
            url,
            data=b"",
            method="POST",
            headers={"Accept": "application/json", "User-Agent": self.user_agent},
        )
        opener = build_opener(_PassThroughErrors())
        try:
            with opener.open(request, timeout=timeout_s) as response:
                body = response.read(self.max_bytes + 1)
                status = int(getattr(response, "status", None) or response.getcode() or 0)
        except URLError as exc:
            raise TransportError(f"request failed: {exc.reason}") from exc
        except (TimeoutError, OSError) as exc:
            raise TransportError(f"request failed: {exc}") from exc
        if len(body) > self.max_bytes:
            raise TransportError(f"response exceeded {self.max_bytes} bytes")
        return TransportResponse(status=status, body=body)
