from __future__ import annotations

import pytest

from support import FakeTransport
from tririsk.config.settings import IpqsConfig
from tririsk.infra.cache import DictCache


@pytest.fixture
def config() -> IpqsConfig:
    return IpqsConfig(api_key="test-key", base_url="https://ipqualityscore.com/api/json")


@pytest.fixture
def cache() -> DictCache:
    return DictCache()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture(autouse=True)
def _clear_vendor_env(monkeypatch):
    for name in (
        "IPQS_API_KEY",
        "IPQS_BASE_URL",
        "IPQS_TIMEOUT",
        "IPQS_DEFAULT_COUNTRY",
        "IPQS_DEFAULT_STRICTNESS",
        "TRIRISK_LOG_LEVEL",
        "TRIRISK_DEFAULT_CONFIG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
