"""Config loader from env + yaml."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tririsk.core.errors import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
DEFAULT_BASE_URL = "https://ipqualityscore.com/api/json"


class IpqsConfig(BaseModel):

    api_key: str = Field(min_length=1)
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout_s: float = Field(default=10.0, gt=0)
    default_country: str = Field(default="US", pattern=r"^[A-Z]{2}$")
    default_strictness: int = Field(default=2, ge=0, le=3)
    log_level: str = Field(default="INFO")
    default_config_path: str = Field(default=str(DEFAULT_CONFIG_PATH))

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") or DEFAULT_BASE_URL

    @field_validator("default_country", mode="before")
    @classmethod
    def _upper_country(cls, value: Any) -> Any:
        return str(value).strip().upper() if value is not None else value


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    return payload if isinstance(payload, dict) else {}


def _pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(name)
    return value if value not in (None, "") else fallback


def _parse_int(raw: Any, fallback: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return fallback


def _parse_float(raw: Any, fallback: float) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return fallback
    return value if value > 0 else fallback


def _parse_str(raw: Any, fallback: str) -> str:
    value = str(raw if raw is not None else "").strip()
    return value or fallback


def _resolve_default_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_default_path = os.getenv("TRIRISK_DEFAULT_CONFIG_PATH")
    if env_default_path:
        return Path(env_default_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None, **overrides: Any) -> IpqsConfig:
    """Build the vendor config from yaml defaults, env vars and explicit overrides.

    Explicit keyword overrides win over env, env wins over yaml. A missing API
    key or an out-of-range strictness raises ``ConfigError``.
    """

    default_path = _resolve_default_config_path(path)
    merged = load_yaml(default_path)

    payload = {
        "api_key": _parse_str(_pick_env("IPQS_API_KEY", merged.get("api_key")), ""),
        "base_url": _parse_str(_pick_env("IPQS_BASE_URL", merged.get("base_url")), DEFAULT_BASE_URL),
        "timeout_s": _parse_float(_pick_env("IPQS_TIMEOUT", merged.get("timeout_s", 10.0)), 10.0),
        "default_country": _parse_str(
            _pick_env("IPQS_DEFAULT_COUNTRY", merged.get("default_country", "US")),
            "US",
        ),
        "default_strictness": _parse_int(
            _pick_env("IPQS_DEFAULT_STRICTNESS", merged.get("default_strictness", 2)),
            2,
        ),
        "log_level": _parse_str(_pick_env("TRIRISK_LOG_LEVEL", merged.get("log_level", "INFO")), "INFO"),
        "default_config_path": str(default_path),
    }
    payload.update({key: value for key, value in overrides.items() if value is not None})

    if not payload["api_key"]:
        raise ConfigError("IPQS_API_KEY is required; set it in the environment or the config file.")
    try:
        return IpqsConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid IPQS configuration: {exc}") from exc
