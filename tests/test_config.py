import pytest

from tririsk.config.settings import DEFAULT_BASE_URL, IpqsConfig, load_config
from tririsk.core.errors import ConfigError


def test_load_config_requires_api_key():
    with pytest.raises(ConfigError, match="IPQS_API_KEY"):
        load_config()


def test_load_config_defaults(monkeypatch):
    monkeypatch.setenv("IPQS_API_KEY", "env-key")
    cfg = load_config()
    assert cfg.api_key == "env-key"
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout_s == 10.0
    assert cfg.default_country == "US"
    assert cfg.default_strictness == 2
    assert cfg.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("IPQS_API_KEY", "env-key")
    monkeypatch.setenv("IPQS_BASE_URL", "https://proxy.internal/api/json/")
    monkeypatch.setenv("IPQS_TIMEOUT", "2.5")
    monkeypatch.setenv("IPQS_DEFAULT_COUNTRY", "ca")
    monkeypatch.setenv("IPQS_DEFAULT_STRICTNESS", "0")
    monkeypatch.setenv("TRIRISK_LOG_LEVEL", "DEBUG")
    cfg = load_config()
    assert cfg.base_url == "https://proxy.internal/api/json"
    assert cfg.timeout_s == 2.5
    assert cfg.default_country == "CA"
    assert cfg.default_strictness == 0
    assert cfg.log_level == "DEBUG"


def test_unparseable_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("IPQS_API_KEY", "env-key")
    monkeypatch.setenv("IPQS_TIMEOUT", "soon")
    monkeypatch.setenv("IPQS_DEFAULT_STRICTNESS", "max")
    cfg = load_config()
    assert cfg.timeout_s == 10.0
    assert cfg.default_strictness == 2


def test_out_of_range_strictness_is_config_error(monkeypatch):
    monkeypatch.setenv("IPQS_API_KEY", "env-key")
    monkeypatch.setenv("IPQS_DEFAULT_STRICTNESS", "4")
    with pytest.raises(ConfigError):
        load_config()


def test_yaml_file_and_explicit_overrides(tmp_path, monkeypatch):
    path = tmp_path / "ipqs.yaml"
    path.write_text("api_key: yaml-key\ndefault_country: DE\ntimeout_s: 4\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.api_key == "yaml-key"
    assert cfg.default_country == "DE"
    assert cfg.timeout_s == 4.0

    monkeypatch.setenv("IPQS_DEFAULT_COUNTRY", "FR")
    cfg = load_config(path, default_country="NL")
    assert cfg.default_country == "NL"


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "alt.yaml"
    path.write_text("api_key: alt-key\n", encoding="utf-8")
    monkeypatch.setenv("TRIRISK_DEFAULT_CONFIG_PATH", str(path))
    cfg = load_config()
    assert cfg.api_key == "alt-key"
    assert cfg.default_config_path == str(path)


def test_missing_yaml_file_is_ignored(tmp_path):
    cfg = load_config(tmp_path / "missing.yaml", api_key="k")
    assert cfg.base_url == DEFAULT_BASE_URL


def test_model_rejects_bad_country():
    with pytest.raises(ValueError):
        IpqsConfig(api_key="k", default_country="USA")
