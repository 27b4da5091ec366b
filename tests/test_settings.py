"""Tests for adapter settings loading."""

import pytest

from src.pxyz.config import (
    AdapterSettings,
    get_settings,
    load_settings,
    reset_settings,
)
from src.pxyz.exceptions import AdapterConfigError, AdapterError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the caller's environment and cached settings."""
    for name in ("PXYZ_ADAPTER_CONFIG", "PXYZ_ENDPOINT_URL", "PXYZ_DEFAULT_CURRENCY"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


class TestAdapterSettings:
    """Test settings defaults and parsing."""

    def test_defaults(self):
        settings = AdapterSettings()

        assert settings.endpoint_url == "https://ads.playground.xyz/host-config/prebid?v=2"
        assert settings.default_currency == "USD"
        assert settings.ttl == 300
        assert settings.net_revenue is True

    def test_from_dict_partial(self):
        settings = AdapterSettings.from_dict({"default_currency": "AUD"})

        assert settings.default_currency == "AUD"
        assert settings.ttl == 300

    def test_from_dict_unknown_key(self):
        with pytest.raises(AdapterConfigError, match="Unknown adapter settings"):
            AdapterSettings.from_dict({"endpoint": "https://x"})

    def test_from_dict_invalid_ttl(self):
        with pytest.raises(AdapterConfigError):
            AdapterSettings.from_dict({"ttl": "soon"})
        with pytest.raises(AdapterConfigError):
            AdapterSettings.from_dict({"ttl": 0})

    @pytest.mark.parametrize("ttl", [True, 1.9, "120", None])
    def test_from_dict_ttl_must_be_integer(self, ttl):
        with pytest.raises(AdapterConfigError, match="Invalid ttl"):
            AdapterSettings.from_dict({"ttl": ttl})

    @pytest.mark.parametrize("net_revenue", ["false", "true", 0, 1, None])
    def test_from_dict_net_revenue_must_be_boolean(self, net_revenue):
        with pytest.raises(AdapterConfigError, match="Invalid net_revenue"):
            AdapterSettings.from_dict({"net_revenue": net_revenue})

    def test_from_dict_net_revenue_false(self):
        assert AdapterSettings.from_dict({"net_revenue": False}).net_revenue is False

    def test_quoted_yaml_boolean_rejected(self, tmp_path):
        config_file = tmp_path / "quoted.yaml"
        config_file.write_text('net_revenue: "false"\n')

        with pytest.raises(AdapterConfigError, match="Invalid net_revenue"):
            load_settings(str(config_file))

    def test_config_error_is_adapter_error(self):
        assert issubclass(AdapterConfigError, AdapterError)

    def test_to_dict(self):
        data = AdapterSettings(ttl=120).to_dict()
        assert data["ttl"] == 120
        assert set(data) == {
            "endpoint_url",
            "user_sync_url",
            "default_currency",
            "ttl",
            "net_revenue",
            "adapter_version",
        }


class TestLoadSettings:
    """Test YAML and environment loading."""

    def test_no_file_uses_defaults(self):
        assert load_settings() == AdapterSettings()

    def test_load_yaml_file(self, tmp_path):
        config_file = tmp_path / "pxyz.yaml"
        config_file.write_text(
            "endpoint_url: https://staging.playground.xyz/bid\n"
            "default_currency: AUD\n"
            "ttl: 120\n"
        )

        settings = load_settings(str(config_file))

        assert settings.endpoint_url == "https://staging.playground.xyz/bid"
        assert settings.default_currency == "AUD"
        assert settings.ttl == 120

    def test_load_path_from_env(self, tmp_path, monkeypatch):
        config_file = tmp_path / "pxyz.yaml"
        config_file.write_text("default_currency: EUR\n")
        monkeypatch.setenv("PXYZ_ADAPTER_CONFIG", str(config_file))

        assert load_settings().default_currency == "EUR"

    def test_empty_yaml_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_settings(str(config_file)) == AdapterSettings()

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "pxyz.yaml"
        config_file.write_text("default_currency: AUD\n")
        monkeypatch.setenv("PXYZ_DEFAULT_CURRENCY", "GBP")
        monkeypatch.setenv("PXYZ_ENDPOINT_URL", "https://env.example.com/bid")

        settings = load_settings(str(config_file))

        assert settings.default_currency == "GBP"
        assert settings.endpoint_url == "https://env.example.com/bid"

    def test_missing_file(self, tmp_path):
        with pytest.raises(AdapterConfigError, match="Cannot read"):
            load_settings(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("ttl: [unclosed\n")

        with pytest.raises(AdapterConfigError, match="YAML error"):
            load_settings(str(config_file))

    def test_non_mapping_yaml(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(AdapterConfigError, match="must contain a mapping"):
            load_settings(str(config_file))


class TestGlobalSettings:
    """Test the cached global settings instance."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reset_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("PXYZ_DEFAULT_CURRENCY", "NZD")
        assert get_settings() is first

        reset_settings()
        assert get_settings().default_currency == "NZD"
