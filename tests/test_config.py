"""Tests for negotiation configuration loading."""

import pytest

from webdriver_caps import config as config_module
from webdriver_caps.config import (
    CONFIG_FILENAME,
    LOCAL_CONFIG_DIR,
    NegotiationConfig,
    load_negotiation_config,
)
from webdriver_caps.protocol.errors import WebDriverError


@pytest.fixture
def global_config(tmp_path, monkeypatch):
    """Point the global config file at a temporary location."""
    path = tmp_path / "home" / LOCAL_CONFIG_DIR / CONFIG_FILENAME
    path.parent.mkdir(parents=True)
    monkeypatch.setattr(config_module, "GLOBAL_CONFIG", path)
    return path


@pytest.fixture
def working_dir(tmp_path):
    """Project directory with an empty local config directory."""
    project = tmp_path / "project"
    (project / LOCAL_CONFIG_DIR).mkdir(parents=True)
    return project


class TestNegotiationConfig:
    """Tests for NegotiationConfig."""

    def test_defaults(self):
        config = NegotiationConfig()
        assert config.extension_prefixes == []
        assert config.accept_proxy is False
        assert config.build_registry().is_empty()

    def test_from_dict(self):
        config = NegotiationConfig.from_dict(
            {"extensionPrefixes": ["moz:", "ladybird:"], "acceptProxy": True}
        )
        assert config.extension_prefixes == ["moz:", "ladybird:"]
        assert config.accept_proxy is True

    @pytest.mark.parametrize(
        "data",
        [
            {"acceptProxy": "false"},
            {"acceptProxy": 1},
            {"extensionPrefixes": None},
            {"extensionPrefixes": "moz:"},
            {"extensionPrefixes": ["moz:", 3]},
        ],
    )
    def test_from_dict_rejects_wrong_types(self, data):
        with pytest.raises(ValueError, match="must be"):
            NegotiationConfig.from_dict(data)

    def test_round_trip(self):
        config = NegotiationConfig(extension_prefixes=["moz:"], accept_proxy=True)
        assert NegotiationConfig.from_dict(config.to_dict()) == config

    def test_build_registry(self):
        registry = NegotiationConfig(
            extension_prefixes=["moz:"], accept_proxy=True
        ).build_registry()
        assert "proxy" in registry
        assert "moz:firefoxOptions" in registry
        assert "goog:chromeOptions" not in registry

    def test_proxy_must_be_object(self):
        registry = NegotiationConfig(accept_proxy=True).build_registry()
        validator = registry.lookup("proxy")
        with pytest.raises(WebDriverError, match="Capability proxy must be an object"):
            validator("proxy", "direct")

    def test_malformed_prefix(self):
        with pytest.raises(ValueError):
            NegotiationConfig(extension_prefixes=["moz"]).build_registry()


class TestLoadNegotiationConfig:
    """Tests for load_negotiation_config."""

    def test_no_files(self, global_config):
        assert load_negotiation_config() == NegotiationConfig()

    def test_global_only(self, global_config):
        global_config.write_text('{"extensionPrefixes": ["moz:"]}')
        config = load_negotiation_config()
        assert config.extension_prefixes == ["moz:"]

    def test_local_overrides_global(self, global_config, working_dir):
        global_config.write_text('{"extensionPrefixes": ["moz:"], "acceptProxy": true}')
        local = working_dir / LOCAL_CONFIG_DIR / CONFIG_FILENAME
        local.write_text('{"extensionPrefixes": ["ladybird:"]}')

        config = load_negotiation_config(working_dir)
        assert config.extension_prefixes == ["ladybird:"]
        assert config.accept_proxy is True

    def test_malformed_file_skipped(self, global_config, working_dir, caplog):
        global_config.write_text("{not json")
        local = working_dir / LOCAL_CONFIG_DIR / CONFIG_FILENAME
        local.write_text('{"acceptProxy": true}')

        config = load_negotiation_config(working_dir)
        assert config.accept_proxy is True
        assert "Ignoring unreadable config file" in caplog.text

    def test_non_object_file_skipped(self, global_config):
        global_config.write_text('["moz:"]')
        assert load_negotiation_config() == NegotiationConfig()

    @pytest.mark.parametrize(
        "content, reason",
        [
            ('{"acceptProxy": "false"}', "acceptProxy must be a boolean"),
            ('{"extensionPrefixes": null}', "extensionPrefixes must be a list of strings"),
            ('{"extensionPrefixes": "moz:"}', "extensionPrefixes must be a list of strings"),
        ],
    )
    def test_wrongly_typed_file_skipped(self, global_config, content, reason, caplog):
        global_config.write_text(content)
        assert load_negotiation_config() == NegotiationConfig()
        assert "Ignoring config file" in caplog.text
        assert reason in caplog.text

    def test_wrongly_typed_local_file_keeps_global(self, global_config, working_dir, caplog):
        global_config.write_text('{"extensionPrefixes": ["moz:"]}')
        local = working_dir / LOCAL_CONFIG_DIR / CONFIG_FILENAME
        local.write_text('{"extensionPrefixes": "ladybird:", "acceptProxy": true}')

        config = load_negotiation_config(working_dir)
        assert config.extension_prefixes == ["moz:"]
        assert config.accept_proxy is False
        assert str(local) in caplog.text
