"""Negotiation configuration loading."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import orjson

from webdriver_caps.capabilities.extensions import ExtensionRegistry, passthrough
from webdriver_caps.protocol.errors import WebDriverError

logger = logging.getLogger(__name__)

# Config file locations
CONFIG_FILENAME = "config.json"
LOCAL_CONFIG_DIR = ".webdriver-caps"
GLOBAL_CONFIG = Path.home() / LOCAL_CONFIG_DIR / CONFIG_FILENAME


def _accept_object(name: str, value: Any) -> Any:
    if not isinstance(value, dict):
        raise WebDriverError.invalid_argument(f"Capability {name} must be an object")
    return copy.deepcopy(value)


def _check_config_values(data: dict[str, Any]) -> None:
    """Raise ValueError if a known config key holds the wrong type."""
    if "acceptProxy" in data and not isinstance(data["acceptProxy"], bool):
        raise ValueError("acceptProxy must be a boolean")

    if "extensionPrefixes" in data:
        prefixes = data["extensionPrefixes"]
        if not isinstance(prefixes, list) or not all(isinstance(p, str) for p in prefixes):
            raise ValueError("extensionPrefixes must be a list of strings")


@dataclass
class NegotiationConfig:
    """Which extension capabilities the negotiator accepts."""

    extension_prefixes: list[str] = field(default_factory=list)
    """Vendor prefixes (e.g. "ladybird:") accepted as opaque values."""

    accept_proxy: bool = False
    """Whether to accept the proxy capability as an opaque object."""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NegotiationConfig":
        """
        Create from config dict.

        Raises:
            ValueError: If a value has the wrong type.
        """
        _check_config_values(data)
        return cls(
            extension_prefixes=list(data.get("extensionPrefixes", [])),
            accept_proxy=data.get("acceptProxy", False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to config dict."""
        return {
            "extensionPrefixes": list(self.extension_prefixes),
            "acceptProxy": self.accept_proxy,
        }

    def build_registry(self) -> ExtensionRegistry:
        """
        Build an extension registry from this configuration.

        Raises:
            ValueError: If a configured prefix is malformed.
        """
        registry = ExtensionRegistry()
        if self.accept_proxy:
            registry.register("proxy", _accept_object)
        for prefix in self.extension_prefixes:
            registry.register_prefix(prefix, passthrough)
        return registry


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read one config file, returning an empty dict if it is unusable."""
    try:
        data = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {path}: top level is not an object")
        return {}

    try:
        _check_config_values(data)
    except ValueError as e:
        logger.warning(f"Ignoring config file {path}: {e}")
        return {}
    return data


def load_negotiation_config(working_dir: Path | None = None) -> NegotiationConfig:
    """Load negotiation config from global and local config files.

    Global config (~/.webdriver-caps/config.json) is loaded first.
    Local config ({working_dir}/.webdriver-caps/config.json) overrides
    global keys.

    Returns:
        The merged NegotiationConfig.
    """
    data: dict[str, Any] = {}

    if GLOBAL_CONFIG.exists():
        data.update(_read_config_file(GLOBAL_CONFIG))

    if working_dir:
        local_config = working_dir / LOCAL_CONFIG_DIR / CONFIG_FILENAME
        if local_config.exists():
            data.update(_read_config_file(local_config))

    return NegotiationConfig.from_dict(data)
