"""Pytest configuration and fixtures."""

import pytest

from webdriver_caps.capabilities.extensions import ExtensionRegistry, passthrough
from webdriver_caps.capabilities.negotiation import CapabilityNegotiator


@pytest.fixture
def registry():
    """Empty extension registry."""
    return ExtensionRegistry()


@pytest.fixture
def vendor_registry():
    """Registry accepting ladybird: capabilities unchanged."""
    registry = ExtensionRegistry()
    registry.register_prefix("ladybird:", passthrough)
    return registry


@pytest.fixture
def negotiator():
    """Negotiator with default extensions and matcher."""
    return CapabilityNegotiator()


@pytest.fixture
def session_parameters():
    """New session request with both always-match and first-match entries."""
    return {
        "capabilities": {
            "alwaysMatch": {
                "acceptInsecureCerts": True,
                "timeouts": {"implicit": 500},
            },
            "firstMatch": [
                {"browserName": "ladybird", "platformName": "linux"},
                {"browserName": "ladybird", "pageLoadStrategy": "eager"},
            ],
        }
    }
