"""
WebDriver capability negotiation.

Turns the capabilities of a WebDriver new session request into the
single capability set a session is created with.

Submodules:
- protocol: error codes and the WebDriverError exception
- capabilities: per-field validation, object validation, merging and selection
- config: extension capability configuration
"""

from webdriver_caps.protocol import (
    ErrorCode,
    WebDriverError,
    UnrecognizedCapabilityError,
)
from webdriver_caps.capabilities import (
    CapabilityName,
    CapabilityNegotiator,
    CapabilitySet,
    ExtensionRegistry,
    NegotiationResult,
    TimeoutsConfiguration,
    merge_capabilities,
    negotiate_capabilities,
    negotiate_json,
    validate_capabilities,
    validate_capability,
)
from webdriver_caps.config import NegotiationConfig, load_negotiation_config

__version__ = "0.1.0"

__all__ = [
    # Protocol
    "ErrorCode",
    "WebDriverError",
    "UnrecognizedCapabilityError",
    # Capabilities
    "CapabilityName",
    "CapabilityNegotiator",
    "CapabilitySet",
    "ExtensionRegistry",
    "NegotiationResult",
    "TimeoutsConfiguration",
    "merge_capabilities",
    "negotiate_capabilities",
    "negotiate_json",
    "validate_capabilities",
    "validate_capability",
    # Config
    "NegotiationConfig",
    "load_negotiation_config",
]
